import pytest
import yaml

from codeastra.syntax_manager import (
    create_highlighter,
    create_syntax_highlighter,
    load_configs,
)

CPP_YAML = """\
extensions: [cpp, h]
keywords:
  types:
    - regex: "\\\\bint\\\\b"
      color: "#ff0000"
      bold: true
"""

PY_YAML = """\
extensions: [py]
keywords:
  kw:
    - regex: "\\\\bdef\\\\b"
      color: blue
    - regex: "\\\\bclass\\\\b"
      color: green
"""


@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / "cpp.yaml").write_text(CPP_YAML)
    (tmp_path / "python.yml").write_text(PY_YAML)
    (tmp_path / "notes.txt").write_text("extensions: [txt]\n")
    (tmp_path / "dir.yaml").mkdir()
    return tmp_path


def test_load_configs_reads_only_yaml_files(config_dir):
    configs = load_configs(config_dir)
    assert configs == [yaml.safe_load(CPP_YAML), yaml.safe_load(PY_YAML)]


def test_load_configs_missing_directory(tmp_path):
    assert load_configs(tmp_path / "absent") == []


def test_load_configs_sorted_case_insensitively(tmp_path):
    (tmp_path / "b.yaml").write_text("extensions: [b]\n")
    (tmp_path / "A.yaml").write_text("extensions: [a]\n")
    (tmp_path / "c.yml").write_text("extensions: [c]\n")
    assert [c["extensions"] for c in load_configs(tmp_path)] == [["a"], ["b"], ["c"]]


def test_load_configs_malformed_yaml_raises(tmp_path):
    (tmp_path / "bad.yaml").write_text("key: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        load_configs(tmp_path)


def test_create_highlighter_matches_extension(config_dir):
    configs = load_configs(config_dir)
    highlighter = create_highlighter(configs, "py")
    assert [r.pattern.pattern for r in highlighter.rules] == [r"\bdef\b", r"\bclass\b"]


def test_create_highlighter_second_extension_in_list(config_dir):
    highlighter = create_highlighter(load_configs(config_dir), "h")
    assert [r.pattern.pattern for r in highlighter.rules] == [r"\bint\b"]


def test_create_highlighter_no_match(config_dir):
    assert create_highlighter(load_configs(config_dir), "rs") is None


def test_create_highlighter_is_case_sensitive(config_dir):
    assert create_highlighter(load_configs(config_dir), "CPP") is None


def test_create_highlighter_first_match_wins():
    configs = [
        {"keywords": {"k": [{"regex": "x", "color": "red"}]}},
        {"extensions": ["go"], "keywords": {"k": [{"regex": "first", "color": "red"}]}},
        {"extensions": ["go"], "keywords": {"k": [{"regex": "second", "color": "red"}]}},
    ]
    highlighter = create_highlighter(configs, "go")
    assert [r.pattern.pattern for r in highlighter.rules] == ["first"]


def test_create_highlighter_ignores_non_mapping_configs():
    assert create_highlighter([None, "text", ["py"]], "py") is None


def test_create_syntax_highlighter_explicit_dir(config_dir):
    highlighter = create_syntax_highlighter("cpp", config_dir)
    assert highlighter.rules[0].text_format.bold is True


def test_create_syntax_highlighter_uses_env(config_dir, monkeypatch):
    monkeypatch.setenv("CONFIG_DIR", str(config_dir))
    highlighter = create_syntax_highlighter("py")
    assert len(highlighter.rules) == 2


def test_create_syntax_highlighter_default_dir(config_dir, tmp_path, monkeypatch):
    monkeypatch.delenv("CONFIG_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    assert create_syntax_highlighter("cpp") is None
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "cpp.yaml").write_text(CPP_YAML)
    assert len(create_syntax_highlighter("cpp").rules) == 1