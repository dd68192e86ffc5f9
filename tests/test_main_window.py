import io
import re
import sys

import pytest

from codeastra.editor import CodeEditor
from codeastra.file_manager import Dialogs, FileManager
from codeastra.main_window import Action, MainWindow, Menu, main


@pytest.fixture(autouse=True)
def empty_config(tmp_path, monkeypatch):
    config = tmp_path / "config"
    config.mkdir()
    monkeypatch.setenv("CONFIG_DIR", str(config))


def _window(answer=""):
    return MainWindow(FileManager(dialogs=Dialogs(lambda prompt: answer)))


def _action(window, menu_name, text):
    menu = next(m for m in window.menu_bar if m.object_name == menu_name)
    return next(a for a in menu.actions if a.text == text)


def test_window_title():
    assert _window().window_title == "CodeAstra ~ Code Editor"


def test_editor_initialization():
    window = _window()
    assert isinstance(window.editor, CodeEditor)
    assert window.file_manager.editor is window.editor
    assert window.file_manager.main_window is window


def test_menu_bar():
    window = _window()
    assert len(window.menu_bar) == 3
    assert [m.title for m in window.menu_bar] == ["File", "Help", "CodeAstra"]
    assert [m.object_name for m in window.menu_bar] == ["File", "Help", "CodeAstra"]


def test_init_tree():
    window = _window()
    splitter = window.central_widget
    assert splitter.handle_width == 5
    assert splitter.children_collapsible is False
    assert splitter.opaque_resize is True
    assert len(splitter.sizes) == 2
    assert splitter.widgets == [window.tree, window.editor]


def test_create_action():
    window = _window()
    called = []
    action = window.create_action(
        "Test Action", "Ctrl+T", "This is a test action", lambda: called.append(True)
    )
    assert action.text == "Test Action"
    assert action.shortcuts[0] == "Ctrl+T"
    assert action.status_tip == "This is a test action"
    action.trigger()
    assert called == [True]


def test_file_menu_actions():
    window = _window()
    texts = [a.text for a in window.menu_bar[0].actions if not a.separator]
    assert texts == ["&New", "&Open &Project", "&Open", "&Save", "Save &As"]


def test_menu_separator():
    menu = Menu("Edit", "Edit")
    menu.add_action(Action("Cut"))
    menu.add_separator()
    assert [a.separator for a in menu.actions] == [False, True]


def test_status_message_has_timestamp():
    window = _window()
    message = window.show_status_message("hello")
    assert re.fullmatch(r"\[\d{2}:\d{2}:\d{2}\] hello", message)
    assert window.status_message == message
    assert window.status_timeout_ms == 4000


def test_editor_status_reaches_window():
    window = _window()
    window.editor.key_press("i")
    assert window.status_message.endswith("Insert mode activated")


def test_about_text():
    text = _window().show_about()
    assert "<b>CodeAstra</b>" in text
    assert "Version: 0.1.0" in text


def test_open_project_action(tmp_path):
    window = _window(str(tmp_path))
    _action(window, "File", "&Open &Project").trigger()
    assert window.tree.root_path == tmp_path


def test_open_project_cancelled_keeps_tree_empty():
    window = _window("")
    _action(window, "File", "&Open &Project").trigger()
    assert window.tree.root_path is None


def test_save_as_action_writes_file(tmp_path):
    target = tmp_path / "out.txt"
    window = _window(str(target))
    window.editor.set_plain_text("content")
    _action(window, "File", "Save &As").trigger()
    assert target.read_text(encoding="utf-8") == "content"
    assert window.status_message.endswith("File saved successfully.")


def test_documentation_action_status():
    window = _window()
    action = _action(window, "Help", "Documentation")
    action.trigger()
    assert action.status_tip == "Open Wiki"
    assert window.status_message.endswith("Documentation is available on the project wiki.")


def test_main_edits_and_saves(tmp_path, monkeypatch, capsys):
    path = tmp_path / "a.txt"
    path.write_text("abc", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("i\nhello\n:save\n:q\n"))
    assert main([str(path)]) == 0
    assert path.read_text(encoding="utf-8") == "hello\nabc"
    out = capsys.readouterr().out
    assert "CodeAstra ~ a.txt" in out
    assert "File saved successfully." in out


def test_main_lists_project(tmp_path, monkeypatch, capsys):
    (tmp_path / "project").mkdir()
    (tmp_path / "project" / "x.py").write_text("", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO(":tree\n"))
    assert main(["--project", str(tmp_path / "project")]) == 0
    assert "x.py" in capsys.readouterr().out.splitlines()


def test_main_missing_file_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Cannot open file" in capsys.readouterr().err