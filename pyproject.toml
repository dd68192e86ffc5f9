[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codeastra"
version = "0.1.0"
description = "A small code editor core with modal editing, comment toggling and YAML-driven syntax highlighting"
requires-python = ">=3.10"
keywords = ["editor", "code-editor", "syntax-highlighting", "yaml", "modal-editing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
codeastra = "codeastra.main_window:main"

[tool.hatch.build.targets.wheel]
packages = ["codeastra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
