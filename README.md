# codeastra

The core of a small code editor: a modal text buffer with comment toggling,
a file manager, a project tree, a main-window model with menus and actions,
and syntax highlighting driven by YAML rule files. A line-oriented command
drives it from a terminal.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Starting the editor

```
codeastra [FILE] [--project DIR]
```

`FILE` is loaded into the editor (an unreadable file prints an error and the
command exits with status 1); `--project DIR` makes `DIR` the root of the
project tree. The command prints the window title (`CodeAstra ~ Code Editor`,
or `CodeAstra ~ <name>` once a file is loaded) and then reads standard input
line by line until end of input:

- A line starting with `:` is a command:
  - `:show` prints the buffer.
  - `:esc` presses Escape (back to normal mode).
  - `:tree` lists the project root, directories first (marked with `/`),
    then files, each group ordered by name regardless of case.
  - `:about` prints the About text.
  - `:q` or `:quit` stops.
  - Any menu entry by its name in lower case: `:new`, `:open project`,
    `:open`, `:save`, `:save as`, `:documentation`, `:about codeastra`.
    `:open`, `:save as`, `:open project` (and `:save` when no file name is
    set) ask for a path on the next input line.
- Any other line is sent to the editor one character at a time, as key
  presses. If the editor was in insert mode and still is at the end of the
  line, a Return is pressed as well.

After each line, new status messages are printed as `[HH:MM:SS] message`,
and the window title is printed again if it changed.

## Editing modes

The editor (`codeastra.editor.CodeEditor`) starts in `Mode.NORMAL`:

| Key           | Effect in normal mode                        |
|---------------|----------------------------------------------|
| `i`           | switch to insert mode                        |
| `a`           | move the cursor left                         |
| `d`           | move the cursor right                        |
| `w`           | move the cursor up                           |
| `x`           | move the cursor down                         |
| anything else | a status message reminding you to press `i`  |

In `Mode.INSERT`, printable keys are typed into the buffer, `Return`/`Enter`,
`Tab`, `Backspace`, `Delete` and the arrow, `Home` and `End` keys do what they
usually do (with `Modifier.SHIFT` the arrows extend the selection), and
`Escape` returns to normal mode. In either mode `Ctrl+/` toggles a comment on
the current line or on every line of the selection, and `Ctrl+Shift+Left`
extends the selection one word to the left:

```python
from codeastra.editor import CodeEditor, Modifier

editor = CodeEditor(file_manager)          # anything with get_file_extension()
editor.set_plain_text("int x = 1;")
editor.key_press("/", Modifier.CONTROL)    # "// int x = 1;" for a .cpp file
```

The comment symbol follows the open file's extension
(`codeastra.editor.comment_symbol_for`):

- `//` for `cpp`, `h`, `hpp`, `c`, `java`, `go`, `json`
- `#` for `py`, `yaml`, `yml`, `sh`, `bash`
- `--` for `sql`

Other extensions are left alone.

`CodeEditor.line_number_area_width(char_width)` gives the width of a
line-number gutter for the current number of lines.

## Files

`codeastra.file_manager.FileManager` opens, loads and saves files for the
editor. It asks for file and directory names through a `Dialogs` object,
which by default prompts with `input()`. Failures to open or save raise
`FileManagerError`. Loading a file attaches a matching syntax highlighter and
sets the window title.

`codeastra.tree.Tree` holds the project root; `Tree.entries()` lists it and
`Tree.open_file(path)` loads a regular file through the file manager,
returning `False` for anything else.

## Syntax highlighting

When a file is loaded, every `*.yaml` and `*.yml` file in the directory named
by the `CONFIG_DIR` environment variable (or `config` when it is unset or
empty) is read, in name order. The first one whose `extensions` list contains
the file's extension supplies the highlighting rules:

```yaml
extensions: [cpp, h]
keywords:
  types:
    - regex: "\\bint\\b"
      color: "#ff0000"
      bold: true
    - regex: "\\bfloat\\b"
      color: "#00ff00"
      italic: true
```

A rule without a `regex` or `color`, with a colour that cannot be parsed, or
with a pattern that does not compile, is skipped. Colours may be `#RGB`,
`#RRGGBB`, `#AARRGGBB`, `#RRRGGGBBB`, `#RRRRGGGGBBBB` or SVG colour names
(`codeastra.syntax.parse_color`).

The same machinery can be used directly:

```python
from codeastra.syntax import Syntax
from codeastra.syntax_manager import create_syntax_highlighter

highlighter = create_syntax_highlighter("cpp", "config")
if highlighter is not None:
    spans = highlighter.highlight_block("int x = 1;")
    # [(start, length, TextFormat), ...], later spans win where they overlap

syntax = Syntax({"keywords": {"types": [{"regex": r"\bint\b", "color": "#ff0000"}]}})
```

## What it does not do

- There is no graphical window: `MainWindow` is a model of the window's
  title, menus, status bar and layout, and the `codeastra` command is a
  line-oriented front end to it.
- Highlighting is computed as spans by `Syntax.highlight_block`; the
  `codeastra` command does not colour its output.
- The `codeastra` command cannot send modifier keys, so comment toggling and
  word selection are reached only through `CodeEditor.key_press` or
  `CodeEditor.add_comment`.
- The project tree only lists and opens files; it does not create, rename or
  delete them.