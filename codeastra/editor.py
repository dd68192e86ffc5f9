"""Modal plain-text editor model with line commenting and cursor movement."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)

_LINE_NUMBER_MARGIN = 3
_LINE_NUMBER_PADDING = 15

_COMMENT_SYMBOLS = {
    **dict.fromkeys(("cpp", "h", "hpp", "c", "java", "go", "json"), "//"),
    **dict.fromkeys(("py", "yaml", "yml", "sh", "bash"), "#"),
    "sql": "--",
}

INSERT_MODE_MESSAGE = "Insert mode activated"
NORMAL_MODE_MESSAGE = "Normal mode activated. Press 'escape' to return to normal mode."
NOT_INSERT_MESSAGE = "Insert mode is not active. Press 'i' to enter insert mode."


class Mode(enum.Enum):
    """Editing mode of the editor."""

    NORMAL = "normal"
    INSERT = "insert"


class Modifier(enum.Flag):
    """Keyboard modifiers held while a key is pressed."""

    NONE = 0
    CONTROL = 1
    SHIFT = 2
    ALT = 4


class _ExtensionSource(Protocol):
    def get_file_extension(self) -> str: ...


class _Signal:
    """Minimal callback list that forwards emitted values to its slots."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


def comment_symbol_for(extension: str) -> str | None:
    """Return the line comment symbol for a file extension, or None."""
    return _COMMENT_SYMBOLS.get(extension)


class CodeEditor:
    """Text buffer with a cursor, NORMAL/INSERT modes and comment toggling.

    ``cursor`` is the cursor position and ``anchor`` the other end of the
    selection; they are equal when nothing is selected.
    """

    def __init__(self, file_manager: _ExtensionSource | None = None) -> None:
        self.file_manager = file_manager
        self.mode = Mode.NORMAL
        self.cursor = 0
        self.anchor = 0
        self.highlighter: Any = None
        self.status_message_changed = _Signal()
        self._text = ""

    # -- buffer -----------------------------------------------------------

    def set_plain_text(self, text: str) -> None:
        """Replace the whole text and put the cursor at the start."""
        self._text = text
        self.cursor = 0
        self.anchor = 0

    def to_plain_text(self) -> str:
        return self._text

    def block_count(self) -> int:
        """Number of lines (blocks) in the document."""
        return self._text.count("\n") + 1

    @property
    def has_selection(self) -> bool:
        return self.cursor != self.anchor

    @property
    def selected_text(self) -> str:
        start, end = sorted((self.cursor, self.anchor))
        return self._text[start:end]

    def _block_start(self, pos: int) -> int:
        return self._text.rfind("\n", 0, pos) + 1

    def _block_end(self, pos: int) -> int:
        end = self._text.find("\n", pos)
        return len(self._text) if end == -1 else end

    def _block_number(self, pos: int) -> int:
        return self._text.count("\n", 0, pos)

    def _insert(self, pos: int, text: str) -> int:
        """Insert *text* at *pos*, shift the editor cursor, return the end position."""
        self._text = self._text[:pos] + text + self._text[pos:]
        size = len(text)
        if self.cursor >= pos:
            self.cursor += size
        if self.anchor >= pos:
            self.anchor += size
        return pos + size

    def _remove(self, start: int, end: int) -> None:
        self._text = self._text[:start] + self._text[end:]
        size = end - start

        def adjust(p: int) -> int:
            if p >= end:
                return p - size
            return start if p > start else p

        self.cursor = adjust(self.cursor)
        self.anchor = adjust(self.anchor)

    def _remove_selection(self) -> None:
        start, end = sorted((self.cursor, self.anchor))
        if start != end:
            self._remove(start, end)

    # -- cursor movement --------------------------------------------------

    def _vertical_target(self, pos: int, step: int) -> int | None:
        start = self._block_start(pos)
        column = pos - start
        if step < 0:
            if start == 0:
                return None
            target_start = self._block_start(start - 1)
        else:
            end = self._block_end(pos)
            if end == len(self._text):
                return None
            target_start = end + 1
        return min(target_start + column, self._block_end(target_start))

    def _word_left(self, pos: int) -> int:
        while pos > 0 and self._text[pos - 1].isspace():
            pos -= 1
        if pos > 0 and (self._text[pos - 1].isalnum() or self._text[pos - 1] == "_"):
            while pos > 0 and (self._text[pos - 1].isalnum() or self._text[pos - 1] == "_"):
                pos -= 1
        elif pos > 0:
            pos -= 1
        return pos

    def _move(self, operation: str, keep_anchor: bool = False) -> None:
        pos = self.cursor
        target: int | None
        if operation == "Left":
            target = pos - 1 if pos > 0 else None
        elif operation == "Right":
            target = pos + 1 if pos < len(self._text) else None
        elif operation == "Up":
            target = self._vertical_target(pos, -1)
        elif operation == "Down":
            target = self._vertical_target(pos, 1)
        elif operation == "Home":
            target = self._block_start(pos)
        elif operation == "End":
            target = self._block_end(pos)
        elif operation == "WordLeft":
            target = self._word_left(pos)
        else:
            raise ValueError(f"unknown cursor operation: {operation!r}")
        if target is None:
            return
        self.cursor = target
        if not keep_anchor:
            self.anchor = target

    # -- keys -------------------------------------------------------------

    def key_press(self, key: str, modifiers: Modifier = Modifier.NONE) -> None:
        """Handle one key press.

        Single characters name printable keys; other keys use names such as
        ``"Escape"``, ``"Left"``, ``"Backspace"`` or ``"Return"``.
        """
        if modifiers == (Modifier.CONTROL | Modifier.SHIFT) and key == "Left":
            self._move("WordLeft", keep_anchor=True)
            return
        if modifiers == Modifier.CONTROL and key == "/":
            self.add_comment()
            return

        if self.mode is Mode.NORMAL:
            command = key.lower() if len(key) == 1 else key
            if command == "i":
                self.mode = Mode.INSERT
                self.status_message_changed.emit(INSERT_MODE_MESSAGE)
            elif command == "a":
                self._move("Left")
            elif command == "d":
                self._move("Right")
            elif command == "x":
                self._move("Down")
            elif command == "w":
                self._move("Up")
            else:
                self.status_message_changed.emit(NOT_INSERT_MESSAGE)
        elif key == "Escape":
            self.mode = Mode.NORMAL
            self.status_message_changed.emit(NORMAL_MODE_MESSAGE)
        else:
            self._edit_key(key, modifiers)

    def _edit_key(self, key: str, modifiers: Modifier) -> None:
        if key in ("Left", "Right", "Up", "Down", "Home", "End"):
            self._move(key, keep_anchor=Modifier.SHIFT in modifiers)
        elif key == "Backspace":
            if self.has_selection:
                self._remove_selection()
            elif self.cursor > 0:
                self._remove(self.cursor - 1, self.cursor)
        elif key == "Delete":
            if self.has_selection:
                self._remove_selection()
            elif self.cursor < len(self._text):
                self._remove(self.cursor, self.cursor + 1)
        elif key in ("Return", "Enter"):
            self._type("\n")
        elif key == "Tab":
            self._type("\t")
        elif len(key) == 1 and not modifiers & (Modifier.CONTROL | Modifier.ALT):
            self._type(key)

    def _type(self, text: str) -> None:
        self._remove_selection()
        self._insert(self.cursor, text)

    # -- commenting -------------------------------------------------------

    def add_comment(self) -> None:
        """Toggle line comments on the selected lines or the current line."""
        extension = self.file_manager.get_file_extension() if self.file_manager else ""
        logger.debug("File Extension: %s", extension)
        symbol = comment_symbol_for(extension)
        if symbol is None:
            logger.debug("Unsupported file extension for commenting.")
            return
        if self.has_selection:
            self._comment_selection(symbol)
        else:
            self._comment_line(symbol)

    def _comment_selection(self, symbol: str) -> None:
        start, end = sorted((self.cursor, self.anchor))
        first_block = self._block_number(start)
        last_block = self._block_number(end)
        pos = start
        for _ in range(first_block, last_block + 1):
            pos = self._block_start(pos)
            line = self._text[pos:self._block_end(pos)]
            if line.startswith(symbol):
                self._remove(pos, min(pos + len(symbol) + 1, len(self._text)))
            else:
                pos = self._insert(pos, symbol + " ")
            next_break = self._text.find("\n", pos)
            if next_break != -1:
                pos = next_break + 1

    def _comment_line(self, symbol: str) -> None:
        start = self._block_start(self.cursor)
        end = self._block_end(self.cursor)
        line = self._text[start:end]
        if line.startswith(symbol):
            replacement = line[len(symbol) + 1:]
        else:
            replacement = symbol + " " + line
        self._remove(start, end)
        self._insert(start, replacement)

    # -- layout -----------------------------------------------------------

    def line_number_area_width(self, char_width: int) -> int:
        """Width of the line-number gutter for digits *char_width* wide."""
        digits = len(str(max(1, self.block_count())))
        return _LINE_NUMBER_MARGIN + char_width * digits + _LINE_NUMBER_PADDING