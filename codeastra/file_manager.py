"""Opening, loading and saving files for the editor."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from codeastra.syntax_manager import create_syntax_highlighter

logger = logging.getLogger(__name__)

FILE_FILTER = "All Files (*);;C++ Files (*.cpp *.h);;Text Files (*.txt)"
TITLE_PREFIX = "CodeAstra ~ "


class FileManagerError(Exception):
    """Raised when a file cannot be opened or saved."""


class Dialogs:
    """Asks the user for file and directory names through a prompt function."""

    def __init__(self, input_func: Callable[[str], str] = input) -> None:
        self._input = input_func

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def get_save_file_name(self, caption: str, file_filter: str) -> str:
        return self._ask(f"{caption} ({file_filter}): ")

    def get_open_file_name(self, caption: str, file_filter: str) -> str:
        return self._ask(f"{caption} ({file_filter}): ")

    def get_existing_directory(self, caption: str, start_dir: str) -> str:
        return self._ask(f"{caption} [{start_dir}]: ")


class FileManager:
    """Performs file operations on behalf of an editor and its window."""

    def __init__(
        self,
        editor: Any = None,
        main_window: Any = None,
        dialogs: Dialogs | None = None,
    ) -> None:
        self.editor = editor
        self.main_window = main_window
        self.dialogs = dialogs if dialogs is not None else Dialogs()
        self.current_file_name = ""
        self.highlighter: Any = None
        logger.debug("FileManager initialized.")

    def initialize(self, editor: Any, main_window: Any) -> None:
        self.editor = editor
        self.main_window = main_window

    def get_file_extension(self) -> str:
        """Lower-cased suffix of the current file name, or an empty string."""
        if not self.current_file_name:
            logger.debug("No file name set")
            return ""
        name = Path(self.current_file_name).name
        return name.rsplit(".", 1)[1].lower() if "." in name else ""

    def new_file(self) -> None:
        """Start an unnamed, empty document."""
        self.current_file_name = ""
        self.highlighter = None
        if self.editor is not None:
            self.editor.set_plain_text("")
            self.editor.highlighter = None

    def save_file(self) -> None:
        """Write the editor text to the current file, asking for a name if unset."""
        if not self.current_file_name:
            self.save_file_as()
            return
        if self.editor is None:
            raise FileManagerError("Editor is not initialized.")
        logger.debug("Saving file: %s", self.current_file_name)
        try:
            with open(self.current_file_name, "w", encoding="utf-8") as handle:
                handle.write(self.editor.to_plain_text())
        except OSError as exc:
            raise FileManagerError(f"Cannot save file: {exc.strerror or exc}") from exc
        self.editor.status_message_changed.emit("File saved successfully.")

    def save_file_as(self) -> None:
        """Ask for a file name and save under it."""
        extension = self.get_file_extension()
        file_filter = FILE_FILTER
        if extension:
            file_filter = f"{extension.upper()} Files (*.{extension});;{file_filter}"
        file_name = self.dialogs.get_save_file_name("Save File As", file_filter)
        if file_name:
            self.current_file_name = file_name
            self.save_file()

    def open_file(self) -> None:
        """Ask for a file and load it into the editor."""
        file_name = self.dialogs.get_open_file_name("Open File", FILE_FILTER)
        if not file_name:
            logger.debug("No file selected.")
            return
        logger.debug("Opening file: %s", file_name)
        self.current_file_name = file_name
        self.load_file_in_editor(file_name)

    def load_file_in_editor(self, file_path: str) -> None:
        """Load *file_path* into the editor and attach a matching highlighter."""
        logger.debug("Loading file: %s", file_path)
        try:
            with open(file_path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise FileManagerError(f"Cannot open file: {exc.strerror or exc}") from exc
        if self.editor is None:
            raise FileManagerError("Editor is not initialized.")
        self.editor.set_plain_text(text)
        self.highlighter = create_syntax_highlighter(self.get_file_extension())
        self.editor.highlighter = self.highlighter

        if self.main_window is not None:
            self.main_window.window_title = TITLE_PREFIX + Path(file_path).name
        else:
            logger.warning("MainWindow is not initialized in FileManager.")

    def get_directory_path(self) -> str:
        """Ask for a project directory, starting from the home directory."""
        return self.dialogs.get_existing_directory("Open Directory", str(Path.home()))