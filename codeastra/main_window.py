"""Main window model: menus, actions, status bar and the command-line entry point."""

from __future__ import annotations

import argparse
import html
import platform
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from codeastra.editor import CodeEditor, Mode
from codeastra.file_manager import FileManager, FileManagerError
from codeastra.tree import Tree

APP_NAME = "CodeAstra"
APP_VERSION = "0.1.0"
DEFAULT_TITLE = "CodeAstra ~ Code Editor"
STATUS_TIMEOUT_MS = 4000
TAB_WIDTH_SPACES = 4
DOCUMENTATION_MESSAGE = "Documentation is available on the project wiki."


@dataclass
class Action:
    """A menu entry with shortcuts, a status tip and a slot run when triggered."""

    text: str
    shortcuts: list[str] = field(default_factory=list)
    status_tip: str = ""
    slot: Callable[[], Any] | None = None
    separator: bool = False

    def trigger(self) -> None:
        if self.slot is not None:
            self.slot()


@dataclass
class Menu:
    """A titled list of actions and separators."""

    title: str
    object_name: str = ""
    actions: list[Action] = field(default_factory=list)

    def add_action(self, action: Action) -> Action:
        self.actions.append(action)
        return action

    def add_separator(self) -> None:
        self.actions.append(Action("", separator=True))


@dataclass
class _Splitter:
    widgets: list[Any] = field(default_factory=list)
    sizes: list[int] = field(default_factory=list)
    stretch_factors: list[int] = field(default_factory=list)
    handle_width: int = 0
    children_collapsible: bool = True
    opaque_resize: bool = False


class MainWindow:
    """Holds the editor, the file tree and the menus of the application."""

    def __init__(self, file_manager: FileManager | None = None) -> None:
        self.file_manager = file_manager if file_manager is not None else FileManager()
        self.editor = CodeEditor(self.file_manager)
        self.tree: Tree | None = None
        self.central_widget: _Splitter | None = None
        self.menu_bar: list[Menu] = []
        self.status_message = ""
        self.status_log: list[str] = []
        self.status_timeout_ms = STATUS_TIMEOUT_MS
        self.tab_width = TAB_WIDTH_SPACES
        self.line_wrap = False

        self.file_manager.initialize(self.editor, self)
        self.window_title = DEFAULT_TITLE
        self.editor.status_message_changed.connect(self.show_status_message)

        self.init_tree()
        self._create_menu_bar()

    def init_tree(self) -> None:
        """Place the file tree and the editor side by side."""
        self.tree = Tree(self.file_manager)
        self.central_widget = _Splitter(
            widgets=[self.tree, self.editor],
            sizes=[150, 800],
            stretch_factors=[1, 3],
            handle_width=5,
            children_collapsible=False,
            opaque_resize=True,
        )

    def create_action(
        self,
        text: str,
        shortcut: str,
        status_tip: str,
        slot: Callable[[], Any],
    ) -> Action:
        """Build an action with one shortcut."""
        return Action(text=text, shortcuts=[shortcut], status_tip=status_tip, slot=slot)

    def show_status_message(self, message: str) -> str:
        """Show *message* in the status bar with a timestamp and return it."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.status_message = f"[{timestamp}] {message}"
        self.status_log.append(self.status_message)
        return self.status_message

    def show_about(self) -> str:
        """Return the text of the About box."""
        return (
            "<p style='text-align:center;'>"
            f"<b>{html.escape(APP_NAME)}</b><br>"
            f"Version: {html.escape(APP_VERSION)}<br><br>"
            f"Built with Python {platform.python_version()}."
            "</p>"
        )

    def _create_menu_bar(self) -> None:
        file_menu = Menu("File", "File")
        help_menu = Menu("Help", "Help")
        app_menu = Menu(APP_NAME, APP_NAME)
        self._create_file_actions(file_menu)
        self._create_help_actions(help_menu)
        self._create_app_actions(app_menu)
        self.menu_bar = [file_menu, help_menu, app_menu]

    def _create_file_actions(self, menu: Menu) -> None:
        fm = self.file_manager
        menu.add_action(self.create_action("&New", "Ctrl+N", "Create a new file", fm.new_file))
        menu.add_separator()
        menu.add_action(
            self.create_action("&Open &Project", "Ctrl+Shift+O", "Open a project", self._open_project)
        )
        menu.add_action(self.create_action("&Open", "Ctrl+O", "Open an existing file", fm.open_file))
        menu.add_separator()
        menu.add_action(self.create_action("&Save", "Ctrl+S", "Save the current file", fm.save_file))
        menu.add_action(
            self.create_action("Save &As", "Ctrl+Shift+S", "Save the file with a new name", fm.save_file_as)
        )

    def _create_help_actions(self, menu: Menu) -> None:
        menu.add_action(
            Action(
                "Documentation",
                status_tip="Open Wiki",
                slot=lambda: self.show_status_message(DOCUMENTATION_MESSAGE),
            )
        )

    def _create_app_actions(self, menu: Menu) -> None:
        menu.add_action(Action(f"About {APP_NAME}", slot=self.show_about))

    def _open_project(self) -> None:
        project_path = self.file_manager.get_directory_path()
        if project_path and self.tree is not None:
            self.tree.initialize(project_path)


def _type_line(editor: CodeEditor, line: str) -> None:
    was_insert = editor.mode is Mode.INSERT
    for char in line:
        editor.key_press(char)
    if was_insert and editor.mode is Mode.INSERT:
        editor.key_press("Return")


def _run_command(window: MainWindow, actions: dict[str, Action], name: str) -> None:
    if name == "show":
        print(window.editor.to_plain_text())
    elif name == "esc":
        window.editor.key_press("Escape")
    elif name == "tree":
        if window.tree is None or window.tree.root_path is None:
            print("No project is open.", file=sys.stderr)
            return
        for entry in window.tree.entries():
            print(entry.name + ("/" if entry.is_dir() else ""))
    elif name in ("about", f"about {APP_NAME.lower()}"):
        print(window.show_about())
    elif name in actions:
        actions[name].trigger()
    else:
        print(f"Unknown command: {name}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run the editor on standard input: ``:command`` lines or keys to type."""
    parser = argparse.ArgumentParser(prog="codeastra", description="Modal code editor.")
    parser.add_argument("file", nargs="?", help="file to open")
    parser.add_argument("--project", help="project directory to show in the tree")
    args = parser.parse_args(argv)

    file_manager = FileManager()
    window = MainWindow(file_manager)
    if args.file:
        try:
            file_manager.current_file_name = args.file
            file_manager.load_file_in_editor(args.file)
        except FileManagerError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    if args.project:
        window.tree.initialize(args.project)

    actions = {
        action.text.replace("&", "").lower(): action
        for menu in window.menu_bar
        for action in menu.actions
        if not action.separator
    }
    print(window.window_title)
    printed = len(window.status_log)
    while True:
        try:
            line = input()
        except EOFError:
            break
        title = window.window_title
        if line.startswith(":"):
            name = line[1:].strip().lower()
            if name in ("q", "quit"):
                break
            try:
                _run_command(window, actions, name)
            except FileManagerError as exc:
                print(f"Error: {exc}", file=sys.stderr)
        else:
            _type_line(window.editor, line)
        for message in window.status_log[printed:]:
            print(message)
        printed = len(window.status_log)
        if window.window_title != title:
            print(window.window_title)
    return 0