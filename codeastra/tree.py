"""File tree of a project directory that opens files in the editor."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class Tree:
    """Browses a project directory and opens its files through a file manager."""

    def __init__(self, file_manager: Any) -> None:
        self.file_manager = file_manager
        self.root_path: Path | None = None

    def initialize(self, directory: str | os.PathLike[str]) -> None:
        """Make *directory* the root of the tree."""
        self.root_path = Path(directory)

    def entries(self, directory: str | os.PathLike[str] | None = None) -> list[Path]:
        """List every entry of *directory* (the root by default), hidden ones included.

        Directories come first, then files, each group ordered by name without
        regard to case. A directory that does not exist has no entries.
        """
        if directory is None:
            if self.root_path is None:
                raise ValueError("the tree has no root directory")
            directory = self.root_path
        path = Path(directory)
        if not path.is_dir():
            return []
        return sorted(path.iterdir(), key=lambda p: (not p.is_dir(), p.name.lower()))

    def open_file(self, path: str | os.PathLike[str] | None) -> bool:
        """Load *path* into the editor if it is an existing regular file.

        Returns whether the file was opened.
        """
        if path is None or not Path(path).is_file():
            logger.warning("Selected entry is not a valid file: %s", path)
            return False
        file_path = os.fspath(path)
        self.file_manager.current_file_name = file_path
        self.file_manager.load_file_in_editor(file_path)
        return True