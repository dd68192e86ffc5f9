"""Selection of a syntax highlighter from YAML files by file extension."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from codeastra.syntax import Syntax

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = "config"
_SUFFIXES = (".yaml", ".yml")


def load_configs(config_dir: str | os.PathLike[str]) -> list[Any]:
    """Load every ``*.yaml``/``*.yml`` file in *config_dir*, sorted by name.

    A missing directory yields an empty list; unreadable files are skipped.
    Malformed YAML raises ``yaml.YAMLError``.
    """
    directory = Path(config_dir)
    logger.debug("Directory being scanned: %s", directory.absolute())
    if not directory.is_dir():
        logger.debug("Directory does not exist.")
        return []

    paths = sorted(
        (p for p in directory.iterdir() if p.is_file() and p.name.endswith(_SUFFIXES)),
        key=lambda p: p.name.lower(),
    )
    configs = []
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            logger.debug("Failed to open file: %s", path)
            continue
        configs.append(yaml.safe_load(text))
        logger.debug("Loaded YAML from: %s", path)
    return configs


def create_highlighter(configs: Iterable[Any], extension: str) -> Syntax | None:
    """Return a Syntax for the first config listing *extension*, else None."""
    logger.debug("Creating highlighter for extension: %s", extension)
    for node in configs:
        if not isinstance(node, Mapping) or "extensions" not in node:
            logger.debug("No extensions key in YAML config.")
            continue
        extensions = node["extensions"]
        if not isinstance(extensions, list):
            continue
        for ext in extensions:
            if ext is None or isinstance(ext, (Mapping, list)):
                continue
            if str(ext) == extension:
                return Syntax(node)
    logger.debug("No matching highlighter found for extension: %s", extension)
    return None


def create_syntax_highlighter(
    extension: str, config_dir: str | os.PathLike[str] | None = None
) -> Syntax | None:
    """Build a highlighter for *extension* from the configuration directory.

    The directory defaults to ``$CONFIG_DIR`` or, if unset or empty, ``config``.
    """
    if config_dir is None:
        config_dir = os.environ.get("CONFIG_DIR") or DEFAULT_CONFIG_DIR
    return create_highlighter(load_configs(config_dir), extension)