"""Code editor core: modal editing, file handling, project tree and YAML-driven highlighting."""

__version__ = "0.1.0"
__all__ = ["__version__"]