"""Local filesystem adapter."""

from .local import LocalFileSystem, default_filesystem

__all__ = ["LocalFileSystem", "default_filesystem"]
