"""Core filesystem operations: cascade creation, directory links and tree deletion."""

from .cascade import ensure_dirs, ensure_dirs_for_file
from .ports import FilesystemPort
from .symlinks import link_directory, unlink_directory
from .tree import delete_tree

__all__ = [
    "FilesystemPort",
    "delete_tree",
    "ensure_dirs",
    "ensure_dirs_for_file",
    "link_directory",
    "unlink_directory",
]
