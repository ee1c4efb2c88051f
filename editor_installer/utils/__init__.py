"""Utility functions for editor-installer"""

from .file_utils import (
    path_present,
    remove_path,
    copy_path,
    link_path,
    common_root,
)

__all__ = [
    "path_present",
    "remove_path",
    "copy_path",
    "link_path",
    "common_root",
]
