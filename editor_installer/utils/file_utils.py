# editor_installer/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
from pathlib import Path
from typing import Optional


def path_present(path: Path) -> bool:
    """
    Check if anything occupies a path

    A dangling symbolic link counts as present.

    Args:
        path: Path to check

    Returns:
        True if a file, directory or link exists at path
    """
    return path.exists() or path.is_symlink()


def remove_path(path: Path) -> None:
    """
    Remove file, link or directory

    Links are removed without touching their target.

    Args:
        path: Path to remove
    """
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def copy_path(src: Path, dst: Path) -> None:
    """
    Copy a file or a directory tree

    Args:
        src: Source file or directory
        dst: Destination path (must not exist)
    """
    dst.parent.mkdir(parents=True, exist_ok=True)

    if src.is_dir():
        shutil.copytree(src, dst, symlinks=True)
    else:
        shutil.copy2(src, dst)


def link_path(src: Path, dst: Path) -> Path:
    """
    Create a symbolic link to the absolute form of src

    Args:
        src: Link target
        dst: Link location (must not exist)

    Returns:
        The absolute target written into the link
    """
    target = Path(os.path.abspath(src))
    dst.parent.mkdir(parents=True, exist_ok=True)
    dst.symlink_to(target, target_is_directory=target.is_dir())
    return target


def common_root(*paths: Path) -> Optional[Path]:
    """
    Deepest directory containing every path

    Args:
        paths: Absolute directory paths

    Returns:
        Common directory or None if the paths share nothing
    """
    try:
        return Path(os.path.commonpath([str(p) for p in paths]))
    except ValueError:
        return None
