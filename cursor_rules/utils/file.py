"""
File Utility Functions
==================

This module provides the filesystem primitives the deployment steps are
built from. Errors are never swallowed here: an ``OSError`` raised by the
operating system propagates to the caller unchanged.
"""

import shutil
from pathlib import Path

from loguru import logger


def ensure_dir(dir_path: str | Path) -> bool:
    """
    Ensure a directory exists, creating missing parents.

    Args:
        dir_path: Directory to create

    Returns:
        bool: True if the directory was created, False if it already existed
    """
    path = Path(dir_path)
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Created directory {path}")
    return True


def ensure_file_exists(file_path: str | Path, content: str | None = None) -> bool:
    """
    Ensure a file exists, optionally creating it with content.

    Args:
        file_path: Path to the file
        content: Optional content to write if file doesn't exist

    Returns:
        bool: True if the file was created, False if it already existed
    """
    path = Path(file_path)
    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content or "", encoding="utf-8")
    logger.debug(f"Created file {path}")
    return True


def copy_if_missing(src: str | Path, dst: str | Path) -> bool:
    """
    Copy a file unless the destination already exists.

    Args:
        src: File to copy
        dst: Destination file path

    Returns:
        bool: True if the file was copied, False if the destination was kept
    """
    destination = Path(dst)
    if destination.exists():
        logger.debug(f"Keeping existing {destination}")
        return False

    shutil.copy2(src, destination)
    logger.debug(f"Copied {src} -> {destination}")
    return True


def copy_tree(src: str | Path, dst: str | Path) -> list[Path]:
    """
    Recursively copy a directory, overwriting files that already exist.

    Files present only in the destination are left untouched.

    Args:
        src: Directory to copy from
        dst: Directory to copy into

    Returns:
        list[Path]: Copied files, relative to ``src``, in sorted order
    """
    source = Path(src)
    copied: list[Path] = []

    def copy_file(src_file, dst_file):
        copied.append(Path(src_file).relative_to(source))
        return shutil.copy2(src_file, dst_file)

    shutil.copytree(source, dst, copy_function=copy_file, dirs_exist_ok=True)
    copied.sort()
    logger.debug(f"Mirrored {len(copied)} file(s) from {source} to {dst}")
    return copied


def append_missing_lines(file_path: str | Path, lines: list[str], header: str | None = None) -> list[str]:
    """
    Append lines that are not already present in a text file.

    A line counts as present when it occurs anywhere in the file as an exact
    substring. Missing lines are appended as one block, preceded by a blank
    line and ``header`` when given. A missing file is created holding only
    the header and the lines.

    Args:
        file_path: Text file to update
        lines: Lines that must be present
        header: Optional comment line written above the appended block

    Returns:
        list[str]: The lines that were written, empty when nothing changed
    """
    path = Path(file_path)
    lines = list(dict.fromkeys(lines))
    block_prefix = [header] if header else []

    if not path.exists():
        path.write_text("\n".join(block_prefix + lines) + "\n", encoding="utf-8")
        logger.debug(f"Created {path} with {len(lines)} entr(y/ies)")
        return lines

    existing = path.read_text(encoding="utf-8")
    missing = [line for line in lines if line not in existing]
    if not missing:
        return []

    with path.open("a", encoding="utf-8") as file_handle:
        file_handle.write("\n" + "\n".join(block_prefix + missing) + "\n")
    logger.debug(f"Appended {len(missing)} entr(y/ies) to {path}")
    return missing
