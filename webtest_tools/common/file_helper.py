"""
File helpers for tests that temporarily modify files on disk.

A backup lives next to the original with a ``.bak`` extension.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Union

from loguru import logger


BACKUP_FILE_EXTENSION = ".bak"

PathLike = Union[str, Path]


def _backup_path(file_name: PathLike) -> Path:
    return Path(f"{file_name}{BACKUP_FILE_EXTENSION}")


def back_up_file(file_name: PathLike) -> Path:
    """
    Copy a file to ``<file_name>.bak``, overwriting an existing backup.

    Args:
        file_name: File to back up

    Returns:
        Path to the backup file

    Raises:
        IOError: If the original file is missing or can not be copied
    """
    original = Path(file_name)
    backup = _backup_path(file_name)
    try:
        shutil.copyfile(original, backup)
    except OSError as e:
        raise IOError(f"Can't back up {file_name}: {e}") from e

    logger.debug(f"Backed up {original} -> {backup}")
    return backup


def restore_file(file_name: PathLike) -> Path:
    """
    Restore a file from its ``.bak`` copy and delete the backup afterwards.

    Args:
        file_name: Name of the file to restore, without the .bak extension

    Returns:
        Path to the restored file

    Raises:
        IOError: If the backup is missing or can not be restored
    """
    original = Path(file_name)
    backup = _backup_path(file_name)
    try:
        shutil.copyfile(backup, original)
        backup.unlink()
    except OSError as e:
        raise IOError(f"Can't restore {file_name} file from backup: {e}") from e

    logger.debug(f"Restored {original} from {backup}")
    return original


def get_absolute_resource_path(resource_name: PathLike, base_dir: PathLike = ".") -> str:
    """
    Resolve a resource name to an absolute path.

    Raises:
        IOError: If the resource does not exist
    """
    path = Path(base_dir) / resource_name
    if not path.exists():
        raise IOError(f"Can't get absolute path for resource {resource_name}: not found in {base_dir}")
    return str(path.resolve())


__all__ = [
    "BACKUP_FILE_EXTENSION",
    "back_up_file",
    "restore_file",
    "get_absolute_resource_path",
]
