"""File system helpers shared by the backup store and the switch engine."""

import logging
import os
import shutil
from pathlib import Path

from .errors import FileOpError

logger = logging.getLogger(__name__)


def _long_path(path: Path) -> str:
    """Convert path to long path format on Windows to handle paths > 260 chars."""
    path_str = str(path.resolve())
    if os.name == 'nt' and not path_str.startswith('\\\\?\\'):
        return '\\\\?\\' + path_str
    return path_str


def copy_file(src: Path, dst: Path) -> None:
    """Copy a file, creating parent directories if needed."""
    # Use long path format on Windows
    dst_long = _long_path(dst)
    dst_parent = os.path.dirname(dst_long)
    os.makedirs(dst_parent, exist_ok=True)
    shutil.copy2(_long_path(src), dst_long)


def remove_path(path: Path) -> None:
    """Delete a file or a directory tree. Missing paths are ignored."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(_long_path(path))
        elif path.exists() or path.is_symlink():
            path.unlink()
        else:
            return
    except (OSError, shutil.Error) as e:
        raise FileOpError("remove", path, str(e)) from e
    logger.debug("Removed %s", path)


def copy_path(src: Path, dst: Path, replace: bool = False) -> None:
    """
    Copy a file or directory tree to dst.

    Directory trees are merged into an existing destination directory unless
    replace is set, in which case the destination is removed first. A
    destination of the other kind (file vs directory) is always replaced.
    """
    try:
        if src.is_dir():
            if dst.exists() and (replace or not dst.is_dir()):
                remove_path(dst)
            os.makedirs(_long_path(dst.parent), exist_ok=True)
            shutil.copytree(_long_path(src), _long_path(dst), dirs_exist_ok=True)
        else:
            if dst.is_dir():
                remove_path(dst)
            copy_file(src, dst)
    except FileOpError:
        raise
    except (OSError, shutil.Error) as e:
        raise FileOpError("copy", src, f"{e} (destination: {dst})") from e
    logger.debug("Copied %s -> %s", src, dst)
