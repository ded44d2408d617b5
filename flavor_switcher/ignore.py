"""Maintenance of the managed block at the end of the ignore file."""

import logging
from pathlib import Path
from typing import Iterable

from .config import BACKUP_DIR, IGNORE_MARKER, STATE_FILE
from .errors import FileOpError

logger = logging.getLogger(__name__)


def render_managed_block(
    targets: Iterable[str],
    active: bool,
    state_file: str = STATE_FILE,
    backup_dir: str = BACKUP_DIR
) -> list[str]:
    """Lines of the managed block, starting with the marker."""
    lines = [IGNORE_MARKER, state_file, f"{backup_dir.rstrip('/')}/"]
    if active:
        lines.extend(targets)
    return lines


def strip_managed_block(content: str) -> str:
    """Drop everything from the marker onward and trailing whitespace."""
    marker_index = content.find(IGNORE_MARKER)
    if marker_index != -1:
        content = content[:marker_index]
    return content.rstrip()


def sync_ignore_file(
    ignore_path: Path,
    active: bool,
    targets: Iterable[str],
    state_file: str = STATE_FILE,
    backup_dir: str = BACKUP_DIR
) -> str:
    """
    Rewrite the managed block of the ignore file.

    The ledger file and backup root are always listed; mapping targets only
    while a flavor is active. Repeated calls with the same arguments produce
    the same file. Returns the new content.
    """
    content = ""
    if ignore_path.exists():
        try:
            content = ignore_path.read_text(encoding="utf-8")
        except OSError as e:
            raise FileOpError("read", ignore_path, str(e)) from e

    head = strip_managed_block(content)
    block = "\n".join(render_managed_block(targets, active, state_file, backup_dir))
    new_content = f"{head}\n\n{block}\n"

    try:
        ignore_path.write_text(new_content, encoding="utf-8")
    except OSError as e:
        raise FileOpError("write", ignore_path, str(e)) from e

    logger.debug("Updated %s", ignore_path)
    return new_content
