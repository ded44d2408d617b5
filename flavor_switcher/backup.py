"""Backup store holding pristine copies of overwritten targets."""

import logging
from pathlib import Path
from typing import Optional

from .errors import FileOpError
from .fileops import copy_path, remove_path

logger = logging.getLogger(__name__)


class BackupStore:
    """
    Mirror of original target content under a dedicated backup root.

    A target's backup lives at root/<target>, so the backup tree has the same
    layout as the project.
    """

    def __init__(self, root: Path):
        self.root = root

    def backup_path(self, target: str) -> Path:
        """
        Get the backup location for a target's relative path.

        Raises FileOpError if the location would fall outside the backup root.
        """
        path = self.root / target
        root = self.root.resolve()
        resolved = path.resolve()
        if resolved == root or root not in resolved.parents:
            raise FileOpError("back up", target, f"path is outside {self.root}")
        return path

    def has_backup(self, target: str) -> bool:
        return self.backup_path(target).exists()

    def capture(self, source: Path, target: str) -> Optional[Path]:
        """
        Copy the current content at source into the backup for target.

        Replaces any earlier backup at that location. Returns the backup path,
        or None if source does not exist.
        """
        if not source.exists():
            return None
        backup = self.backup_path(target)
        copy_path(source, backup, replace=True)
        logger.debug("Backed up %s", target)
        return backup

    def restore(self, target: str, destination: Path) -> bool:
        """
        Copy a target's backup back over destination.

        Returns False (and does nothing) if there is no backup for target.
        """
        backup = self.backup_path(target)
        if not backup.exists():
            return False
        copy_path(backup, destination, replace=True)
        logger.debug("Restored %s from backup", target)
        return True

    def discard(self) -> None:
        """Delete the whole backup root."""
        remove_path(self.root)
