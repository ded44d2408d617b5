"""JSON-backed state ledger for durable switch state."""

import json
import logging
import os
from pathlib import Path

from .errors import FileOpError
from .models import StateLedger

logger = logging.getLogger(__name__)


class LedgerStore:
    """Reads and writes the state ledger file."""

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> StateLedger:
        """
        Load the persisted ledger.

        A missing file gives an empty ledger. So does an unreadable or
        malformed one, after logging a warning.
        """
        if not self.path.exists():
            return StateLedger()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("ledger is not a JSON object")
            return StateLedger.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(
                "Could not load state file %s (%s), starting with a fresh state",
                self.path, e
            )
            return StateLedger()

    def save(self, ledger: StateLedger) -> None:
        """Write the ledger to a temporary file and rename it into place."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(ledger.to_dict(), f, indent=2)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise FileOpError("write state file", self.path, str(e)) from e
        logger.debug("Saved state: current flavor %s", ledger.current_flavor)
