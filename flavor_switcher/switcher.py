"""Core switch logic."""

import logging
from pathlib import Path
from typing import Optional, Union

from tqdm import tqdm

from .backup import BackupStore
from .config import (
    BACKUP_DIR,
    CONFIG_FILE,
    FLAVORS_DIR,
    IGNORE_FILE,
    STATE_FILE,
    load_config,
)
from .errors import (
    FlavorInactiveError,
    FlavorNotConfiguredError,
    RequiredSourceMissingError,
    StructureInvalidError,
)
from .fileops import copy_path, remove_path
from .hasher import hash_path
from .ignore import sync_ignore_file
from .ledger import LedgerStore
from .models import (
    Configuration,
    FileRecord,
    ResetResult,
    StateLedger,
    StatusReport,
    SwitchResult,
    TargetStatus,
    ValidationReport,
)

logger = logging.getLogger(__name__)


class FlavorSwitcher:
    """
    Swaps flavor files into a project and reverts them.

    All paths are resolved against base_dir, the directory holding the
    configuration file. The ledger is read at the start of every operation
    and written after the file system changes it describes are done.
    """

    def __init__(
        self,
        config: Configuration,
        base_dir: Union[str, Path],
        show_progress: bool = True
    ):
        self.config = config
        self.base_dir = Path(base_dir)
        self.project_root = self.base_dir / config.project_root
        self.flavors_dir = self.base_dir / FLAVORS_DIR
        self.ignore_path = self.base_dir / IGNORE_FILE
        self.ledger_store = LedgerStore(self.base_dir / STATE_FILE)
        self.backups = BackupStore(self.base_dir / BACKUP_DIR)
        self.show_progress = show_progress

    @classmethod
    def from_directory(cls, base_dir: Union[str, Path], show_progress: bool = True) -> "FlavorSwitcher":
        """Load the configuration file found in base_dir and build a switcher."""
        base_dir = Path(base_dir)
        config = load_config(base_dir / CONFIG_FILE)
        return cls(config, base_dir, show_progress=show_progress)

    def flavor_path(self, flavor_id: str) -> Path:
        return self.flavors_dir / flavor_id

    def target_path(self, target: str) -> Path:
        return self.project_root / target

    def current_flavor(self) -> Optional[str]:
        return self.ledger_store.load().current_flavor

    # =========================================================================
    # Validation
    # =========================================================================

    def find_structure_problems(self, flavor_id: str) -> list[str]:
        """List everything missing from a flavor's directory."""
        flavor_root = self.flavor_path(flavor_id)
        if not flavor_root.is_dir():
            # Nothing else can be checked without the directory
            return [f"Flavor directory '{FLAVORS_DIR}/{flavor_id}' does not exist"]

        problems = []
        structure = self.config.required_structure
        for file in structure.files:
            if not (flavor_root / file).exists():
                problems.append(f"Missing required file: {file}")
        for directory in structure.directories:
            if not (flavor_root / directory).exists():
                problems.append(f"Missing required directory: {directory}")
        for mapping in self.config.mappings:
            if mapping.required and not (flavor_root / mapping.source).exists():
                problems.append(f"Missing required mapping source: {mapping.source}")
        return problems

    def validate_flavor_structure(self, flavor_id: str) -> None:
        """Raise StructureInvalidError listing every problem with a flavor."""
        problems = self.find_structure_problems(flavor_id)
        if problems:
            raise StructureInvalidError(flavor_id, problems)
        logger.info("Flavor '%s' structure validated", flavor_id)

    def validate(self) -> ValidationReport:
        """
        Check the flavors directory and every active flavor.

        Problems are collected per flavor instead of stopping at the first
        invalid one. While a flavor is active, targets whose content differs
        from the captured original are listed too.
        """
        report = ValidationReport(flavors_dir_exists=self.flavors_dir.is_dir())

        for flavor in self.config.active_flavors():
            problems = self.find_structure_problems(flavor.id)
            if problems:
                report.problems[flavor.id] = problems

        ledger = self.ledger_store.load()
        if ledger.is_active:
            for target in self.config.targets():
                path = self.target_path(target)
                if not path.exists():
                    continue
                record = ledger.original_files.get(target)
                original_hash = record.hash if record else None
                if hash_path(path) != original_hash:
                    report.modified_targets.append(target)

        return report

    # =========================================================================
    # Status
    # =========================================================================

    def status(self) -> StatusReport:
        """Report the active flavor and how each target compares."""
        ledger = self.ledger_store.load()
        report = StatusReport(
            current_flavor=ledger.current_flavor,
            flavors=list(self.config.flavors.values())
        )
        if not ledger.is_active:
            return report

        # Later mappings overwrite earlier ones on apply, so the last one wins
        flavor_root = self.flavor_path(ledger.current_flavor)
        flavor_hashes = {}
        for mapping in self.config.mappings:
            flavor_hashes[mapping.target] = hash_path(flavor_root / mapping.source)

        for target, record in ledger.original_files.items():
            report.targets.append(TargetStatus(
                target=target,
                original_hash=record.hash,
                current_hash=hash_path(self.target_path(target)),
                flavor_hash=flavor_hashes.get(target)
            ))
        return report

    # =========================================================================
    # Switch / reset
    # =========================================================================

    def _backup_originals(self, ledger: StateLedger) -> None:
        """Record and copy every target as it is before any flavor is applied."""
        records: dict[str, FileRecord] = {}
        for mapping in self.config.mappings:
            if mapping.target in records:
                continue
            path = self.target_path(mapping.target)
            if path.exists():
                records[mapping.target] = FileRecord(
                    exists=True, kind=mapping.kind, hash=hash_path(path)
                )
                self.backups.capture(path, mapping.target)
            else:
                records[mapping.target] = FileRecord(exists=False, kind=mapping.kind)
        ledger.original_files = records
        logger.info("Original files backed up (%d targets)", len(records))

    def _restore_originals(self, ledger: StateLedger) -> tuple[list[str], list[str]]:
        """
        Put every recorded target back to its pre-flavor state.

        Returns (restored, removed) target lists.
        """
        restored = []
        removed = []
        items = list(ledger.original_files.items())
        with tqdm(items, desc="Restoring", unit="file", disable=not self.show_progress) as pbar:
            for target, record in pbar:
                path = self.target_path(target)
                if record.exists:
                    if self.backups.restore(target, path):
                        restored.append(target)
                    else:
                        logger.warning("No backup found for %s, leaving it as is", target)
                elif path.exists() or path.is_symlink():
                    remove_path(path)
                    removed.append(target)
        return restored, removed

    def _apply_flavor(self, flavor_id: str, result: SwitchResult) -> None:
        flavor_root = self.flavor_path(flavor_id)
        with tqdm(self.config.mappings, desc=f"Applying {flavor_id}", unit="file",
                  disable=not self.show_progress) as pbar:
            for mapping in pbar:
                source = flavor_root / mapping.source
                if source.exists():
                    copy_path(source, self.target_path(mapping.target))
                    result.applied.append(mapping)
                elif mapping.required:
                    raise RequiredSourceMissingError(flavor_id, mapping.source)
                else:
                    logger.debug("Optional source %s missing, skipped", mapping.source)
                    result.skipped.append(mapping)

    def sync_ignore(self, ledger: StateLedger) -> None:
        sync_ignore_file(
            self.ignore_path,
            ledger.is_active,
            [mapping.target for mapping in self.config.mappings]
        )

    def switch_flavor(self, flavor_id: str) -> SwitchResult:
        """
        Switch the project to a flavor.

        Backups are captured only when no flavor is active. Switching between
        two flavors first restores the originals from the backups taken at
        the first activation, which stay in use until the next reset.
        """
        flavor = self.config.get_flavor(flavor_id)
        if flavor is None:
            raise FlavorNotConfiguredError(flavor_id)
        if not flavor.active:
            raise FlavorInactiveError(flavor_id)

        self.validate_flavor_structure(flavor_id)

        ledger = self.ledger_store.load()
        result = SwitchResult(flavor=flavor_id, previous_flavor=ledger.current_flavor)

        if ledger.is_active:
            logger.info("Removing current flavor: %s", ledger.current_flavor)
            result.restored, result.removed = self._restore_originals(ledger)
        else:
            self._backup_originals(ledger)
            self.ledger_store.save(ledger)
            result.backed_up = True

        logger.info("Applying flavor: %s", flavor_id)
        self._apply_flavor(flavor_id, result)

        ledger.current_flavor = flavor_id
        self.ledger_store.save(ledger)
        self.sync_ignore(ledger)

        logger.info("Switched to flavor: %s", flavor_id)
        return result

    def reset_flavor(self) -> ResetResult:
        """Restore all original files and forget the active flavor."""
        ledger = self.ledger_store.load()
        if not ledger.is_active:
            logger.info("No flavor is currently active")
            return ResetResult(changed=False)

        previous = ledger.current_flavor
        restored, removed = self._restore_originals(ledger)

        ledger.clear()
        self.ledger_store.save(ledger)
        self.backups.discard()
        self.sync_ignore(ledger)

        logger.info("Reset to original state (was %s)", previous)
        return ResetResult(
            changed=True,
            previous_flavor=previous,
            restored=restored,
            removed=removed
        )
