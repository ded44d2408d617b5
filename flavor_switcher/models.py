"""Data models for flavor switcher."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class MappingKind(Enum):
    """Kinds of paths a mapping can point at."""
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class FlavorDefinition:
    """A configured flavor."""
    id: str
    display_name: str
    description: Optional[str] = None
    active: bool = True

    def to_dict(self) -> dict:
        data = {"displayName": self.display_name, "active": self.active}
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, flavor_id: str, data: dict) -> "FlavorDefinition":
        return cls(
            id=flavor_id,
            display_name=data["displayName"],
            description=data.get("description"),
            active=data.get("active", True)
        )


@dataclass(frozen=True)
class Mapping:
    """Pairs a path inside a flavor directory with a path inside the project."""
    source: str
    target: str
    kind: MappingKind = MappingKind.FILE
    required: bool = True
    description: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "source": self.source,
            "target": self.target,
            "type": self.kind.value,
            "required": self.required,
        }
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Mapping":
        return cls(
            source=data["source"],
            target=data["target"],
            kind=MappingKind(data.get("type", MappingKind.FILE.value)),
            required=data.get("required", True),
            description=data.get("description")
        )


@dataclass(frozen=True)
class RequiredStructure:
    """Paths every flavor directory must contain."""
    files: tuple[str, ...] = ()
    directories: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"files": list(self.files), "directories": list(self.directories)}

    @classmethod
    def from_dict(cls, data: dict) -> "RequiredStructure":
        return cls(
            files=tuple(data.get("files", [])),
            directories=tuple(data.get("directories", []))
        )


@dataclass(frozen=True)
class Configuration:
    """Validated, static description of flavors and file mappings."""
    version: str
    flavors: dict[str, FlavorDefinition]
    mappings: tuple[Mapping, ...]
    project_root: str = "./"
    required_structure: RequiredStructure = field(default_factory=RequiredStructure)

    def get_flavor(self, flavor_id: str) -> Optional[FlavorDefinition]:
        return self.flavors.get(flavor_id)

    def active_flavors(self) -> list[FlavorDefinition]:
        return [flavor for flavor in self.flavors.values() if flavor.active]

    def targets(self) -> list[str]:
        """Distinct mapping targets in configuration order."""
        seen = []
        for mapping in self.mappings:
            if mapping.target not in seen:
                seen.append(mapping.target)
        return seen

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "projectRoot": self.project_root,
            "flavors": {fid: flavor.to_dict() for fid, flavor in self.flavors.items()},
            "mappings": [mapping.to_dict() for mapping in self.mappings],
            "requiredStructure": self.required_structure.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Configuration":
        """Build a configuration from an already validated document."""
        return cls(
            version=data["version"],
            project_root=data.get("projectRoot", "./"),
            flavors={
                fid: FlavorDefinition.from_dict(fid, fdata)
                for fid, fdata in data["flavors"].items()
            },
            mappings=tuple(Mapping.from_dict(m) for m in data["mappings"]),
            required_structure=RequiredStructure.from_dict(
                data.get("requiredStructure", {})
            )
        )


@dataclass
class FileRecord:
    """What a mapping target looked like before any flavor was applied."""
    exists: bool
    kind: MappingKind = MappingKind.FILE
    hash: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"exists": self.exists, "type": self.kind.value}
        if self.hash is not None:
            data["hash"] = self.hash
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "FileRecord":
        return cls(
            exists=bool(data["exists"]),
            kind=MappingKind(data.get("type", MappingKind.FILE.value)),
            hash=data.get("hash")
        )


@dataclass
class StateLedger:
    """Which flavor is active and the original state of every target."""
    current_flavor: Optional[str] = None
    original_files: dict[str, FileRecord] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return self.current_flavor is not None

    def clear(self) -> None:
        self.current_flavor = None
        self.original_files = {}

    def to_dict(self) -> dict:
        return {
            "currentFlavor": self.current_flavor,
            "originalFiles": {
                target: record.to_dict()
                for target, record in self.original_files.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StateLedger":
        return cls(
            current_flavor=data.get("currentFlavor"),
            original_files={
                target: FileRecord.from_dict(record)
                for target, record in data.get("originalFiles", {}).items()
            }
        )


@dataclass
class SwitchResult:
    """Outcome of a successful switch."""
    flavor: str
    previous_flavor: Optional[str] = None
    backed_up: bool = False
    restored: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    applied: list[Mapping] = field(default_factory=list)
    skipped: list[Mapping] = field(default_factory=list)


@dataclass
class ResetResult:
    """Outcome of a reset. changed is False when no flavor was active."""
    changed: bool
    previous_flavor: Optional[str] = None
    restored: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)


@dataclass
class TargetStatus:
    """Content of one target compared against the original and the flavor."""
    target: str
    original_hash: Optional[str]
    current_hash: Optional[str]
    flavor_hash: Optional[str] = None

    @property
    def modified(self) -> bool:
        """True if the target differs from what it was before any flavor."""
        return self.current_hash != self.original_hash

    @property
    def drifted(self) -> bool:
        """True if a file target no longer matches the active flavor's source."""
        if self.flavor_hash is None:
            return False
        return self.current_hash != self.flavor_hash


@dataclass
class StatusReport:
    current_flavor: Optional[str]
    flavors: list[FlavorDefinition]
    targets: list[TargetStatus] = field(default_factory=list)


@dataclass
class ValidationReport:
    """Problems found across all active flavors."""
    flavors_dir_exists: bool
    problems: dict[str, list[str]] = field(default_factory=dict)
    modified_targets: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.flavors_dir_exists and not any(self.problems.values())
