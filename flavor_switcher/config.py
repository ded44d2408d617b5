"""Configuration loading and validation."""

import json
from pathlib import Path, PurePosixPath, PureWindowsPath

from .errors import ConfigError
from .models import Configuration, MappingKind

CONFIG_FILE = "flavor-config.json"
STATE_FILE = ".flavor-state.json"
FLAVORS_DIR = "flavors"
BACKUP_DIR = ".flavor-backup"
IGNORE_FILE = ".gitignore"
IGNORE_MARKER = "# Flavor Switcher - DO NOT EDIT BELOW THIS LINE"

_MAPPING_KINDS = [kind.value for kind in MappingKind]


def _check_type(errors: list[str], data: dict, key: str, expected: type,
                where: str, required: bool = False) -> bool:
    """Record an error if data[key] is missing (when required) or mistyped."""
    if key not in data:
        if required:
            errors.append(f"{where}{key}: required field missing")
        return False
    value = data[key]
    # bool is an int subclass; keep the two apart
    if expected is not bool and isinstance(value, bool):
        ok = False
    else:
        ok = isinstance(value, expected)
    if not ok:
        errors.append(f"{where}{key}: must be {_type_name(expected)}")
    return ok


def _type_name(expected: type) -> str:
    return {
        str: "a string",
        bool: "a boolean",
        dict: "an object",
        list: "an array",
    }.get(expected, expected.__name__)


def _validate_flavors(errors: list[str], flavors: dict) -> None:
    for flavor_id, flavor in flavors.items():
        where = f"flavors.{flavor_id}."
        if not isinstance(flavor, dict):
            errors.append(f"flavors.{flavor_id}: must be an object")
            continue
        _check_type(errors, flavor, "displayName", str, where, required=True)
        _check_type(errors, flavor, "description", str, where)
        _check_type(errors, flavor, "active", bool, where)


def _check_relative(errors: list[str], value: str, where: str) -> None:
    """Mapping paths must stay inside the flavor directory and the project."""
    path = PurePosixPath(value.replace("\\", "/"))
    if not path.parts:
        errors.append(f"{where}: must not be empty")
    elif path.is_absolute() or PureWindowsPath(value).is_absolute():
        errors.append(f"{where}: must be a relative path")
    elif ".." in path.parts:
        errors.append(f"{where}: must not contain '..'")


def _validate_mappings(errors: list[str], mappings: list) -> None:
    for index, mapping in enumerate(mappings):
        where = f"mappings[{index}]."
        if not isinstance(mapping, dict):
            errors.append(f"mappings[{index}]: must be an object")
            continue
        for key in ("source", "target"):
            if _check_type(errors, mapping, key, str, where, required=True):
                _check_relative(errors, mapping[key], f"{where}{key}")
        _check_type(errors, mapping, "required", bool, where)
        _check_type(errors, mapping, "description", str, where)
        if _check_type(errors, mapping, "type", str, where):
            if mapping["type"] not in _MAPPING_KINDS:
                errors.append(
                    f"{where}type: must be one of {', '.join(_MAPPING_KINDS)}"
                )


def _validate_required_structure(errors: list[str], structure: dict) -> None:
    for key in ("files", "directories"):
        if _check_type(errors, structure, key, list, "requiredStructure."):
            for index, item in enumerate(structure[key]):
                if not isinstance(item, str):
                    errors.append(f"requiredStructure.{key}[{index}]: must be a string")


def validate_config(data) -> list[str]:
    """
    Validate a raw configuration document.

    Returns a list of field-level error messages; an empty list means the
    document is valid. All problems are collected, not just the first one.
    """
    if not isinstance(data, dict):
        return ["configuration: must be an object"]

    errors: list[str] = []
    _check_type(errors, data, "version", str, "", required=True)
    _check_type(errors, data, "projectRoot", str, "")

    if _check_type(errors, data, "flavors", dict, "", required=True):
        _validate_flavors(errors, data["flavors"])

    if _check_type(errors, data, "mappings", list, "", required=True):
        _validate_mappings(errors, data["mappings"])

    if _check_type(errors, data, "requiredStructure", dict, ""):
        _validate_required_structure(errors, data["requiredStructure"])

    return errors


def parse_config(data) -> Configuration:
    """Validate a raw document and build a Configuration from it."""
    errors = validate_config(data)
    if errors:
        raise ConfigError("Configuration validation failed", errors)
    return Configuration.from_dict(data)


def load_config(config_path: Path) -> Configuration:
    """Load and validate the configuration file."""
    if not config_path.exists():
        raise ConfigError(f"Configuration file {config_path.name} not found")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Failed to load configuration: {e}") from e

    return parse_config(data)
