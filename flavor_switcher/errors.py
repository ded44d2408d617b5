"""Exceptions raised by the flavor switcher engine."""

from pathlib import Path
from typing import Optional, Union


class FlavorSwitcherError(Exception):
    """Base exception for all flavor switcher errors."""


class ConfigError(FlavorSwitcherError):
    """Raised when the configuration is missing or invalid."""

    def __init__(self, message: str, errors: Optional[list[str]] = None):
        self.errors = list(errors or [])
        if self.errors:
            message = message + ":\n" + "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(message)


class FlavorNotConfiguredError(FlavorSwitcherError):
    """Raised when a flavor id is not present in the configuration."""

    def __init__(self, flavor: str):
        self.flavor = flavor
        super().__init__(f"Flavor '{flavor}' is not configured")


class FlavorInactiveError(FlavorSwitcherError):
    """Raised when switching to a flavor marked inactive."""

    def __init__(self, flavor: str):
        self.flavor = flavor
        super().__init__(f"Flavor '{flavor}' is not active")


class StructureInvalidError(FlavorSwitcherError):
    """Raised when a flavor directory misses required content.

    Carries every problem found, not just the first one.
    """

    def __init__(self, flavor: str, problems: list[str]):
        self.flavor = flavor
        self.problems = list(problems)
        lines = "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(f"Flavor '{flavor}' structure validation failed:\n{lines}")


class RequiredSourceMissingError(FlavorSwitcherError):
    """Raised mid-apply when a required mapping source is missing."""

    def __init__(self, flavor: str, source: str):
        self.flavor = flavor
        self.source = source
        super().__init__(f"Required source file missing in flavor '{flavor}': {source}")


class FileOpError(FlavorSwitcherError):
    """Raised when a copy, restore or delete fails."""

    def __init__(self, operation: str, path: Union[str, Path], reason: str):
        self.operation = operation
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not {operation} {self.path}: {reason}")
