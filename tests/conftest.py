"""Shared test fixtures."""

import json
import logging
import tempfile
from pathlib import Path

import pytest

from flavor_switcher.config import CONFIG_FILE, parse_config
from flavor_switcher.models import FileRecord, MappingKind, StateLedger
from flavor_switcher.switcher import FlavorSwitcher


SAMPLE_CONFIG = {
    "version": "1.0.0",
    "projectRoot": "./",
    "flavors": {
        "brand-a": {"displayName": "Brand A", "description": "First brand"},
        "brand-b": {"displayName": "Brand B", "active": True},
        "retired": {"displayName": "Retired Brand", "active": False},
    },
    "mappings": [
        {"source": "logo.png", "target": "src/logo.png", "required": True},
        {"source": "config/app.json", "target": "src/config/app.json"},
        {
            "source": "styles/",
            "target": "src/styles/flavor/",
            "type": "directory",
            "required": False,
        },
    ],
    "requiredStructure": {"files": ["logo.png"], "directories": ["config"]},
}


def write_config(base_dir: Path, data: dict) -> Path:
    """Write a configuration document into base_dir."""
    path = base_dir / CONFIG_FILE
    path.write_text(json.dumps(data, indent=2))
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs so they do not leak between tests."""
    yield
    logger = logging.getLogger("flavor_switcher")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    return json.loads(json.dumps(SAMPLE_CONFIG))


@pytest.fixture
def sample_config(sample_config_data):
    return parse_config(sample_config_data)


@pytest.fixture
def project(temp_dir, sample_config_data):
    """
    Create a project with two usable flavors.

    src/logo.png exists before any switch; src/config/app.json and the
    styles directory do not.
    """
    write_config(temp_dir, sample_config_data)

    brand_a = temp_dir / "flavors" / "brand-a"
    (brand_a / "config").mkdir(parents=True)
    (brand_a / "styles").mkdir()
    (brand_a / "logo.png").write_text("brand-a-logo")
    (brand_a / "config" / "app.json").write_text('{"name": "a"}')
    (brand_a / "styles" / "main.css").write_text("body { color: red; }")

    brand_b = temp_dir / "flavors" / "brand-b"
    (brand_b / "config").mkdir(parents=True)
    (brand_b / "logo.png").write_text("brand-b-logo")
    (brand_b / "config" / "app.json").write_text('{"name": "b"}')

    (temp_dir / "src").mkdir()
    (temp_dir / "src" / "logo.png").write_text("original")

    return temp_dir


@pytest.fixture
def switcher(project):
    """Create a FlavorSwitcher for the sample project."""
    return FlavorSwitcher.from_directory(project, show_progress=False)


@pytest.fixture
def sample_ledger():
    """Create a StateLedger with one existing and one new target."""
    return StateLedger(
        current_flavor="brand-a",
        original_files={
            "src/logo.png": FileRecord(exists=True, kind=MappingKind.FILE, hash="abc123"),
            "src/styles/flavor/": FileRecord(exists=False, kind=MappingKind.DIRECTORY),
        }
    )
