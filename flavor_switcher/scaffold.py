"""Project scaffolding for the init command."""

import json
import logging
from pathlib import Path

from .config import CONFIG_FILE, FLAVORS_DIR, IGNORE_FILE, IGNORE_MARKER
from .ignore import sync_ignore_file

logger = logging.getLogger(__name__)

EXAMPLE_FLAVOR = "example-flavor"

DEFAULT_CONFIG = {
    "version": "1.0.0",
    "projectRoot": "./",
    "flavors": {
        EXAMPLE_FLAVOR: {
            "displayName": "Example Flavor",
            "description": "Example flavor configuration",
            "active": True,
        }
    },
    "mappings": [
        {
            "source": "assets/logo.png",
            "target": "src/assets/logo.png",
            "type": "file",
            "required": True,
            "description": "Flavor logo",
        },
        {
            "source": "config/app.config.json",
            "target": "src/config/app.config.json",
            "type": "file",
            "required": True,
            "description": "Application configuration",
        },
        {
            "source": "styles/",
            "target": "src/styles/flavor/",
            "type": "directory",
            "required": False,
            "description": "Flavor-specific styles",
        },
    ],
    "requiredStructure": {
        "files": ["assets/logo.png", "config/app.config.json"],
        "directories": ["assets", "config"],
    },
}

EXAMPLE_APP_CONFIG = {
    "flavorName": "Example Flavor",
    "primaryColor": "#007bff",
    "apiUrl": "https://api.example.com",
}


def _write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")


def init_project(base_dir: Path) -> bool:
    """
    Create a starter configuration and example flavor in base_dir.

    Returns False without touching anything if a configuration file is
    already present.
    """
    config_path = base_dir / CONFIG_FILE
    if config_path.exists():
        return False

    _write_json(config_path, DEFAULT_CONFIG)
    logger.info("Created %s", config_path)

    flavor_root = base_dir / FLAVORS_DIR / EXAMPLE_FLAVOR
    for subdir in ("assets", "config", "styles"):
        (flavor_root / subdir).mkdir(parents=True, exist_ok=True)
    (flavor_root / "assets" / "logo.png").write_text("# Placeholder for logo")
    _write_json(flavor_root / "config" / "app.config.json", EXAMPLE_APP_CONFIG)
    logger.info("Created example flavor in %s", flavor_root)

    ignore_path = base_dir / IGNORE_FILE
    content = ignore_path.read_text(encoding="utf-8") if ignore_path.exists() else ""
    if IGNORE_MARKER not in content:
        sync_ignore_file(ignore_path, active=False, targets=[])
        logger.info("Updated %s", ignore_path)

    return True
