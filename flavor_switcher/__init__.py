"""
Flavor Switcher - A CLI tool to swap flavor-specific files into a project.

Features:
- Switch between flavors (logos, configs, styles) mapped onto fixed project paths
- Backup of original files on first activation, exact restore on reset
- JSON state ledger that survives interrupted runs
- Drift detection using SHA-256 content hashes
- Managed .gitignore section for flavor-generated files
"""

__version__ = "1.0.0"
