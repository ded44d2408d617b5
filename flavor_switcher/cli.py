"""Command-line interface for flavor switcher."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import CONFIG_FILE, FLAVORS_DIR
from .errors import FlavorSwitcherError
from .models import StatusReport, SwitchResult, ValidationReport
from .scaffold import init_project
from .switcher import FlavorSwitcher

LOG_FORMAT = "%(asctime)s | %(name)-25s | %(levelname)-7s | %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; level from FLAVOR_SWITCHER_LOG_LEVEL or -v."""
    if verbose:
        level = logging.DEBUG
    else:
        level_str = os.environ.get("FLAVOR_SWITCHER_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_str, logging.WARNING)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger("flavor_switcher")
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="flavor-switcher",
        description="Swap flavor-specific files into a project and back.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s init
  %(prog)s switch brand-a
  %(prog)s -C path/to/project status
        """
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--project-dir", "-C",
        type=Path,
        default=Path("."),
        help=f"Directory containing {CONFIG_FILE} (default: current directory)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    subparsers.add_parser("init", help="Initialize flavor switcher in the project directory")

    switch_parser = subparsers.add_parser(
        "switch", help="Switch to a flavor, or pick one interactively"
    )
    switch_parser.add_argument("flavor", nargs="?", help="Flavor to switch to")

    reset_parser = subparsers.add_parser(
        "reset", help="Reset to original state (remove all flavor customizations)"
    )
    reset_parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Do not ask for confirmation"
    )

    subparsers.add_parser("status", help="Show current flavor status")
    subparsers.add_parser("validate", help="Validate configuration and flavor structures")

    return parser.parse_args(argv)


def confirm(prompt: str, default: bool = False) -> bool:
    """Ask a yes/no question."""
    suffix = "(Y/n)" if default else "(y/N)"
    response = input(f"{prompt} {suffix}: ").strip().lower()
    if not response:
        return default
    return response in ("y", "yes")


def prompt_flavor_choice(switcher: FlavorSwitcher) -> Optional[str]:
    """Let the user pick an active flavor. Returns None if none is available."""
    flavors = switcher.config.active_flavors()
    if not flavors:
        print("No active flavors available")
        return None

    current = switcher.current_flavor()
    print("\nAvailable flavors:")
    for index, flavor in enumerate(flavors, start=1):
        marker = " [CURRENT]" if flavor.id == current else ""
        print(f"  {index}: {flavor.display_name} ({flavor.id}){marker}")

    while True:
        choice = input(f"\nSelect a flavor to switch to (1-{len(flavors)}): ").strip()
        if choice.isdigit() and 1 <= int(choice) <= len(flavors):
            return flavors[int(choice) - 1].id
        print(f"Invalid choice. Please enter a number between 1 and {len(flavors)}.")


def print_switch_result(result: SwitchResult) -> None:
    """Print what a switch restored, removed and applied."""
    if result.previous_flavor:
        print(f"Removed flavor: {result.previous_flavor}")
        for target in result.restored:
            print(f"  Restored: {target}")
        for target in result.removed:
            print(f"  Removed: {target}")
    if result.backed_up:
        print("Original files backed up")
    for mapping in result.applied:
        print(f"  Applied: {mapping.source} -> {mapping.target}")
    for mapping in result.skipped:
        print(f"  Skipped (source missing): {mapping.source}")
    print(f"Successfully switched to flavor: {result.flavor}")


def print_status(report: StatusReport) -> None:
    """Print the current flavor, the configured flavors and the managed files."""
    print("\n" + "=" * 60)
    print("FLAVOR SWITCHER STATUS")
    print("=" * 60)
    print(f"Current flavor: {report.current_flavor or 'none'}")
    print(f"Config file: {CONFIG_FILE}")
    print(f"Flavors directory: {FLAVORS_DIR}")

    print("\n--- Available Flavors ---")
    for flavor in report.flavors:
        mark = "+" if flavor.active else "-"
        current = " [CURRENT]" if flavor.id == report.current_flavor else ""
        print(f"  {mark} {flavor.id} - {flavor.display_name}{current}")
        if flavor.description:
            print(f"      {flavor.description}")

    if report.current_flavor:
        print("\n--- Managed Files ---")
        for target in report.targets:
            flags = []
            if target.modified:
                flags.append("[MODIFIED]")
            if target.drifted:
                flags.append("[EDITED SINCE SWITCH]")
            suffix = " " + " ".join(flags) if flags else ""
            print(f"  {target.target}{suffix}")
    print()


def print_validation(report: ValidationReport, switcher: FlavorSwitcher) -> None:
    """Print problems per active flavor and any targets changed from the original."""
    print("\n" + "=" * 60)
    print("VALIDATING CONFIGURATION")
    print("=" * 60)

    if report.flavors_dir_exists:
        print("Flavors directory exists")
    else:
        print(f"Error: Flavors directory '{FLAVORS_DIR}' not found")

    for flavor in switcher.config.active_flavors():
        problems = report.problems.get(flavor.id)
        if problems:
            print(f"\nFlavor '{flavor.id}': INVALID")
            for problem in problems:
                print(f"  - {problem}")
        else:
            print(f"\nFlavor '{flavor.id}': OK")

    if report.modified_targets:
        print("\n--- Modified flavor files ---")
        for target in report.modified_targets:
            print(f"  Warning: Modified: {target}")

    if report.ok:
        print("\nAll validations passed")
    else:
        print("\nValidation failed")


def cmd_init(args: argparse.Namespace) -> int:
    if init_project(args.project_dir):
        print("Flavor Switcher initialized successfully!")
        print("\nNext steps:")
        print(f"1. Edit {CONFIG_FILE} to match your project structure")
        print(f"2. Add your flavor assets to the {FLAVORS_DIR}/ directory")
        print('3. Run "flavor-switcher switch <flavor-name>" to apply a flavor')
    else:
        print("Flavor Switcher is already initialized")
    return 0


def cmd_switch(args: argparse.Namespace) -> int:
    switcher = FlavorSwitcher.from_directory(args.project_dir)
    flavor = args.flavor
    if flavor is None:
        flavor = prompt_flavor_choice(switcher)
        if flavor is None:
            return 0
        if flavor == switcher.current_flavor():
            print("This flavor is already active")
            return 0
        if not confirm(f"Switch to flavor '{flavor}'?", default=True):
            print("Aborted.")
            return 0

    result = switcher.switch_flavor(flavor)
    print_switch_result(result)
    return 0


def cmd_reset(args: argparse.Namespace) -> int:
    switcher = FlavorSwitcher.from_directory(args.project_dir)
    if not args.yes and not confirm("Are you sure you want to reset to original state?"):
        print("Aborted.")
        return 0

    result = switcher.reset_flavor()
    if not result.changed:
        print("No flavor is currently active")
        return 0
    for target in result.restored:
        print(f"  Restored: {target}")
    for target in result.removed:
        print(f"  Removed: {target}")
    print("Successfully reset to original state")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    switcher = FlavorSwitcher.from_directory(args.project_dir, show_progress=False)
    print_status(switcher.status())
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    switcher = FlavorSwitcher.from_directory(args.project_dir, show_progress=False)
    report = switcher.validate()
    print_validation(report, switcher)
    return 0 if report.ok else 1


COMMANDS = {
    "init": cmd_init,
    "switch": cmd_switch,
    "reset": cmd_reset,
    "status": cmd_status,
    "validate": cmd_validate,
}


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        code = COMMANDS[args.command](args)
    except FlavorSwitcherError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nInterrupted!", file=sys.stderr)
        sys.exit(1)

    if code:
        sys.exit(code)
