"""Allow running as python -m flavor_switcher."""

from .cli import main

if __name__ == "__main__":
    main()
