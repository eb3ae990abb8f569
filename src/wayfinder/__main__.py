"""Main entry point for the wayfinder package when run as a module.

This module enables running wayfinder directly using 'python -m wayfinder'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
