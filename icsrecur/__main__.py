"""Entry point for `python -m icsrecur` command."""

import sys

from icsrecur.cli import main as cli_main


def main() -> None:
    """Run the command-line interface and exit with its status code."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
