"""Command-line argument parsing for icsrecur."""

import argparse

from icsrecur.config.settings import OUTPUT_FORMATS


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="icsrecur",
        description="Normalize, convert and validate iCalendar RRULE/EXRULE values",
        epilog="""
Examples:
  icsrecur "freq=monthly;byday=1,2,3"          # Print normalized RRULE text
  icsrecur "FREQ=DAILY;COUNT=5" --format json  # Print the jCal value
  icsrecur "BYDAY=MO" --validate               # Report problems
  icsrecur "FREQ=DAILY;COUNT=" --repair        # Repair and print the result
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("rule", help="RRULE value, without the 'RRULE:' prefix")

    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from settings, usually text)",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Property name used in validation messages (default: RRULE)",
    )

    validation_group = parser.add_argument_group("validation")
    validation_group.add_argument(
        "--validate",
        action="store_true",
        help="Report structural problems of the rule",
    )
    validation_group.add_argument(
        "--repair",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=(
            "Validate and repair the rule before printing it (implies --validate); "
            "--no-repair overrides default_repair from the settings"
        ),
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Console log level (default: from settings)",
    )

    return parser
