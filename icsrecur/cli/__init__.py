"""Command-line interface for icsrecur.

Exit codes:
    0 - success
    1 - the rule could not be parsed or converted
    2 - validation reported problems and nothing was repaired
    3 - repair requires removing the property altogether
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Optional

from icsrecur.config.settings import IcsRecurSettings, get_settings
from icsrecur.recur import RecurError, RecurValue, XmlValueWriter
from icsrecur.utils.logging import setup_logging

from .parser import create_parser

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2
EXIT_REMOVE = 3


def render_value(value: RecurValue, output_format: str) -> str:
    """Render a RECUR value in the requested output format.

    Raises:
        MalformedTimestampError: If json/xml output is requested and UNTIL is invalid
    """
    if output_format == "json":
        return json.dumps(value.get_json_value())
    if output_format == "xml":
        writer = XmlValueWriter()
        value.xml_serialize_value(writer)
        return writer.to_string()
    return value.get_value()


def _configure_logging(settings: IcsRecurSettings, args: argparse.Namespace) -> None:
    log_settings = settings.logging
    log_file = None
    log_dir = None
    if log_settings.file_enabled:
        log_file = log_settings.file_name
        log_dir = Path(log_settings.file_directory) if log_settings.file_directory else None
    setup_logging(
        log_level=args.log_level or log_settings.console_level,
        log_file=log_file,
        log_dir=log_dir,
        enable_colors=log_settings.console_colors,
    )


def run(args: argparse.Namespace, settings: IcsRecurSettings) -> int:
    """Execute the command described by parsed arguments.

    Returns:
        Process exit code
    """
    output_format = args.format or settings.output_format
    repair = settings.default_repair if args.repair is None else args.repair
    name = (args.name or settings.property_name).upper()

    try:
        value = RecurValue(args.rule, name=name)
    except RecurError as e:
        print(f"Error: {e.message}")
        return EXIT_ERROR

    exit_code = EXIT_OK
    if args.validate or repair:
        outcome = value.validate_with_outcome(repair=repair)
        for diagnostic in outcome.diagnostics:
            print(diagnostic)
        if outcome.requires_removal:
            print(f"{name} must be removed from its component")
            return EXIT_REMOVE
        if outcome.diagnostics and not repair:
            exit_code = EXIT_INVALID

    try:
        print(render_value(value, output_format))
    except RecurError as e:
        print(f"Error: {e.message}")
        return EXIT_ERROR

    return exit_code


def main(argv: Optional[list[str]] = None) -> int:
    """Main command-line entry point.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Process exit code
    """
    args = create_parser().parse_args(argv)
    settings = get_settings()
    _configure_logging(settings, args)
    logger.debug(f"Running with format={args.format} validate={args.validate} repair={args.repair}")
    return run(args, settings)


__all__ = ["main", "render_value", "run"]
