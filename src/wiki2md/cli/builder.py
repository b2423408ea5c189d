#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser and exit codes for the wiki2md command line."""

from __future__ import annotations

import argparse

from wiki2md.constants import CONFIG_ENV_VAR
from wiki2md.exceptions import (
    FileError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3
EXIT_CONVERSION_ERROR = 4

LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def positive_int(value: str) -> int:
    """Argparse type for strictly positive byte counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wiki2md",
        description="Convert MediaWiki wikitext to Markdown.",
        epilog=f"Configuration is read from --config, ${CONFIG_ENV_VAR}, or a discovered .wiki2md.toml file.",
    )

    parser.add_argument("input", help="Wikitext file to convert (use '-' for stdin)")
    parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", type=str, help="Path to a TOML, YAML or JSON configuration file")
    config_group.add_argument(
        "--no-config",
        action="store_true",
        help=f"Ignore ${CONFIG_ENV_VAR} and discovered configuration files",
    )

    conversion_group = parser.add_argument_group("conversion options")
    conversion_group.add_argument(
        "--max-input-size",
        type=positive_int,
        metavar="BYTES",
        help="Truncate input beyond this many bytes",
    )
    conversion_group.add_argument(
        "--max-output-size",
        type=positive_int,
        metavar="BYTES",
        help="Fail when the Markdown would exceed this many bytes",
    )
    conversion_group.add_argument(
        "--keep-comments",
        action="store_true",
        help="Keep <!-- comments --> as literal text instead of stripping them",
    )

    output_group = parser.add_argument_group("output and logging")
    output_group.add_argument(
        "--rich",
        action="store_true",
        help="Pretty-print the Markdown to the terminal (requires: pip install wiki2md[rich])",
    )
    output_group.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    output_group.add_argument("--log-file", type=str, help="Also write log messages to this file")
    output_group.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging (same as --log-level DEBUG)"
    )
    output_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable debug logging with timestamps and logger names",
    )

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileError, OutputWriteError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, (ParsingError, RenderingError)):
        return EXIT_CONVERSION_ERROR

    return EXIT_ERROR
