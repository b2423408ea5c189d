#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the wiki2md conversion library.

Examples
--------
Convert a file and print the Markdown::

    $ wiki2md Article.wiki

Specify output file::

    $ wiki2md Article.wiki --out Article.md

Read from stdin and keep comments::

    $ cat Article.wiki | wiki2md - --keep-comments

Use rich formatting::

    $ wiki2md Article.wiki --rich

Configuration
-------------
Defaults for every conversion option can be set in a configuration file
with ``[parser]`` and ``[renderer]`` sections. The file is taken from
``--config``, then the ``WIKI2MD_CONFIG`` environment variable, then the
first ``.wiki2md.toml`` (or ``.yaml``/``.yml``/``.json``, or a
``pyproject.toml`` with a ``[tool.wiki2md]`` table) found in the working
directory or one of its parents. Command-line flags override the file.

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Union

from wiki2md.api import to_markdown
from wiki2md.cli.builder import EXIT_ERROR, EXIT_SUCCESS, create_parser, get_exit_code_for_exception
from wiki2md.cli.config import load_config_file, load_config_with_priority, options_from_config
from wiki2md.constants import CONFIG_ENV_VAR
from wiki2md.exceptions import DependencyError, Wiki2MdError
from wiki2md.logging_utils import configure_logging
from wiki2md.options.markdown import MarkdownRendererOptions
from wiki2md.options.wikitext import WikitextParserOptions
from wiki2md.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def setup_and_validate_options(
    parsed_args: argparse.Namespace,
) -> tuple[WikitextParserOptions, MarkdownRendererOptions]:
    """Merge configuration file values and command-line flags into options.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded or holds invalid values

    """
    if parsed_args.no_config:
        config = load_config_file(parsed_args.config) if parsed_args.config else {}
    else:
        config = load_config_with_priority(
            explicit_path=parsed_args.config, env_var_path=os.environ.get(CONFIG_ENV_VAR)
        )
    parser_options, renderer_options = options_from_config(config)

    parser_overrides: dict[str, object] = {}
    if parsed_args.max_input_size is not None:
        parser_overrides["max_input_size"] = parsed_args.max_input_size
    if parsed_args.keep_comments:
        parser_overrides["strip_comments"] = False
    if parser_overrides:
        parser_options = parser_options.create_updated(**parser_overrides)

    if parsed_args.max_output_size is not None:
        renderer_options = renderer_options.create_updated(max_output_size=parsed_args.max_output_size)

    logger.debug(f"Parser options: {parser_options}")
    logger.debug(f"Renderer options: {renderer_options}")
    return parser_options, renderer_options


def _read_input(input_arg: str) -> Union[bytes, Path]:
    if input_arg == "-":
        return sys.stdin.buffer.read()
    return Path(input_arg)


def _print_rich(markdown: str) -> None:
    """Pretty-print Markdown to the terminal with rich.

    Raises
    ------
    DependencyError
        If rich is not installed

    """
    try:
        from rich.console import Console
        from rich.markdown import Markdown
    except ImportError as e:
        raise DependencyError("Rich output", [("rich", ">=13.0")], original_import_error=e) from e

    Console().print(Markdown(markdown))


def _emit_output(markdown: str, parsed_args: argparse.Namespace) -> None:
    if parsed_args.out:
        BaseRenderer.write_text_output(markdown, parsed_args.out)
        logger.info(f"Converted {parsed_args.input} -> {parsed_args.out}")
    elif parsed_args.rich and sys.stdout.isatty():
        _print_rich(markdown)
    else:
        sys.stdout.write(markdown)
        sys.stdout.flush()


def main(args: list[str] | None = None) -> int:
    """Execute the wiki2md command line and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        parser_options, renderer_options = setup_and_validate_options(parsed_args)
        source = _read_input(parsed_args.input)
        markdown = to_markdown(source, parser_options=parser_options, renderer_options=renderer_options)
        _emit_output(markdown, parsed_args)
    except (Wiki2MdError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
