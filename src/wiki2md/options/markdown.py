#  Copyright (c) 2025 Tom Villani, Ph.D.
# wiki2md/options/markdown.py
"""Configuration options for Markdown rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from wiki2md.constants import (
    DEFAULT_COLLAPSE_BLANK_LINES,
    DEFAULT_ESCAPE_LINK_PARENTHESES,
    DEFAULT_INTERNAL_LINK_SUFFIX,
    DEFAULT_MAX_LINK_SIZE,
    DEFAULT_MAX_OUTPUT_SIZE,
)
from wiki2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Markdown rendering options.

    Parameters
    ----------
    max_output_size : int, default 4 MiB
        Hard cap, in UTF-8 bytes, on the rendered document. Exceeding it
        raises OutputCapacityError.
    max_link_size : int, default 5000
        Hard cap, in UTF-8 bytes, on the flattened text of one link.
    internal_link_suffix : str, default ".md"
        Suffix appended to internal link targets.
    escape_link_parentheses : bool, default True
        Whether ``(`` and ``)`` in link destinations become ``%28``/``%29``.
    collapse_blank_lines : bool, default False
        Whether runs of three or more newlines are collapsed to two in
        string output.

    """

    max_output_size: int = field(
        default=DEFAULT_MAX_OUTPUT_SIZE,
        metadata={
            "help": "Maximum rendered output size in bytes",
            "type": int,
            "importance": "security",
        },
    )
    max_link_size: int = field(
        default=DEFAULT_MAX_LINK_SIZE,
        metadata={
            "help": "Maximum flattened size of a single link in bytes",
            "type": int,
            "importance": "security",
        },
    )
    internal_link_suffix: str = field(
        default=DEFAULT_INTERNAL_LINK_SUFFIX,
        metadata={"help": "Suffix appended to internal link targets", "importance": "core"},
    )
    escape_link_parentheses: bool = field(
        default=DEFAULT_ESCAPE_LINK_PARENTHESES,
        metadata={"help": "Percent-encode parentheses in link destinations", "importance": "advanced"},
    )
    collapse_blank_lines: bool = field(
        default=DEFAULT_COLLAPSE_BLANK_LINES,
        metadata={"help": "Collapse runs of blank lines in the output", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If a size limit is negative.

        """
        super().__post_init__()
        if self.max_output_size < 0:
            raise ValueError(f"max_output_size must be non-negative, got {self.max_output_size}")
        if self.max_link_size < 0:
            raise ValueError(f"max_link_size must be non-negative, got {self.max_link_size}")
