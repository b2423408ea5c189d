#  Copyright (c) 2025 Tom Villani, Ph.D.
# wiki2md/options/wikitext.py
"""Configuration options for wikitext parsing.

This module defines options for parsing wikitext documents into the
document tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from wiki2md.constants import (
    DEFAULT_MAX_INPUT_SIZE,
    DEFAULT_PARSE_NOWIKI,
    DEFAULT_STRIP_COMMENTS,
    DEFAULT_TEXT_BUFFER_SIZE,
)
from wiki2md.options.base import BaseParserOptions


@dataclass(frozen=True)
class WikitextParserOptions(BaseParserOptions):
    """Configuration options for wikitext-to-tree parsing.

    Parameters
    ----------
    max_input_size : int, default 500000
        Maximum document size in bytes. Larger documents are truncated
        (at a UTF-8 character boundary) and a warning is logged.
    strip_comments : bool, default True
        Whether ``<!-- ... -->`` comments are dropped. When False they are
        kept as literal text.
    parse_nowiki : bool, default True
        Whether ``<nowiki>`` regions are honored. When False the tags are
        ordinary text and the markup inside them is parsed.
    encoding : str or None, default None
        Encoding of byte input. None means UTF-8 with detection fallback.
    text_buffer_size : int, default 8192
        Number of literal characters accumulated before they are flushed
        into the tree.

    Examples
    --------
        >>> options = WikitextParserOptions(strip_comments=False)
        >>> parser = WikitextParser(options)

    """

    max_input_size: int = field(
        default=DEFAULT_MAX_INPUT_SIZE,
        metadata={
            "help": "Maximum input size in bytes; larger documents are truncated",
            "type": int,
            "importance": "security",
        },
    )
    strip_comments: bool = field(
        default=DEFAULT_STRIP_COMMENTS,
        metadata={"help": "Drop <!-- --> comments from the input", "importance": "core"},
    )
    parse_nowiki: bool = field(
        default=DEFAULT_PARSE_NOWIKI,
        metadata={"help": "Treat <nowiki> regions as literal text", "importance": "advanced"},
    )
    encoding: Optional[str] = field(
        default=None,
        metadata={"help": "Encoding of the input bytes (default: detect)", "importance": "advanced"},
    )
    text_buffer_size: int = field(
        default=DEFAULT_TEXT_BUFFER_SIZE,
        metadata={
            "help": "Literal characters buffered before flushing into the tree",
            "type": int,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any size is not positive.

        """
        super().__post_init__()
        if self.max_input_size <= 0:
            raise ValueError(f"max_input_size must be positive, got {self.max_input_size}")
        if self.text_buffer_size <= 0:
            raise ValueError(f"text_buffer_size must be positive, got {self.text_buffer_size}")
