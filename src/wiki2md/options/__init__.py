#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for the wiki2md parse and render stages."""

from wiki2md.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from wiki2md.options.markdown import MarkdownRendererOptions
from wiki2md.options.wikitext import WikitextParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
    "WikitextParserOptions",
]
