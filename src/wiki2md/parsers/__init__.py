#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that build the document tree from source markup."""

from wiki2md.parsers.base import BaseParser
from wiki2md.parsers.wikitext import WikitextParser

__all__ = ["BaseParser", "WikitextParser"]
