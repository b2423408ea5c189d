#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/parsers/wikitext.py
"""Wikitext to document tree parser.

This module provides a single-pass recursive-descent parser for MediaWiki
markup. The document is scanned once; at every cursor position the parser
tries, in order, to close block-level nodes, to open block-level nodes, and
to open or close inline nodes, and otherwise buffers the character as
literal text.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from wiki2md.ast import Node, NodeKind
from wiki2md.constants import COMMENT_CLOSE, COMMENT_OPEN, NOWIKI_CLOSE, NOWIKI_OPEN
from wiki2md.exceptions import StructuralError
from wiki2md.options.wikitext import WikitextParserOptions
from wiki2md.parsers._block_rules import BLOCK_CLOSE_RULES, open_rules_for
from wiki2md.parsers._inline_rules import INLINE_OPEN_RULES, match_inline_close
from wiki2md.parsers._scanner import Scanner
from wiki2md.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class WikitextParser(BaseParser):
    r"""Convert wikitext to a document tree.

    Parameters
    ----------
    options : WikitextParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = WikitextParser()
        >>> root = parser.parse("== Heading ==\\n\\nThis is '''bold'''.")

    With options:

        >>> options = WikitextParserOptions(strip_comments=False)
        >>> root = WikitextParser(options).parse(wikitext)

    """

    def __init__(self, options: WikitextParserOptions | None = None):
        """Initialize the wikitext parser with options."""
        BaseParser._validate_options_type(options, WikitextParserOptions, "wikitext")
        options = options or WikitextParserOptions()
        super().__init__(options)
        self.options: WikitextParserOptions = options

    def parse(self, input_data: Union[str, Path, IO[bytes], bytes]) -> Node:
        """Parse wikitext input into a document tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Wikitext input. A str is the document content itself.

        Returns
        -------
        Node
            The document root

        Raises
        ------
        StructuralError
            If the tree reaches a state its invariants rule out
        FileError
            If an input file cannot be read

        """
        text = self._load_text_content(input_data, self.options.max_input_size, self.options.encoding)
        return self.parse_text(text)

    def parse_text(self, text: str) -> Node:
        """Parse already-decoded wikitext, without the input size cap."""
        scanner = Scanner(text, self.options.text_buffer_size)
        logger.debug(f"Parsing {len(text)} characters of wikitext")

        while not scanner.at_end:
            self._step(scanner)

        scanner.flush()
        return scanner.root

    def _step(self, scanner: Scanner) -> None:
        """Process the input at the cursor: one state change or one literal character."""
        if scanner.in_nowiki:
            if scanner.at(NOWIKI_CLOSE):
                scanner.in_nowiki = False
                scanner.advance(len(NOWIKI_CLOSE))
            else:
                scanner.append_literal(scanner.peek())
                scanner.advance()
            return

        if self.options.strip_comments and scanner.at(COMMENT_OPEN):
            self._skip_comment(scanner)
            return

        if self._close_blocks(scanner):
            return

        if scanner.current.accepts_block_children:
            if scanner.at("\n"):
                scanner.skip_newlines()
                return
            if self._open_block(scanner):
                return

        if self.options.parse_nowiki and scanner.at(NOWIKI_OPEN):
            scanner.in_nowiki = True
            scanner.advance(len(NOWIKI_OPEN))
            return

        if not scanner.current.accepts_block_children:
            if self._open_inline(scanner) or self._close_inline(scanner):
                return

        scanner.append_literal(scanner.peek())
        scanner.advance()

    @staticmethod
    def _skip_comment(scanner: Scanner) -> None:
        end = scanner.text.find(COMMENT_CLOSE, scanner.pos + len(COMMENT_OPEN))
        if end == -1:
            logger.warning("Unterminated comment, dropping the rest of the document")
            scanner.pos = len(scanner.text)
        else:
            scanner.pos = end + len(COMMENT_CLOSE)

    @staticmethod
    def _close_blocks(scanner: Scanner) -> bool:
        """Close every block-level node the upcoming input terminates.

        Returns
        -------
        bool
            Whether at least one node was closed

        Raises
        ------
        StructuralError
            If the current node has no block-level ancestor, or that
            ancestor's kind has no close rule

        """
        closed = False
        while scanner.current.kind is not NodeKind.ROOT:
            block = scanner.current.block_ancestor()
            if block is None:
                raise StructuralError(
                    f"No block-level ancestor for {scanner.current.kind.value} node", parsing_stage="block_close"
                )
            rule = BLOCK_CLOSE_RULES.get(block.kind)
            if rule is None:
                raise StructuralError(f"No close rule for node kind: {block.kind.value}", parsing_stage="block_close")

            match = rule(scanner, block)
            if match is None:
                break

            scanner.skip_newlines()
            scanner.flush()

            parent = block.parent
            if parent is None:
                raise StructuralError(f"{block.kind.value} node is detached from the tree", parsing_stage="block_close")
            if match.next_item is not None:
                scanner.current = parent.append(Node(match.next_item))
            elif match.close_parent and parent.parent is not None:
                scanner.current = parent.parent
            else:
                scanner.current = parent
            closed = True
        return closed

    @staticmethod
    def _open_block(scanner: Scanner) -> bool:
        for rule in open_rules_for(scanner.current):
            if rule(scanner):
                return True
        return False

    @staticmethod
    def _open_inline(scanner: Scanner) -> bool:
        for rule in INLINE_OPEN_RULES:
            if rule(scanner):
                return True
        return False

    @staticmethod
    def _close_inline(scanner: Scanner) -> bool:
        node = scanner.current
        if node.is_block_level or not match_inline_close(scanner):
            return False
        scanner.flush()
        parent = node.parent
        if parent is None:
            raise StructuralError(f"{node.kind.value} node is detached from the tree", parsing_stage="inline_close")
        scanner.current = parent
        return True
