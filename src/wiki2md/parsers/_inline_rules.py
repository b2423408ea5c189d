#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/parsers/_inline_rules.py
"""Inline open and close rules for the wikitext scanner.

Inline rules run while the current node does not accept block children.
Opening markup is tried in a fixed priority order; closing markup is only
ever the terminator of the current node's own kind.
"""

from __future__ import annotations

from typing import Callable, Optional

from wiki2md.ast import EMPHASIS_KINDS, NodeKind
from wiki2md.constants import MEDIA_PREFIXES
from wiki2md.parsers._block_rules import row_has_cells
from wiki2md.parsers._scanner import Scanner

InlineOpenRule = Callable[[Scanner], bool]


def _open_delimited(scanner: Scanner, delimiter: str, kind: NodeKind, consumed: Optional[int] = None) -> bool:
    if not scanner.at(delimiter):
        return False
    scanner.advance(len(delimiter) if consumed is None else consumed)
    scanner.open_node(kind)
    return True


def _open_emphasis_family(delimiter: str, kind: NodeKind) -> InlineOpenRule:
    def rule(scanner: Scanner) -> bool:
        # No nesting inside the emphasis family
        if scanner.current.kind in EMPHASIS_KINDS:
            return False
        return _open_delimited(scanner, delimiter, kind)

    rule.__name__ = f"open_{kind.value}"
    return rule


open_strong_emphasis = _open_emphasis_family("'''''", NodeKind.STRONG_EMPHASIS)
open_strong = _open_emphasis_family("'''", NodeKind.STRONG)
open_emphasis = _open_emphasis_family("''", NodeKind.EMPHASIS)


def open_media(scanner: Scanner) -> bool:
    # Only the brackets are markup; the namespace prefix stays in the link text
    for prefix in MEDIA_PREFIXES:
        if scanner.at(prefix):
            return _open_delimited(scanner, prefix, NodeKind.MEDIA, consumed=2)
    return False


def open_internal_link(scanner: Scanner) -> bool:
    return _open_delimited(scanner, "[[", NodeKind.INTERNAL_LINK)


def open_external_link(scanner: Scanner) -> bool:
    return _open_delimited(scanner, "[", NodeKind.EXTERNAL_LINK)


def open_inline_template(scanner: Scanner) -> bool:
    return _open_delimited(scanner, "{{", NodeKind.INLINE_TEMPLATE)


def open_table_cell(scanner: Scanner) -> bool:
    """Open a header or data cell inside the current table row."""
    row = scanner.current
    if row.kind is not NodeKind.TABLE_ROW:
        return False

    if scanner.at("\n!"):
        return _open_delimited(scanner, "\n!", NodeKind.TABLE_HEADER)
    if scanner.at("\n|") and not scanner.at_any(("\n|-", "\n|}", "\n|+")):
        return _open_delimited(scanner, "\n|", NodeKind.TABLE_CELL)
    if scanner.at("!!"):
        return _open_delimited(scanner, "!!", NodeKind.TABLE_HEADER)
    if scanner.at("||"):
        return _open_delimited(scanner, "||", NodeKind.TABLE_CELL)

    if row_has_cells(row):
        return False
    if scanner.at("!"):
        return _open_delimited(scanner, "!", NodeKind.TABLE_HEADER)
    if scanner.at("|") and not scanner.at_any(("|-", "|}", "|+")):
        return _open_delimited(scanner, "|", NodeKind.TABLE_CELL)
    return False


INLINE_OPEN_RULES: tuple[InlineOpenRule, ...] = (
    open_strong_emphasis,
    open_strong,
    open_emphasis,
    open_media,
    open_internal_link,
    open_external_link,
    open_inline_template,
    open_table_cell,
)


# Terminators that are consumed when they close their node
INLINE_TERMINATORS: dict[NodeKind, str] = {
    NodeKind.EMPHASIS: "''",
    NodeKind.STRONG: "'''",
    NodeKind.STRONG_EMPHASIS: "'''''",
    NodeKind.INTERNAL_LINK: "]]",
    NodeKind.MEDIA: "]]",
    NodeKind.EXTERNAL_LINK: "]",
    NodeKind.INLINE_TEMPLATE: "}}",
}

# Terminators that end a cell but belong to whatever comes next
CELL_TERMINATORS: dict[NodeKind, tuple[str, ...]] = {
    NodeKind.TABLE_CELL: ("\n|", "\n!", "||"),
    NodeKind.TABLE_HEADER: ("\n|", "\n!", "||", "!!"),
}


def match_inline_close(scanner: Scanner) -> bool:
    """Whether the input at the cursor closes the current inline node.

    A consumed terminator is skipped over; cell terminators are left for
    the next cell's open rule.
    """
    kind = scanner.current.kind
    terminator = INLINE_TERMINATORS.get(kind)
    if terminator is not None:
        if scanner.at(terminator):
            scanner.advance(len(terminator))
            return True
        return False

    cell_terminators = CELL_TERMINATORS.get(kind)
    if cell_terminators is not None:
        return scanner.at_any(cell_terminators)
    return False
