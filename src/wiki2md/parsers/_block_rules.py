#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/parsers/_block_rules.py
"""Block-level open and close rules for the wikitext scanner.

Open rules are tried in priority order while the current node accepts block
children; the first rule that matches builds the new node(s) and moves the
cursor past the markup. Close rules are keyed by the kind of the nearest
block-level node and decide whether the upcoming input terminates it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from wiki2md.ast import CELL_KINDS, Node, NodeKind, make_text
from wiki2md.constants import (
    GALLERY_CLOSE,
    GALLERY_OPEN,
    LIST_ENDING_SEQUENCES,
    MAX_HEADING_LEVEL,
    PARAGRAPH_ENDING_SEQUENCES,
)
from wiki2md.parsers._scanner import Scanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloseMatch:
    """Outcome of a matching close rule.

    Parameters
    ----------
    close_parent : bool, default False
        The terminator also ends the enclosing container (e.g. a blank line
        after a list item ends the list)
    next_item : NodeKind or None, default None
        Kind of a sibling item to create and make current in place of the
        closed one (gallery items have no opening markup)

    """

    close_parent: bool = False
    next_item: Optional[NodeKind] = None


CLOSED = CloseMatch()
CLOSED_WITH_PARENT = CloseMatch(close_parent=True)

OpenRule = Callable[[Scanner], bool]
CloseRule = Callable[[Scanner, Node], Optional[CloseMatch]]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def standalone_template_end(text: str, start: int) -> int:
    """Return the end of a ``{{...}}`` that fills the rest of its line, or -1.

    ``start`` must point at the opening braces. Nested templates are
    balanced. The template counts as standalone when it closes on the same
    line and only whitespace follows it on that line.
    """
    if not text.startswith("{{", start):
        return -1
    depth = 0
    index = start
    length = len(text)
    while index < length:
        if text.startswith("{{", index):
            depth += 1
            index += 2
        elif text.startswith("}}", index):
            depth -= 1
            index += 2
            if depth == 0:
                line_end = text.find("\n", index)
                tail = text[index:] if line_end == -1 else text[index:line_end]
                return index if not tail.strip() else -1
        elif text[index] == "\n":
            return -1
        else:
            index += 1
    return -1


def _ends_list(scanner: Scanner) -> bool:
    return scanner.at_any(LIST_ENDING_SEQUENCES)


def _open_list(scanner: Scanner, list_kind: NodeKind, item_kind: NodeKind, marker: str) -> bool:
    scanner.open_node(list_kind)
    return _open_list_item(scanner, item_kind, marker)


def _open_list_item(scanner: Scanner, item_kind: NodeKind, marker: str) -> bool:
    depth = scanner.count_run(marker)
    scanner.advance(depth)
    scanner.open_node(item_kind, subtype=depth)
    return True


# ---------------------------------------------------------------------------
# Open rules
# ---------------------------------------------------------------------------


def open_block_template(scanner: Scanner) -> bool:
    if not scanner.at("{{"):
        return False
    scanner.advance(2)
    scanner.open_node(NodeKind.BLOCK_TEMPLATE)
    return True


def open_bullet_list(scanner: Scanner) -> bool:
    if not scanner.at("*") or scanner.current.kind is NodeKind.BULLET_LIST:
        return False
    return _open_list(scanner, NodeKind.BULLET_LIST, NodeKind.BULLET_LIST_ITEM, "*")


def open_bullet_list_item(scanner: Scanner) -> bool:
    if not scanner.at("*") or scanner.current.kind is not NodeKind.BULLET_LIST:
        return False
    return _open_list_item(scanner, NodeKind.BULLET_LIST_ITEM, "*")


def open_definition_list_with_term(scanner: Scanner) -> bool:
    if not scanner.at(";") or scanner.current.kind is NodeKind.DEFINITION_LIST:
        return False
    scanner.advance()
    scanner.open_node(NodeKind.DEFINITION_LIST)
    scanner.open_node(NodeKind.DEFINITION_TERM)
    return True


def open_definition_term(scanner: Scanner) -> bool:
    if not scanner.at(";") or scanner.current.kind is not NodeKind.DEFINITION_LIST:
        return False
    scanner.advance()
    scanner.open_node(NodeKind.DEFINITION_TERM)
    return True


def open_definition_list_with_definition(scanner: Scanner) -> bool:
    if not scanner.at(":") or scanner.current.kind is NodeKind.DEFINITION_LIST:
        return False
    scanner.advance()
    scanner.open_node(NodeKind.DEFINITION_LIST)
    scanner.open_node(NodeKind.DEFINITION)
    return True


def open_definition(scanner: Scanner) -> bool:
    if not scanner.at(":") or scanner.current.kind is not NodeKind.DEFINITION_LIST:
        return False
    scanner.advance()
    scanner.open_node(NodeKind.DEFINITION)
    return True


def open_gallery(scanner: Scanner) -> bool:
    if not scanner.at(GALLERY_OPEN):
        return False
    scanner.advance(len(GALLERY_OPEN))
    scanner.skip_newlines()
    scanner.open_node(NodeKind.GALLERY)
    if not scanner.at(GALLERY_CLOSE):
        scanner.open_node(NodeKind.GALLERY_ITEM)
    return True


def open_heading(scanner: Scanner) -> bool:
    if not scanner.at("=="):
        return False
    # "==" is a level 1 heading; each further "=" adds a level
    run = scanner.count_run("=", limit=MAX_HEADING_LEVEL + 1)
    scanner.advance(run)
    scanner.open_node(NodeKind.HEADING, subtype=run - 1)
    return True


def open_horizontal_rule(scanner: Scanner) -> bool:
    if not scanner.at("----"):
        return False
    scanner.advance(scanner.count_run("-"))
    scanner.open_node(NodeKind.HORIZONTAL_RULE)
    return True


def open_numbered_list(scanner: Scanner) -> bool:
    if not scanner.at("#") or scanner.current.kind is NodeKind.NUMBERED_LIST:
        return False
    return _open_list(scanner, NodeKind.NUMBERED_LIST, NodeKind.NUMBERED_LIST_ITEM, "#")


def open_numbered_list_item(scanner: Scanner) -> bool:
    if not scanner.at("#") or scanner.current.kind is not NodeKind.NUMBERED_LIST:
        return False
    return _open_list_item(scanner, NodeKind.NUMBERED_LIST_ITEM, "#")


def open_table(scanner: Scanner) -> bool:
    if not scanner.at("{|"):
        return False
    scanner.advance(2)
    table = scanner.open_node(NodeKind.TABLE)
    attributes = scanner.take_rest_of_line().strip()
    if attributes:
        table.append(make_text(attributes))
    scanner.skip_newlines()
    return True


def open_preformatted(scanner: Scanner) -> bool:
    if not scanner.at(" "):
        return False
    scanner.advance()
    scanner.open_node(NodeKind.PREFORMATTED)
    return True


def open_paragraph(scanner: Scanner) -> bool:
    scanner.open_node(NodeKind.PARAGRAPH)
    return True


def open_table_caption(scanner: Scanner) -> bool:
    if not scanner.at("|+"):
        return False
    scanner.advance(2)
    scanner.open_node(NodeKind.TABLE_CAPTION)
    return True


def open_table_row(scanner: Scanner) -> bool:
    if not scanner.at("|-"):
        return False
    scanner.advance(2)
    # Row attributes are not rendered
    scanner.take_rest_of_line()
    scanner.skip_newlines()
    scanner.open_node(NodeKind.TABLE_ROW)
    return True


def open_first_table_row(scanner: Scanner) -> bool:
    """Open the implicit first row of a table written without ``|-``."""
    if not (scanner.at("|") or scanner.at("!")) or scanner.at("|}"):
        return False
    if scanner.current.has_child_of_kind((NodeKind.TABLE_ROW,)):
        return False
    scanner.open_node(NodeKind.TABLE_ROW)
    return True


BLOCK_OPEN_RULES: tuple[OpenRule, ...] = (
    open_block_template,
    open_bullet_list,
    open_bullet_list_item,
    open_definition_list_with_term,
    open_definition_term,
    open_definition_list_with_definition,
    open_definition,
    open_gallery,
    open_heading,
    open_horizontal_rule,
    open_numbered_list,
    open_numbered_list_item,
    open_table,
    open_preformatted,
    open_paragraph,
)

TABLE_OPEN_RULES: tuple[OpenRule, ...] = (
    open_table_caption,
    open_table_row,
    open_first_table_row,
    open_paragraph,
)


def open_rules_for(current: Node) -> tuple[OpenRule, ...]:
    """Return the open rules that apply while ``current`` is the container."""
    if current.kind is NodeKind.TABLE:
        return TABLE_OPEN_RULES
    return BLOCK_OPEN_RULES


# ---------------------------------------------------------------------------
# Close rules
# ---------------------------------------------------------------------------


def close_block_template(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if scanner.at("}}") and scanner.current.kind is not NodeKind.INLINE_TEMPLATE:
        scanner.advance(2)
        return CLOSED
    return None


def close_list(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    return CLOSED if _ends_list(scanner) else None


def _close_list_item(scanner: Scanner, marker: str) -> Optional[CloseMatch]:
    if _ends_list(scanner):
        return CLOSED_WITH_PARENT
    if scanner.at("\n" + marker):
        return CLOSED
    return None


def close_bullet_list_item(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    return _close_list_item(scanner, "*")


def close_numbered_list_item(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    return _close_list_item(scanner, "#")


def close_definition_term(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if not scanner.at("\n"):
        return None
    # The list continues only when the next line is another term or definition
    if scanner.at("\n:") or scanner.at("\n;"):
        return CLOSED
    return CLOSED_WITH_PARENT


def close_definition(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if _ends_list(scanner):
        return CLOSED_WITH_PARENT
    if scanner.at("\n:") or scanner.at("\n;"):
        return CLOSED
    return None


def close_gallery(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if scanner.at(GALLERY_CLOSE):
        scanner.advance(len(GALLERY_CLOSE))
        return CLOSED
    return None


def close_gallery_item(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if scanner.at(GALLERY_CLOSE):
        # Left in place for the gallery's own close rule
        return CLOSED
    if not scanner.at("\n"):
        return None

    following = scanner.pos
    while following < len(scanner.text) and scanner.text[following] == "\n":
        following += 1
    if following >= len(scanner.text) or scanner.text.startswith(GALLERY_CLOSE, following):
        return CLOSED
    return CloseMatch(next_item=NodeKind.GALLERY_ITEM)


def close_heading(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if scanner.at("=" * (block.subtype + 1)):
        scanner.take_rest_of_line()
        return CLOSED
    if scanner.at("\n"):
        return CLOSED
    return None


def close_horizontal_rule(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    return CLOSED if scanner.at("\n") or scanner.at_end else None


def close_preformatted(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if scanner.at("\n") and not scanner.at("\n "):
        return CLOSED
    return None


def close_table(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if scanner.at("|}"):
        scanner.advance(2)
        return CLOSED
    return None


def close_table_caption(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    return CLOSED if scanner.at("\n") else None


def close_table_row(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if scanner.at("\n|-") or scanner.at("\n|}") or scanner.at("|}"):
        return CLOSED
    return None


def close_paragraph(scanner: Scanner, block: Node) -> Optional[CloseMatch]:
    if scanner.at_any(PARAGRAPH_ENDING_SEQUENCES):
        return CLOSED
    parent = block.parent
    if parent is not None and parent.kind is NodeKind.TABLE:
        if scanner.at("\n|") or scanner.at("\n!") or scanner.at("|}"):
            return CLOSED
    if scanner.at("\n{{") and standalone_template_end(scanner.text, scanner.pos + 1) != -1:
        return CLOSED
    return None


BLOCK_CLOSE_RULES: dict[NodeKind, CloseRule] = {
    NodeKind.BLOCK_TEMPLATE: close_block_template,
    NodeKind.BULLET_LIST: close_list,
    NodeKind.BULLET_LIST_ITEM: close_bullet_list_item,
    NodeKind.DEFINITION_TERM: close_definition_term,
    NodeKind.DEFINITION_LIST: close_list,
    NodeKind.DEFINITION: close_definition,
    NodeKind.GALLERY: close_gallery,
    NodeKind.GALLERY_ITEM: close_gallery_item,
    NodeKind.HEADING: close_heading,
    NodeKind.HORIZONTAL_RULE: close_horizontal_rule,
    NodeKind.NUMBERED_LIST: close_list,
    NodeKind.NUMBERED_LIST_ITEM: close_numbered_list_item,
    NodeKind.PREFORMATTED: close_preformatted,
    NodeKind.TABLE: close_table,
    NodeKind.TABLE_CAPTION: close_table_caption,
    NodeKind.TABLE_ROW: close_table_row,
    NodeKind.PARAGRAPH: close_paragraph,
}


def row_has_cells(row: Node) -> bool:
    """Whether any cell has been opened in ``row``."""
    return row.has_child_of_kind(CELL_KINDS)
