#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/ast/nodes.py
"""Document tree nodes for parsed wikitext.

This module defines the tree built by the wikitext parser and consumed by the
renderers. Every element of the document is a :class:`Node`; what the node
represents is given by its :class:`NodeKind`.

Node Kinds
----------
Block-level kinds represent structural units that occupy their own region of
the document:
    - ROOT, PARAGRAPH, HEADING, HORIZONTAL_RULE, BLOCK_TEMPLATE
    - BULLET_LIST, BULLET_LIST_ITEM, NUMBERED_LIST, NUMBERED_LIST_ITEM
    - DEFINITION_LIST, DEFINITION_TERM, DEFINITION
    - PREFORMATTED, GALLERY, GALLERY_ITEM
    - TABLE, TABLE_CAPTION, TABLE_ROW

Inline kinds represent formatting or references within a block's flow of text:
    - TEXT, EMPHASIS, STRONG, STRONG_EMPHASIS
    - INLINE_TEMPLATE, INTERNAL_LINK, EXTERNAL_LINK, MEDIA
    - TABLE_HEADER, TABLE_CELL

Ownership
---------
A node owns its children. ``parent`` and ``next_sibling`` are weak
references used only for traversal, so dropping the root releases the whole
tree.

"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Optional

from wiki2md.exceptions import StructuralError


class NodeKind(Enum):
    """Closed set of node kinds produced by the wikitext parser."""

    # Block-level kinds
    ROOT = "root"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    HORIZONTAL_RULE = "horizontal_rule"
    BLOCK_TEMPLATE = "block_template"
    BULLET_LIST = "bullet_list"
    BULLET_LIST_ITEM = "bullet_list_item"
    NUMBERED_LIST = "numbered_list"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    DEFINITION_LIST = "definition_list"
    DEFINITION_TERM = "definition_term"
    DEFINITION = "definition"
    PREFORMATTED = "preformatted"
    GALLERY = "gallery"
    GALLERY_ITEM = "gallery_item"
    TABLE = "table"
    TABLE_CAPTION = "table_caption"
    TABLE_ROW = "table_row"

    # Inline kinds
    TEXT = "text"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRONG_EMPHASIS = "strong_emphasis"
    INLINE_TEMPLATE = "inline_template"
    INTERNAL_LINK = "internal_link"
    EXTERNAL_LINK = "external_link"
    MEDIA = "media"
    TABLE_HEADER = "table_header"
    TABLE_CELL = "table_cell"

    @property
    def is_block_level(self) -> bool:
        """Whether nodes of this kind are block-level."""
        return self in BLOCK_KINDS

    @property
    def accepts_block_children(self) -> bool:
        """Whether block-level nodes may be opened directly inside this kind."""
        return self in CONTAINER_KINDS


BLOCK_KINDS = frozenset(
    {
        NodeKind.ROOT,
        NodeKind.PARAGRAPH,
        NodeKind.HEADING,
        NodeKind.HORIZONTAL_RULE,
        NodeKind.BLOCK_TEMPLATE,
        NodeKind.BULLET_LIST,
        NodeKind.BULLET_LIST_ITEM,
        NodeKind.NUMBERED_LIST,
        NodeKind.NUMBERED_LIST_ITEM,
        NodeKind.DEFINITION_LIST,
        NodeKind.DEFINITION_TERM,
        NodeKind.DEFINITION,
        NodeKind.PREFORMATTED,
        NodeKind.GALLERY,
        NodeKind.GALLERY_ITEM,
        NodeKind.TABLE,
        NodeKind.TABLE_CAPTION,
        NodeKind.TABLE_ROW,
    }
)

CONTAINER_KINDS = frozenset(
    {
        NodeKind.ROOT,
        NodeKind.BULLET_LIST,
        NodeKind.NUMBERED_LIST,
        NodeKind.DEFINITION_LIST,
        NodeKind.GALLERY,
        NodeKind.TABLE,
    }
)

EMPHASIS_KINDS = frozenset({NodeKind.EMPHASIS, NodeKind.STRONG, NodeKind.STRONG_EMPHASIS})

LINK_KINDS = frozenset({NodeKind.INTERNAL_LINK, NodeKind.EXTERNAL_LINK, NodeKind.MEDIA})

CELL_KINDS = frozenset({NodeKind.TABLE_HEADER, NodeKind.TABLE_CELL})


@dataclass(eq=False)
class Node:
    """A single element of the document tree.

    Parameters
    ----------
    kind : NodeKind
        What this node represents
    subtype : int, default = 0
        Kind-specific numeric parameter: heading level (1-6) or list item
        nesting depth. Unused (0) for other kinds.
    text : str or None, default = None
        Literal content; only TEXT nodes carry it
    children : list of Node, default = empty list
        Owned children in rendering order

    Notes
    -----
    Nodes compare by identity. Use :meth:`append` to attach children so the
    traversal references stay consistent.

    """

    kind: NodeKind
    subtype: int = 0
    text: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    _parent_ref: Optional[weakref.ReferenceType[Node]] = field(default=None, init=False, repr=False)
    _next_sibling_ref: Optional[weakref.ReferenceType[Node]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate text ownership and adopt any children given at construction."""
        if self.kind is NodeKind.TEXT:
            if self.text is None:
                self.text = ""
            if self.children:
                raise StructuralError("Text nodes cannot have children")
        elif self.text is not None:
            raise StructuralError(f"Only text nodes carry text, got text on {self.kind.value}")

        initial_children, self.children = self.children, []
        for child in initial_children:
            self.append(child)

    @property
    def is_block_level(self) -> bool:
        """Whether this node is block-level (fixed by its kind)."""
        return self.kind.is_block_level

    @property
    def accepts_block_children(self) -> bool:
        """Whether block-level nodes may be opened while this node is current."""
        return self.kind.accepts_block_children

    @property
    def parent(self) -> Optional[Node]:
        """Parent node, or None for a detached node or the root."""
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def next_sibling(self) -> Optional[Node]:
        """Following sibling in the parent's children, if any."""
        return self._next_sibling_ref() if self._next_sibling_ref is not None else None

    @property
    def last_child(self) -> Optional[Node]:
        """Most recently appended child, if any."""
        return self.children[-1] if self.children else None

    @property
    def is_last_child(self) -> bool:
        """Whether no sibling follows this node."""
        return self.next_sibling is None

    def append(self, child: Node) -> Node:
        """Attach ``child`` as the last child of this node.

        Parameters
        ----------
        child : Node
            Detached node to adopt

        Returns
        -------
        Node
            The appended child, for chaining

        Raises
        ------
        StructuralError
            If this node is a text leaf, the child is the root, or the child
            already belongs to another parent

        """
        if self.kind is NodeKind.TEXT:
            raise StructuralError("Cannot append children to a text node")
        if child.kind is NodeKind.ROOT:
            raise StructuralError("The root node cannot be a child")
        if child.parent is not None:
            raise StructuralError(f"{child.kind.value} node already has a parent")

        previous = self.last_child
        if previous is not None:
            previous._next_sibling_ref = weakref.ref(child)
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        return child

    def append_text(self, text: str) -> None:
        """Extend the content of a text node.

        Raises
        ------
        StructuralError
            If this node is not a text node

        """
        if self.kind is not NodeKind.TEXT:
            raise StructuralError(f"Trying to add text to a non text node ({self.kind.value})")
        self.text = (self.text or "") + text

    def block_ancestor(self) -> Optional[Node]:
        """Return this node if it is block-level, else its nearest block-level ancestor."""
        node: Optional[Node] = self
        while node is not None and not node.is_block_level:
            node = node.parent
        return node

    def has_child_of_kind(self, kinds: Iterable[NodeKind]) -> bool:
        """Whether any direct child has one of ``kinds``."""
        wanted = frozenset(kinds)
        return any(child.kind in wanted for child in self.children)

    def walk(self) -> Iterator[Node]:
        """Yield this node and all of its descendants in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def contains_kind(self, kinds: Iterable[NodeKind]) -> bool:
        """Whether any strict descendant has one of ``kinds``."""
        wanted = frozenset(kinds)
        return any(node.kind in wanted for node in self.walk() if node is not self)

    def plain_text(self) -> str:
        """Concatenate the text of every text leaf in this subtree."""
        return "".join(node.text or "" for node in self.walk() if node.kind is NodeKind.TEXT)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Dispatches to ``visitor.visit_<kind>``.

        Raises
        ------
        StructuralError
            If the visitor has no method for this node kind

        """
        method = getattr(visitor, f"visit_{self.kind.value}", None)
        if method is None:
            raise StructuralError(f"{type(visitor).__name__} cannot handle node kind: {self.kind.value}")
        return method(self)


def make_root(children: Iterable[Node] = ()) -> Node:
    """Create an empty document root, optionally with initial children."""
    return Node(NodeKind.ROOT, children=list(children))


def make_text(text: str) -> Node:
    """Create a text leaf."""
    return Node(NodeKind.TEXT, text=text)
