#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/ast/visitors.py
"""Visitor pattern implementation for document tree traversal.

This module provides the visitor base class for processing document trees.
Every node kind has exactly one abstract ``visit_*`` method, so a concrete
visitor that forgets a kind cannot be instantiated.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from wiki2md.ast.nodes import Node, NodeKind


class NodeVisitor(ABC):
    """Abstract base class for document tree visitors.

    Subclasses implement one ``visit_<kind>`` method per :class:`NodeKind`.
    :meth:`Node.accept` dispatches to the matching method.

    Examples
    --------
    Counting text leaves:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def generic_visit(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1

    """

    def generic_visit(self, node: Node) -> Any:
        """Visit every child of ``node`` in order."""
        for child in node.children:
            child.accept(self)

    # Block-level kinds

    @abstractmethod
    def visit_root(self, node: Node) -> Any:
        """Visit the document root."""

    @abstractmethod
    def visit_paragraph(self, node: Node) -> Any:
        """Visit a paragraph."""

    @abstractmethod
    def visit_heading(self, node: Node) -> Any:
        """Visit a heading; ``node.subtype`` is the level."""

    @abstractmethod
    def visit_horizontal_rule(self, node: Node) -> Any:
        """Visit a horizontal rule."""

    @abstractmethod
    def visit_block_template(self, node: Node) -> Any:
        """Visit a template standing as its own block."""

    @abstractmethod
    def visit_bullet_list(self, node: Node) -> Any:
        """Visit a bullet list."""

    @abstractmethod
    def visit_bullet_list_item(self, node: Node) -> Any:
        """Visit a bullet list item; ``node.subtype`` is the depth."""

    @abstractmethod
    def visit_numbered_list(self, node: Node) -> Any:
        """Visit a numbered list."""

    @abstractmethod
    def visit_numbered_list_item(self, node: Node) -> Any:
        """Visit a numbered list item; ``node.subtype`` is the depth."""

    @abstractmethod
    def visit_definition_list(self, node: Node) -> Any:
        """Visit a definition list."""

    @abstractmethod
    def visit_definition_term(self, node: Node) -> Any:
        """Visit a definition list term."""

    @abstractmethod
    def visit_definition(self, node: Node) -> Any:
        """Visit a definition list definition."""

    @abstractmethod
    def visit_preformatted(self, node: Node) -> Any:
        """Visit a preformatted text block."""

    @abstractmethod
    def visit_gallery(self, node: Node) -> Any:
        """Visit a gallery."""

    @abstractmethod
    def visit_gallery_item(self, node: Node) -> Any:
        """Visit a gallery item."""

    @abstractmethod
    def visit_table(self, node: Node) -> Any:
        """Visit a table."""

    @abstractmethod
    def visit_table_caption(self, node: Node) -> Any:
        """Visit a table caption."""

    @abstractmethod
    def visit_table_row(self, node: Node) -> Any:
        """Visit a table row."""

    # Inline kinds

    @abstractmethod
    def visit_text(self, node: Node) -> Any:
        """Visit a text leaf."""

    @abstractmethod
    def visit_emphasis(self, node: Node) -> Any:
        """Visit emphasized content."""

    @abstractmethod
    def visit_strong(self, node: Node) -> Any:
        """Visit strong content."""

    @abstractmethod
    def visit_strong_emphasis(self, node: Node) -> Any:
        """Visit strong and emphasized content."""

    @abstractmethod
    def visit_inline_template(self, node: Node) -> Any:
        """Visit a template inside a flow of text."""

    @abstractmethod
    def visit_internal_link(self, node: Node) -> Any:
        """Visit an internal (wiki page) link."""

    @abstractmethod
    def visit_external_link(self, node: Node) -> Any:
        """Visit an external (URL) link."""

    @abstractmethod
    def visit_media(self, node: Node) -> Any:
        """Visit a media (file) reference."""

    @abstractmethod
    def visit_table_header(self, node: Node) -> Any:
        """Visit a table header cell."""

    @abstractmethod
    def visit_table_cell(self, node: Node) -> Any:
        """Visit a table data cell."""


class NodeCollector(NodeVisitor):
    """Visitor that collects nodes matching a predicate.

    Parameters
    ----------
    predicate : callable
        Function returning True for nodes to collect

    Examples
    --------
        >>> collector = NodeCollector(lambda n: n.kind is NodeKind.HEADING)
        >>> root.accept(collector)
        >>> headings = collector.collected

    """

    def __init__(self, predicate: Callable[[Node], bool]):
        """Initialize the collector with a match predicate."""
        self.predicate = predicate
        self.collected: list[Node] = []

    def generic_visit(self, node: Node) -> None:
        """Collect ``node`` if it matches, then visit its children."""
        if self.predicate(node):
            self.collected.append(node)
        super().generic_visit(node)

    visit_root = generic_visit
    visit_paragraph = generic_visit
    visit_heading = generic_visit
    visit_horizontal_rule = generic_visit
    visit_block_template = generic_visit
    visit_bullet_list = generic_visit
    visit_bullet_list_item = generic_visit
    visit_numbered_list = generic_visit
    visit_numbered_list_item = generic_visit
    visit_definition_list = generic_visit
    visit_definition_term = generic_visit
    visit_definition = generic_visit
    visit_preformatted = generic_visit
    visit_gallery = generic_visit
    visit_gallery_item = generic_visit
    visit_table = generic_visit
    visit_table_caption = generic_visit
    visit_table_row = generic_visit
    visit_text = generic_visit
    visit_emphasis = generic_visit
    visit_strong = generic_visit
    visit_strong_emphasis = generic_visit
    visit_inline_template = generic_visit
    visit_internal_link = generic_visit
    visit_external_link = generic_visit
    visit_media = generic_visit
    visit_table_header = generic_visit
    visit_table_cell = generic_visit


def collect_nodes(root: Node, kind: NodeKind) -> list[Node]:
    """Return every node of ``kind`` under ``root`` (inclusive), in document order."""
    collector = NodeCollector(lambda node: node.kind is kind)
    root.accept(collector)
    return collector.collected


def visit_method_names() -> dict[NodeKind, str]:
    """Map each node kind to the visitor method that handles it."""
    return {kind: f"visit_{kind.value}" for kind in NodeKind}
