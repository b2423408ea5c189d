#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for document tree nodes."""

import gc

import pytest

from wiki2md.ast import (
    BLOCK_KINDS,
    CONTAINER_KINDS,
    Node,
    NodeKind,
    make_root,
    make_text,
)
from wiki2md.exceptions import StructuralError


@pytest.mark.unit
class TestNodeConstruction:
    """Test node creation and kind properties."""

    def test_text_node_defaults_to_empty_string(self) -> None:
        """Test that a text node without content carries an empty string."""
        node = Node(NodeKind.TEXT)
        assert node.text == ""

    def test_text_only_on_text_nodes(self) -> None:
        """Test that non-text nodes reject literal content."""
        with pytest.raises(StructuralError):
            Node(NodeKind.PARAGRAPH, text="oops")

    def test_text_node_rejects_children(self) -> None:
        """Test that text leaves cannot be built with children."""
        with pytest.raises(StructuralError):
            Node(NodeKind.TEXT, text="a", children=[make_text("b")])

    def test_block_and_inline_partition(self) -> None:
        """Test that every kind is either block-level or inline."""
        for kind in NodeKind:
            assert kind.is_block_level == (kind in BLOCK_KINDS)
        assert not NodeKind.TEXT.is_block_level
        assert not NodeKind.TABLE_CELL.is_block_level
        assert NodeKind.TABLE_ROW.is_block_level

    def test_containers_are_block_level(self) -> None:
        """Test that only block-level kinds accept block children."""
        assert CONTAINER_KINDS <= BLOCK_KINDS
        assert Node(NodeKind.ROOT).accepts_block_children
        assert Node(NodeKind.TABLE).accepts_block_children
        assert not Node(NodeKind.PARAGRAPH).accepts_block_children
        assert not Node(NodeKind.TABLE_ROW).accepts_block_children

    def test_children_given_at_construction_are_adopted(self) -> None:
        """Test that constructor children get parent and sibling links."""
        first, second = make_text("a"), make_text("b")
        paragraph = Node(NodeKind.PARAGRAPH, children=[first, second])

        assert first.parent is paragraph
        assert first.next_sibling is second
        assert second.is_last_child


@pytest.mark.unit
class TestNodeAppend:
    """Test attaching children."""

    def test_append_links_parent_and_siblings(self) -> None:
        """Test that append sets the traversal references."""
        root = make_root()
        first = root.append(Node(NodeKind.PARAGRAPH))
        second = root.append(Node(NodeKind.HORIZONTAL_RULE))

        assert root.children == [first, second]
        assert first.parent is root
        assert second.parent is root
        assert first.next_sibling is second
        assert second.next_sibling is None
        assert root.last_child is second

    def test_append_to_text_node_fails(self) -> None:
        """Test that text leaves cannot receive children."""
        with pytest.raises(StructuralError):
            make_text("leaf").append(make_text("child"))

    def test_root_cannot_be_a_child(self) -> None:
        """Test that a root node cannot be appended anywhere."""
        with pytest.raises(StructuralError):
            make_root().append(make_root())

    def test_node_with_parent_cannot_be_reattached(self) -> None:
        """Test that a child cannot belong to two parents."""
        child = make_text("x")
        Node(NodeKind.PARAGRAPH).append(child)
        other = Node(NodeKind.PARAGRAPH)
        with pytest.raises(StructuralError):
            other.append(child)

    def test_append_text_extends_leaf(self) -> None:
        """Test that append_text concatenates content."""
        node = make_text("foo")
        node.append_text("bar")
        assert node.text == "foobar"

    def test_append_text_on_non_text_node_fails(self) -> None:
        """Test that append_text is reserved for text leaves."""
        with pytest.raises(StructuralError):
            Node(NodeKind.STRONG).append_text("x")


@pytest.mark.unit
class TestNodeTraversal:
    """Test tree queries."""

    def _sample_tree(self) -> Node:
        root = make_root()
        paragraph = root.append(Node(NodeKind.PARAGRAPH))
        paragraph.append(make_text("Hello "))
        strong = paragraph.append(Node(NodeKind.STRONG))
        strong.append(make_text("world"))
        root.append(Node(NodeKind.HEADING, subtype=2)).append(make_text("Title"))
        return root

    def test_walk_is_document_order(self) -> None:
        """Test that walk yields pre-order."""
        kinds = [node.kind for node in self._sample_tree().walk()]
        assert kinds == [
            NodeKind.ROOT,
            NodeKind.PARAGRAPH,
            NodeKind.TEXT,
            NodeKind.STRONG,
            NodeKind.TEXT,
            NodeKind.HEADING,
            NodeKind.TEXT,
        ]

    def test_block_ancestor(self) -> None:
        """Test that inline nodes resolve to their enclosing block."""
        root = self._sample_tree()
        paragraph = root.children[0]
        leaf = paragraph.children[1].children[0]

        assert leaf.block_ancestor() is paragraph
        assert paragraph.block_ancestor() is paragraph

    def test_block_ancestor_of_detached_inline_is_none(self) -> None:
        """Test that a detached inline node has no block ancestor."""
        assert Node(NodeKind.EMPHASIS).block_ancestor() is None

    def test_contains_kind_excludes_self(self) -> None:
        """Test that contains_kind only inspects descendants."""
        root = self._sample_tree()
        paragraph = root.children[0]
        assert paragraph.contains_kind({NodeKind.STRONG})
        assert not paragraph.contains_kind({NodeKind.PARAGRAPH})

    def test_has_child_of_kind_is_direct_only(self) -> None:
        """Test that has_child_of_kind ignores grandchildren."""
        root = self._sample_tree()
        assert root.has_child_of_kind({NodeKind.HEADING})
        assert not root.has_child_of_kind({NodeKind.STRONG})

    def test_plain_text(self) -> None:
        """Test concatenation of text leaves."""
        assert self._sample_tree().plain_text() == "Hello worldTitle"

    def test_accept_without_visitor_method_raises(self) -> None:
        """Test that dispatch to a visitor lacking the method fails loudly."""
        with pytest.raises(StructuralError, match="cannot handle node kind: text"):
            make_text("x").accept(object())

    def test_dropping_root_releases_tree(self) -> None:
        """Test that children do not keep their parent alive."""
        root = self._sample_tree()
        leaf = root.children[0].children[0]
        del root
        gc.collect()
        assert leaf.parent is None
