#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the scanner cursor and the literal text buffer."""

import pytest

from wiki2md.ast import Node, NodeKind, make_text
from wiki2md.parsers._scanner import Scanner
from wiki2md.parsers._text_buffer import TextBuffer


@pytest.mark.unit
class TestTextBuffer:
    """Test literal text accumulation."""

    def test_rejects_non_positive_capacity(self) -> None:
        """Test that the capacity must be positive."""
        with pytest.raises(ValueError):
            TextBuffer(0)

    def test_is_full_at_capacity(self) -> None:
        """Test the fullness threshold."""
        buffer = TextBuffer(3)
        buffer.append("ab")
        assert not buffer.is_full
        buffer.append("c")
        assert buffer.is_full
        assert len(buffer) == 3

    def test_flush_empty_buffer_is_noop(self) -> None:
        """Test that flushing nothing creates no text leaf."""
        paragraph = Node(NodeKind.PARAGRAPH)
        TextBuffer().flush(paragraph)
        assert paragraph.children == []

    def test_flush_appends_text_leaf(self) -> None:
        """Test that flushed text becomes a new leaf and the buffer is cleared."""
        paragraph = Node(NodeKind.PARAGRAPH)
        paragraph.append(Node(NodeKind.STRONG))
        buffer = TextBuffer()
        buffer.append("tail")
        buffer.flush(paragraph)

        assert paragraph.children[-1].kind is NodeKind.TEXT
        assert paragraph.children[-1].text == "tail"
        assert not buffer

    def test_flush_extends_trailing_text_leaf(self) -> None:
        """Test that consecutive flushes merge into one leaf."""
        paragraph = Node(NodeKind.PARAGRAPH, children=[make_text("abc")])
        buffer = TextBuffer()
        buffer.append("def")
        buffer.flush(paragraph)

        assert len(paragraph.children) == 1
        assert paragraph.children[0].text == "abcdef"


@pytest.mark.unit
class TestScanner:
    """Test cursor helpers."""

    def test_at_and_peek(self) -> None:
        """Test lookahead without consuming."""
        scanner = Scanner("ab", 8)
        assert scanner.at("ab")
        assert scanner.at("b", offset=1)
        assert scanner.peek(1) == "b"
        assert scanner.peek(5) == ""
        assert scanner.pos == 0

    def test_advance_clamps_to_end(self) -> None:
        """Test that advancing past the end stops at the end."""
        scanner = Scanner("abc", 8)
        scanner.advance(10)
        assert scanner.at_end
        assert scanner.pos == 3

    def test_count_run_with_limit(self) -> None:
        """Test run counting honors the limit."""
        scanner = Scanner("=========x", 8)
        assert scanner.count_run("=") == 9
        assert scanner.count_run("=", limit=7) == 7
        assert scanner.count_run("x") == 0

    def test_skip_newlines(self) -> None:
        """Test that only newline characters are skipped."""
        scanner = Scanner("\n\n\nx", 8)
        scanner.skip_newlines()
        assert scanner.peek() == "x"

    def test_take_rest_of_line_stops_before_newline(self) -> None:
        """Test that the newline stays unread."""
        scanner = Scanner("attr=1\nnext", 8)
        assert scanner.take_rest_of_line() == "attr=1"
        assert scanner.at("\nnext")

    def test_open_node_flushes_first(self) -> None:
        """Test that pending text lands before the new node."""
        scanner = Scanner("", 8)
        scanner.append_literal("x")
        node = scanner.open_node(NodeKind.HEADING, subtype=2)

        assert [child.kind for child in scanner.root.children] == [NodeKind.TEXT, NodeKind.HEADING]
        assert scanner.current is node
        assert node.subtype == 2

    def test_append_literal_flushes_when_full(self) -> None:
        """Test that a full buffer moves into the tree before growing."""
        scanner = Scanner("", 2)
        for char in "abcde":
            scanner.append_literal(char)

        assert scanner.root.children[0].text == "abcd"
        assert scanner.buffer.getvalue() == "e"
