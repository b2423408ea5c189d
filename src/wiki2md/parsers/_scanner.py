#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/parsers/_scanner.py
"""Cursor and tree-building state shared by the wikitext rule tables."""

from __future__ import annotations

from wiki2md.ast import Node, NodeKind, make_root
from wiki2md.parsers._text_buffer import TextBuffer


class Scanner:
    """Single-pass cursor over a wikitext document.

    Parameters
    ----------
    text : str
        The whole document
    buffer_size : int
        Capacity of the literal text buffer

    Attributes
    ----------
    root : Node
        Document root; owns the whole tree
    current : Node
        Node where parsing resumes
    pos : int
        Index of the next unread character
    buffer : TextBuffer
        Pending literal characters, not yet in the tree
    in_nowiki : bool
        Whether the cursor is inside a ``<nowiki>`` region

    """

    def __init__(self, text: str, buffer_size: int):
        self.text = text
        self.pos = 0
        self.root = make_root()
        self.current: Node = self.root
        self.buffer = TextBuffer(buffer_size)
        self.in_nowiki = False

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def at(self, literal: str, offset: int = 0) -> bool:
        """Whether ``literal`` occurs at the cursor (shifted by ``offset``)."""
        return self.text.startswith(literal, self.pos + offset)

    def at_any(self, literals: tuple[str, ...]) -> bool:
        return any(self.text.startswith(literal, self.pos) for literal in literals)

    def peek(self, offset: int = 0) -> str:
        """Character at the cursor plus ``offset``, or ``""`` past the end."""
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def count_run(self, char: str, limit: int | None = None) -> int:
        """Length of the run of ``char`` starting at the cursor."""
        end = self.pos
        while end < len(self.text) and self.text[end] == char:
            if limit is not None and end - self.pos >= limit:
                break
            end += 1
        return end - self.pos

    def skip_newlines(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] == "\n":
            self.pos += 1

    def take_rest_of_line(self) -> str:
        """Consume and return the characters up to (not including) the next newline."""
        end = self.text.find("\n", self.pos)
        if end == -1:
            end = len(self.text)
        line = self.text[self.pos : end]
        self.pos = end
        return line

    def flush(self) -> None:
        """Move pending literal text into the current node."""
        self.buffer.flush(self.current)

    def open_node(self, kind: NodeKind, subtype: int = 0) -> Node:
        """Flush, append a new ``kind`` node to ``current`` and make it current."""
        self.flush()
        node = self.current.append(Node(kind, subtype=subtype))
        self.current = node
        return node

    def append_literal(self, char: str) -> None:
        """Buffer one literal character, flushing first when the buffer is full."""
        if self.buffer.is_full:
            self.flush()
        self.buffer.append(char)
