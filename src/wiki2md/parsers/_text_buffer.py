#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/parsers/_text_buffer.py
"""Literal text accumulation for the wikitext scanner.

Characters that are not markup are collected here and moved into the tree
at every state transition, so each contiguous run of literal text ends up in
exactly one text leaf.
"""

from __future__ import annotations

from wiki2md.ast import Node, NodeKind, make_text
from wiki2md.constants import DEFAULT_TEXT_BUFFER_SIZE


class TextBuffer:
    """Append-only buffer of literal characters.

    Parameters
    ----------
    capacity : int, default 8192
        Number of characters after which :attr:`is_full` reports True. The
        scanner flushes a full buffer before appending more, so long literal
        runs are never cut.

    """

    def __init__(self, capacity: int = DEFAULT_TEXT_BUFFER_SIZE):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._parts: list[str] = []
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    @property
    def is_full(self) -> bool:
        """Whether the buffer has reached its capacity."""
        return self._length >= self.capacity

    def append(self, text: str) -> None:
        """Add literal characters to the buffer."""
        self._parts.append(text)
        self._length += len(text)

    def getvalue(self) -> str:
        """Return the buffered characters without clearing them."""
        return "".join(self._parts)

    def clear(self) -> None:
        """Discard the buffered characters."""
        self._parts.clear()
        self._length = 0

    def flush(self, current: Node) -> None:
        """Move the buffered text into ``current`` and clear the buffer.

        The text extends ``current``'s last child when that child is a text
        leaf; otherwise a new text leaf is appended. An empty buffer is a
        no-op, so flushing never creates empty leaves.

        """
        if not self:
            return
        text = self.getvalue()
        self.clear()

        last = current.last_child
        if last is not None and last.kind is NodeKind.TEXT:
            last.append_text(text)
        else:
            current.append(make_text(text))
