#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/renderers/_output.py
"""Hard-capped output buffer for renderers."""

from __future__ import annotations

from typing import Optional

from wiki2md.exceptions import OutputCapacityError


class OutputBuffer:
    """Growable text buffer with a hard cap measured in UTF-8 bytes.

    A write that would take the buffer past its capacity is rejected as a
    whole with :class:`OutputCapacityError`; nothing of it is appended.

    Parameters
    ----------
    capacity : int
        Maximum number of UTF-8 bytes the buffer may hold
    stage : str, optional
        Rendering stage reported in capacity errors

    Examples
    --------
        >>> out = OutputBuffer(4)
        >>> out.write("abc")
        >>> out.write("de")
        Traceback (most recent call last):
        ...
        wiki2md.exceptions.OutputCapacityError: Output content too long: 5 bytes required, capacity is 4 bytes

    """

    def __init__(self, capacity: int, stage: Optional[str] = None):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.stage = stage
        self._parts: list[str] = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def size(self) -> int:
        """Number of UTF-8 bytes written so far."""
        return self._size

    @property
    def remaining(self) -> int:
        """Number of UTF-8 bytes that can still be written."""
        return self.capacity - self._size

    def write(self, text: str) -> None:
        """Append ``text``.

        Raises
        ------
        OutputCapacityError
            If ``text`` does not fit in the remaining capacity

        """
        if not text:
            return
        size = len(text.encode("utf-8"))
        if self._size + size > self.capacity:
            raise OutputCapacityError(self.capacity, self._size + size, rendering_stage=self.stage)
        self._parts.append(text)
        self._size += size

    def getvalue(self) -> str:
        return "".join(self._parts)
