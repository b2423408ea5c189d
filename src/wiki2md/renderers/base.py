#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/renderers/base.py
"""Base classes for document tree renderers.

This module defines the abstract base class that renderers inherit from.
A renderer folds the tree produced by a parser into output text.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import TextIOBase
from pathlib import Path
from typing import IO, Union

from wiki2md.ast import Node
from wiki2md.exceptions import InvalidOptionsError, OutputWriteError
from wiki2md.options.base import BaseRendererOptions

RendererOutput = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract base class for all document tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Node) -> str:
        """Render the tree rooted at ``doc`` to a string.

        Raises
        ------
        RenderingError
            If rendering fails

        """
        raise NotImplementedError

    def render_to_bytes(self, doc: Node) -> bytes:
        """Render the tree to UTF-8 bytes."""
        return self.render_to_string(doc).encode("utf-8")

    def render(self, doc: Node, output: RendererOutput) -> None:
        """Render the tree and write the result to ``output``.

        Parameters
        ----------
        doc : Node
            Document root
        output : str, Path, IO[bytes] or IO[str]
            File path or file-like object

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If a path output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: RendererOutput) -> None:
        """Write text output to a file path or IO stream.

        Binary streams receive UTF-8 bytes; text streams receive the string.

        Raises
        ------
        OutputWriteError
            If a path output cannot be written
        TypeError
            If output type is not supported

        """
        if isinstance(output, (str, Path)):
            try:
                Path(output).write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
            return

        if not hasattr(output, "write"):
            raise TypeError(f"Unsupported output type: {type(output).__name__}")

        mode = getattr(output, "mode", None)
        if isinstance(mode, str):
            is_binary = "b" in mode
        else:
            # io.BytesIO and friends carry no mode attribute
            is_binary = not isinstance(output, TextIOBase)
        if is_binary:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            output.write(text)  # type: ignore[arg-type]
