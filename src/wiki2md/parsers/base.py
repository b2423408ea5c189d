#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers that turn a source
document into the wiki2md document tree, along with the shared input
loading: reading paths and streams, enforcing the input size cap and
decoding bytes.

"""

from __future__ import annotations

import builtins
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union

from wiki2md.ast import Node
from wiki2md.exceptions import FileAccessError, FileNotFoundError, InvalidOptionsError, ValidationError
from wiki2md.options.base import BaseParserOptions
from wiki2md.utils.encoding import decode_bytes, read_stream_bytes, truncate_utf8

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], bytes]


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method handles these input types:
    - str: the document content itself
    - Path: file to read
    - IO[bytes]: file-like object in binary mode
    - bytes: raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Node:
        """Parse the input document into a tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            The input document to parse

        Returns
        -------
        Node
            Root node of the document tree

        Raises
        ------
        ParsingError
            If parsing fails
        ValidationError
            If input data is of an unsupported type
        FileError
            If an input file cannot be read

        """
        raise NotImplementedError

    @staticmethod
    def _load_bytes_content(input_data: ParserInput) -> bytes:
        """Load data as bytes from the supported input types.

        Raises
        ------
        FileNotFoundError
            If a path input does not exist
        FileAccessError
            If a path input cannot be read
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, bytes):
            return input_data
        elif isinstance(input_data, str):
            return input_data.encode("utf-8")
        elif isinstance(input_data, Path):
            try:
                return input_data.read_bytes()
            except builtins.FileNotFoundError as e:
                raise FileNotFoundError(str(input_data), original_error=e) from e
            except OSError as e:
                raise FileAccessError(str(input_data), original_error=e) from e
        elif hasattr(input_data, "read"):
            return read_stream_bytes(input_data)
        else:
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )

    @classmethod
    def _load_text_content(
        cls, input_data: ParserInput, max_size: int, encoding: Optional[str] = None
    ) -> str:
        """Load, size-cap and decode the document.

        Documents larger than ``max_size`` bytes are truncated and a warning
        is logged; they are never rejected.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Input data to load
        max_size : int
            Maximum number of bytes to keep
        encoding : str, optional
            Encoding of byte input; detected when None

        Returns
        -------
        str
            Document text

        """
        data = cls._load_bytes_content(input_data)
        if len(data) > max_size:
            data = truncate_utf8(data, max_size)
            logger.warning(f"Input too long, truncated to {len(data)} bytes (limit {max_size})")

        if isinstance(input_data, str):
            return data.decode("utf-8")
        try:
            return decode_bytes(data, encoding)
        except LookupError as e:
            raise ValidationError(
                f"Unknown encoding: {encoding}", parameter_name="encoding", parameter_value=encoding, original_error=e
            ) from e
