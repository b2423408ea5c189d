#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by wiki2md.

Every error the library raises on purpose derives from :class:`Wiki2MdError`.
The first fatal error aborts the conversion; recoverable conditions (an empty
link, truncated input) are logged instead.

Hierarchy
---------
- Wiki2MdError

  - ValidationError: a bad argument or option value
    - InvalidOptionsError: options of the wrong class

  - FileError: reading an input file failed
    - FileNotFoundError
    - FileAccessError

  - ParsingError
    - StructuralError: the tree reached an impossible state

  - RenderingError
    - OutputCapacityError: output would not fit its buffer
    - OutputWriteError: writing the output file failed

  - DependencyError: an optional package is not installed

"""

from typing import Any


class Wiki2MdError(Exception):
    """Root of the wiki2md exception hierarchy.

    Parameters
    ----------
    message : str
        Error text shown to the user
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Wiki2MdError):
    """An argument or option value was rejected.

    ``parameter_name`` and ``parameter_value`` identify the offending input
    when it is known.
    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A parser or renderer was given options meant for another component.

    Parameters
    ----------
    converter_name : str
        Component that rejected the options ("wikitext", "markdown")
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the options it was given
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = f"{converter_name} needs {expected_type.__name__}, got {received_type.__name__}"
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Wiki2MdError):
    """Reading an input file failed."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """The input path does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        message = message or f"No such input file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """The input path exists but could not be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        message = message or f"Could not read input file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Wiki2MdError):
    """Building the document tree failed.

    Parameters
    ----------
    message : str
        What went wrong
    parsing_stage : str, optional
        Scanner phase that failed, such as ``"block_close"``
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class StructuralError(ParsingError):
    """The document tree reached a state its construction rules forbid.

    Trees built by the parser never raise this. It signals a defect, for
    example a node without a block-level ancestor or a node kind that a
    dispatch table does not cover.
    """


class RenderingError(Wiki2MdError):
    """Producing output from the tree failed.

    ``rendering_stage`` names the buffer or step involved (``"markdown"``,
    ``"link"``, ``"file_write"``).
    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputCapacityError(RenderingError):
    """A write was refused because it would overflow an output buffer.

    The refused write leaves the buffer untouched, so it never holds more
    than ``capacity`` bytes.

    Parameters
    ----------
    capacity : int
        Buffer capacity in UTF-8 bytes
    required : int
        Size the buffer would have reached with the refused write
    rendering_stage : str, optional
        Buffer the write was aimed at

    """

    def __init__(self, capacity: int, required: int, rendering_stage: str | None = None):
        super().__init__(
            f"Output content too long: {required} bytes required, capacity is {capacity} bytes",
            rendering_stage=rendering_stage,
        )
        self.capacity = capacity
        self.required = required


class OutputWriteError(RenderingError):
    """The rendered Markdown could not be written to its destination file."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(
            message or f"Could not write output file: {file_path}",
            rendering_stage="file_write",
            original_error=original_error,
        )
        self.file_path = file_path


class DependencyError(Wiki2MdError):
    """A feature needs an optional package that is not installed.

    Parameters
    ----------
    feature_name : str
        Feature the user asked for, e.g. ``"Rich output"``
    missing_packages : list[tuple[str, str]]
        ``(distribution, version_spec)`` pairs to install
    message : str, optional
        Overrides the generated message, which includes a pip command
    original_import_error : ImportError, optional
        The failed import

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        if message is None:
            requirements = [f"{name}{spec}" for name, spec in missing_packages]
            message = (
                f"{feature_name} is unavailable because {', '.join(requirements)} is not installed. "
                f"Install with: pip install {' '.join(repr(r) for r in requirements)}"
            )
        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.original_import_error = original_import_error
