#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for parser and renderer options.

This module defines the foundation classes for the options objects used by
the wiki2md parse and render stages.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes and mapping construction for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        The copy goes through ``__post_init__`` again, so range checks apply
        to the new values.

        Raises
        ------
        TypeError
            If a keyword is not a field of this class
        ValueError
            If a new value fails validation

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Names of the fields accepted by this options class."""
        return frozenset(f.name for f in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Self:
        """Build an instance from a plain mapping, such as a config file section.

        Dashes in keys are accepted in place of underscores.

        Raises
        ------
        ValueError
            If the mapping contains a key that is not a field of this class

        """
        normalized = {str(key).replace("-", "_"): value for key, value in values.items()}
        unknown = sorted(set(normalized) - cls.field_names())
        if unknown:
            raise ValueError(f"Unknown {cls.__name__} option(s): {', '.join(unknown)}")
        return cls(**normalized)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options shared by every renderer; subclasses add their own fields."""

    def __post_init__(self) -> None:
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Options shared by every parser; subclasses add their own fields."""

    def __post_init__(self) -> None:
        pass
