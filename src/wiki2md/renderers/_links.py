#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/renderers/_links.py
"""Link and media resolution.

Link nodes are resolved at render time from the flattened text of their
children (the "link definition"). Splitting happens on that flat text so
inline markup inside a label has already been rendered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from wiki2md.constants import IMAGE_EXTENSIONS

_SPACE_RUN = re.compile(r" +")


@dataclass(frozen=True)
class ResolvedLink:
    """Target and label of a link definition.

    Parameters
    ----------
    target : str
        Link destination before any escaping or suffixing
    label : str
        Visible text; equal to ``target`` when the definition has none

    """

    target: str
    label: str


def split_wiki_link(definition: str) -> ResolvedLink:
    """Split an internal link or media definition.

    The target runs up to the first ``|``; the label is whatever follows the
    last ``|``, so media attributes between the two are dropped.

    Examples
    --------
        >>> split_wiki_link("File:cat.png|thumb|A cat")
        ResolvedLink(target='File:cat.png', label='A cat')
        >>> split_wiki_link("Page")
        ResolvedLink(target='Page', label='Page')

    """
    target, pipe, _ = definition.partition("|")
    target = target.strip()
    label = definition.rpartition("|")[2].strip() if pipe else ""
    return ResolvedLink(target=target, label=label or target)


def split_external_link(definition: str) -> ResolvedLink:
    """Split an external link definition on its first run of spaces.

    Examples
    --------
        >>> split_external_link("http://example.com   Example site")
        ResolvedLink(target='http://example.com', label='Example site')

    """
    parts = _SPACE_RUN.split(definition.strip(), maxsplit=1)
    target = parts[0]
    label = parts[1].strip() if len(parts) > 1 else ""
    return ResolvedLink(target=target, label=label or target)


def is_image_target(target: str) -> bool:
    """Whether ``target`` names an image file (suffix match, case-insensitive)."""
    return target.lower().endswith(IMAGE_EXTENSIONS)


def escape_destination(target: str) -> str:
    """Percent-encode parentheses, which would end a Markdown link destination early."""
    return target.replace("(", "%28").replace(")", "%29")
