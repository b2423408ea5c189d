#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document tree for parsed wikitext.

The tree is built by :class:`wiki2md.parsers.wikitext.WikitextParser` and
walked by the renderers through :class:`NodeVisitor`.
"""

from wiki2md.ast.nodes import (
    BLOCK_KINDS,
    CELL_KINDS,
    CONTAINER_KINDS,
    EMPHASIS_KINDS,
    LINK_KINDS,
    Node,
    NodeKind,
    make_root,
    make_text,
)
from wiki2md.ast.visitors import NodeCollector, NodeVisitor, collect_nodes

__all__ = [
    "BLOCK_KINDS",
    "CELL_KINDS",
    "CONTAINER_KINDS",
    "EMPHASIS_KINDS",
    "LINK_KINDS",
    "Node",
    "NodeCollector",
    "NodeKind",
    "NodeVisitor",
    "collect_nodes",
    "make_root",
    "make_text",
]
