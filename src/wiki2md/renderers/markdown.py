#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/renderers/markdown.py
"""Markdown rendering from the wikitext document tree.

This module provides the MarkdownRenderer class, which walks the tree with
one visitor method per node kind and writes Markdown into a hard-capped
:class:`~wiki2md.renderers._output.OutputBuffer`. Constructs that Markdown has no
syntax for (definition lists, templates, preformatted blocks) are written as
inline HTML.

"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from wiki2md.ast import CELL_KINDS, LINK_KINDS, Node, NodeKind, NodeVisitor
from wiki2md.constants import BULLET_INDENT, BULLET_ITEM_MARKER, NUMBERED_INDENT, NUMBERED_ITEM_MARKER
from wiki2md.options.markdown import MarkdownRendererOptions
from wiki2md.renderers._links import (
    ResolvedLink,
    escape_destination,
    is_image_target,
    split_external_link,
    split_wiki_link,
)
from wiki2md.renderers._output import OutputBuffer
from wiki2md.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    r"""Render a wikitext document tree to Markdown.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from wiki2md.parsers.wikitext import WikitextParser
        >>> root = WikitextParser().parse("== Title ==\\n\\n'''Bold''' text")
        >>> MarkdownRenderer().render_to_string(root)
        '# Title\\n\\n**Bold** text\\n\\n'

    Rendering into a buffer of fixed capacity:

        >>> out = MarkdownRenderer().render_to_buffer(root, capacity=64)
        >>> out.size
        24

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output = OutputBuffer(options.max_output_size, stage="markdown")

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_node(self, node: Node, out: OutputBuffer) -> None:
        """Render ``node`` and its subtree into ``out``.

        Raises
        ------
        OutputCapacityError
            If ``out`` cannot hold the rendered content. Writes made before
            the failing one stay in ``out``; nothing past its capacity is.
        StructuralError
            If a node kind has no visitor method

        """
        saved_output = self._output
        self._output = out
        try:
            node.accept(self)
        finally:
            self._output = saved_output

    def render_to_buffer(self, doc: Node, capacity: Optional[int] = None) -> OutputBuffer:
        """Render the tree into a new buffer of ``capacity`` bytes.

        ``capacity`` defaults to ``options.max_output_size``.
        """
        out = OutputBuffer(self.options.max_output_size if capacity is None else capacity, stage="markdown")
        logger.debug(f"Rendering {doc.kind.value} node to Markdown (capacity {out.capacity} bytes)")
        self.render_node(doc, out)
        return out

    def render_to_string(self, doc: Node) -> str:
        """Render a document tree to a Markdown string.

        Parameters
        ----------
        doc : Node
            The document root (or any subtree) to render

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        OutputCapacityError
            If the output would exceed ``options.max_output_size``

        """
        return self._cleanup_output(self.render_to_buffer(doc).getvalue())

    def _cleanup_output(self, text: str) -> str:
        if self.options.collapse_blank_lines:
            text = re.sub(r"\n{3,}", "\n\n", text)
        return text

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _write(self, text: str) -> None:
        self._output.write(text)

    def _render_children(self, node: Node) -> None:
        for child in node.children:
            child.accept(self)

    def _capture(self, nodes: Iterable[Node], capacity: Optional[int] = None, stage: str = "markdown") -> str:
        """Render ``nodes`` into a scratch buffer and return the text.

        The scratch buffer is capped by what still fits in the live output,
        or by ``capacity`` when that is smaller.
        """
        saved_output = self._output
        limit = saved_output.remaining if capacity is None else min(capacity, saved_output.remaining)
        scratch = OutputBuffer(limit, stage=stage)
        self._output = scratch
        try:
            for node in nodes:
                node.accept(self)
        finally:
            self._output = saved_output
        return scratch.getvalue()

    def _link_definition(self, node: Node) -> Optional[str]:
        """Flatten a link node's children; None (with a warning) when empty."""
        definition = self._capture(node.children, capacity=self.options.max_link_size, stage="link")
        if not definition.strip():
            logger.warning(f"Empty {node.kind.value.replace('_', ' ')} detected, skipping")
            return None
        return definition

    def _destination(self, target: str) -> str:
        return escape_destination(target) if self.options.escape_link_parentheses else target

    def _write_media(self, node: Node, link: ResolvedLink) -> None:
        destination = self._destination(link.target)
        if not is_image_target(link.target):
            self._write(f"[{link.label}]({destination})")
        elif node.contains_kind(LINK_KINDS):
            # Markdown cannot nest a link inside image alt text
            self._write(f"![{link.target}]({destination})\n\n**{link.label}**")
        else:
            self._write(f"![{link.label}]({destination})")

    @staticmethod
    def _is_last_cell(node: Node) -> bool:
        sibling = node.next_sibling
        while sibling is not None:
            if sibling.kind in CELL_KINDS:
                return False
            sibling = sibling.next_sibling
        return True

    def _list_item(self, node: Node, indent: str, marker: str) -> None:
        content = self._capture(node.children).strip()
        depth = max(node.subtype, 1)
        self._write(f"{indent * (depth - 1)}{marker} {content}\n")

    def _cell(self, node: Node) -> None:
        content = self._capture(node.children).strip().replace("\n", " ")
        self._write(content)
        if not self._is_last_cell(node):
            self._write(" | ")

    # ------------------------------------------------------------------
    # Block-level kinds
    # ------------------------------------------------------------------

    def visit_root(self, node: Node) -> None:
        self._render_children(node)

    def visit_paragraph(self, node: Node) -> None:
        content = self._capture(node.children).rstrip("\n")
        if not content.strip():
            return
        self._write(f"{content}\n\n")

    def visit_heading(self, node: Node) -> None:
        content = self._capture(node.children).strip()
        self._write(f"{'#' * node.subtype} {content}\n\n")

    def visit_horizontal_rule(self, node: Node) -> None:
        self._write("---\n\n")

    def visit_block_template(self, node: Node) -> None:
        self._write("<pre>{{")
        self._render_children(node)
        self._write("}}</pre>\n\n")

    def visit_bullet_list(self, node: Node) -> None:
        self._render_children(node)
        self._write("\n")

    def visit_bullet_list_item(self, node: Node) -> None:
        self._list_item(node, BULLET_INDENT, BULLET_ITEM_MARKER)

    def visit_numbered_list(self, node: Node) -> None:
        self._render_children(node)
        self._write("\n")

    def visit_numbered_list_item(self, node: Node) -> None:
        self._list_item(node, NUMBERED_INDENT, NUMBERED_ITEM_MARKER)

    def visit_definition_list(self, node: Node) -> None:
        self._write("<dl>\n")
        self._render_children(node)
        self._write("</dl>\n\n")

    def visit_definition_term(self, node: Node) -> None:
        self._write(f"<dt>{self._capture(node.children).strip()}</dt>\n")

    def visit_definition(self, node: Node) -> None:
        self._write(f"<dd>{self._capture(node.children).strip()}</dd>\n")

    def visit_preformatted(self, node: Node) -> None:
        # Continuation lines keep their leading space in the source
        content = self._capture(node.children).replace("\n ", "\n").rstrip("\n")
        self._write(f"<pre>\n{content}\n</pre>\n\n")

    def visit_gallery(self, node: Node) -> None:
        self._render_children(node)
        self._write("\n")

    def visit_gallery_item(self, node: Node) -> None:
        definition = self._link_definition(node)
        if definition is None:
            return
        self._write_media(node, split_wiki_link(definition))
        self._write("\n")

    def visit_table(self, node: Node) -> None:
        for child in node.children:
            # Attribute text of the table itself is not rendered
            if child.kind is not NodeKind.TEXT:
                child.accept(self)
        self._write("\n")

    def visit_table_caption(self, node: Node) -> None:
        caption = self._capture(node.children).strip()
        if caption:
            self._write(f"**{caption}**\n\n")

    def visit_table_row(self, node: Node) -> None:
        cells = [child for child in node.children if child.kind in CELL_KINDS]
        if not cells:
            return
        # A lone column needs outer pipes, or "A\n---" reads as a setext heading
        single = len(cells) == 1
        is_header = False
        if single:
            self._write("| ")
        for cell in cells:
            is_header = is_header or cell.kind is NodeKind.TABLE_HEADER
            cell.accept(self)
        self._write(" |\n" if single else "\n")
        if is_header:
            self._write("|---|\n" if single else "|".join(["---"] * len(cells)) + "\n")

    # ------------------------------------------------------------------
    # Inline kinds
    # ------------------------------------------------------------------

    def visit_text(self, node: Node) -> None:
        self._write(node.text or "")

    def visit_emphasis(self, node: Node) -> None:
        self._write("_")
        self._render_children(node)
        self._write("_")

    def visit_strong(self, node: Node) -> None:
        self._write("**")
        self._render_children(node)
        self._write("**")

    def visit_strong_emphasis(self, node: Node) -> None:
        self._write("**_")
        self._render_children(node)
        self._write("_**")

    def visit_inline_template(self, node: Node) -> None:
        self._write("<code>{{")
        self._render_children(node)
        self._write("}}</code>")

    def visit_internal_link(self, node: Node) -> None:
        definition = self._link_definition(node)
        if definition is None:
            return
        link = split_wiki_link(definition)
        destination = self._destination(link.target) + self.options.internal_link_suffix
        self._write(f"[{link.label}]({destination})")

    def visit_external_link(self, node: Node) -> None:
        definition = self._link_definition(node)
        if definition is None:
            return
        link = split_external_link(definition)
        self._write(f"[{link.label}]({self._destination(link.target)})")

    def visit_media(self, node: Node) -> None:
        definition = self._link_definition(node)
        if definition is None:
            return
        self._write_media(node, split_wiki_link(definition))

    def visit_table_header(self, node: Node) -> None:
        self._cell(node)

    def visit_table_cell(self, node: Node) -> None:
        self._cell(node)
