#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that fold the document tree into output text."""

from wiki2md.renderers._output import OutputBuffer
from wiki2md.renderers.base import BaseRenderer
from wiki2md.renderers.markdown import MarkdownRenderer

__all__ = ["BaseRenderer", "MarkdownRenderer", "OutputBuffer"]
