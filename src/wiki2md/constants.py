#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for wiki2md.

This module centralizes the hardcoded values and default configuration
constants used across the wiki2md library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Size Limits - Input, output and scratch buffer caps
3. Wikitext Grammar - Fixed markup tables used by the parser
4. Markdown Output - Defaults for the Markdown renderer
5. Configuration Files - Config discovery names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# Size Limits
# =============================================================================

# Documents larger than this are truncated with a warning, not rejected
DEFAULT_MAX_INPUT_SIZE = 500_000

# Hard cap on rendered output (bytes, UTF-8)
DEFAULT_MAX_OUTPUT_SIZE = 4 * 1024 * 1024

# Hard cap on the flattened text of a single link definition (bytes, UTF-8)
DEFAULT_MAX_LINK_SIZE = 5_000

# Literal runs longer than this are flushed into the tree in pieces
DEFAULT_TEXT_BUFFER_SIZE = 8_192

# =============================================================================
# Wikitext Grammar
# =============================================================================

MAX_HEADING_LEVEL = 6

# Sequences that close a whole list (bullet, numbered or definition)
LIST_ENDING_SEQUENCES: tuple[str, ...] = ("\n\n", "\n----", "\n==")

PARAGRAPH_ENDING_SEQUENCES: tuple[str, ...] = (
    "\n\n",
    "\n----",
    "\n==",
    "\n*",
    "\n#",
    "\n:",
    "\n;",
    "\n{|",
)

MEDIA_PREFIXES: tuple[str, ...] = ("[[File:", "[[Image:")

NOWIKI_OPEN = "<nowiki>"
NOWIKI_CLOSE = "</nowiki>"
COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
GALLERY_OPEN = "<gallery>"
GALLERY_CLOSE = "</gallery>"

# =============================================================================
# Markdown Output
# =============================================================================

IMAGE_EXTENSIONS: tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg", ".tiff")

DEFAULT_INTERNAL_LINK_SUFFIX = ".md"
DEFAULT_ESCAPE_LINK_PARENTHESES = True
DEFAULT_COLLAPSE_BLANK_LINES = False
DEFAULT_STRIP_COMMENTS = True
DEFAULT_PARSE_NOWIKI = True

BULLET_ITEM_MARKER = "*"
# A leading "#" would start a Markdown heading, so numbered items use "1."
NUMBERED_ITEM_MARKER = "1."
BULLET_INDENT = "  "
NUMBERED_INDENT = "   "

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_ENV_VAR = "WIKI2MD_CONFIG"
CONFIG_FILENAMES: tuple[str, ...] = (".wiki2md.toml", ".wiki2md.yaml", ".wiki2md.yml", ".wiki2md.json")
PYPROJECT_TOOL_SECTION = "wiki2md"
