"""wiki2md - convert MediaWiki wikitext to Markdown.

wiki2md parses wikitext in a single pass into a typed document tree and
renders that tree to Markdown with one visitor method per node kind.
Headings, emphasis, lists, definition lists, tables, galleries, links,
media and templates are recognized; everything else passes through as
text.

Requirements
------------
- Python 3.10+
- ``rich`` for the optional ``--rich`` terminal output

Examples
--------
Basic usage:

    >>> from wiki2md import to_markdown
    >>> to_markdown("== Title ==\\n\\nSome ''text''.")
    '# Title\\n\\nSome _text_.\\n\\n'

Working with the document tree directly:

    >>> from wiki2md import to_ast, from_ast
    >>> doc = to_ast("* one\\n* two")
    >>> [child.kind.value for child in doc.children]
    ['bullet_list']
    >>> from_ast(doc)
    '* one\\n* two\\n\\n'

See Also
--------
wiki2md.ast : Document tree node definitions and visitors

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "wiki2md requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from wiki2md.api import convert_file, from_ast, to_ast, to_markdown
from wiki2md.exceptions import (
    FileError,
    OutputCapacityError,
    ParsingError,
    RenderingError,
    ValidationError,
    Wiki2MdError,
)
from wiki2md.options import MarkdownRendererOptions, WikitextParserOptions

__all__ = [
    "__version__",
    "to_markdown",
    "to_ast",
    "from_ast",
    "convert_file",
    # Options
    "WikitextParserOptions",
    "MarkdownRendererOptions",
    # Exceptions
    "Wiki2MdError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "OutputCapacityError",
]
