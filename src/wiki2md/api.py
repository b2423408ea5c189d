"""The major exported API functions for wikitext conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/wiki2md/api.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, TypeVar, Union

from wiki2md.ast import Node
from wiki2md.exceptions import ValidationError
from wiki2md.options.base import BaseParserOptions, BaseRendererOptions
from wiki2md.options.markdown import MarkdownRendererOptions
from wiki2md.options.wikitext import WikitextParserOptions
from wiki2md.parsers.wikitext import WikitextParser
from wiki2md.renderers.markdown import MarkdownRenderer
from wiki2md.utils.timing import debug_timer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", BaseParserOptions, BaseRendererOptions)

Source = Union[str, Path, IO[bytes], bytes]


def _split_kwargs_for_parser_and_renderer(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Route individual option kwargs to the parser or the renderer.

    Raises
    ------
    ValidationError
        If a kwarg is not a field of either options class

    """
    parser_fields = WikitextParserOptions.field_names()
    renderer_fields = MarkdownRendererOptions.field_names()

    parser_kwargs: dict[str, Any] = {}
    renderer_kwargs: dict[str, Any] = {}
    for key, value in kwargs.items():
        if key in parser_fields:
            parser_kwargs[key] = value
        elif key in renderer_fields:
            renderer_kwargs[key] = value
        else:
            raise ValidationError(f"Unknown conversion option: {key}", parameter_name=key, parameter_value=value)
    return parser_kwargs, renderer_kwargs


def _resolve_options(options: Optional[OptionsT], options_class: type[OptionsT], overrides: dict[str, Any]) -> OptionsT:
    """Apply keyword overrides on top of an options object (or the defaults).

    Raises
    ------
    ValidationError
        If an override is out of range
    InvalidOptionsError
        If ``options`` is not an ``options_class`` instance

    """
    base = options if options is not None else options_class()
    if not overrides:
        return base
    try:
        return base.create_updated(**overrides)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {options_class.__name__}: {e}", original_error=e) from e


def to_ast(
    source: Source,
    *,
    parser_options: Optional[WikitextParserOptions] = None,
    **kwargs: Any,
) -> Node:
    """Parse wikitext into a document tree.

    Parameters
    ----------
    source : str, Path, IO[bytes], or bytes
        Wikitext content (str), a file path, a binary stream, or raw bytes
    parser_options : WikitextParserOptions, optional
        Pre-configured parser options
    kwargs : Any
        Individual parser options overriding fields of ``parser_options``

    Returns
    -------
    Node
        The document root

    Raises
    ------
    ValidationError
        If an option is unknown or invalid
    FileError
        If a source file cannot be read
    ParsingError
        If the document cannot be parsed

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    if renderer_kwargs:
        raise ValidationError(
            f"Rendering options are not accepted by to_ast(): {', '.join(sorted(renderer_kwargs))}",
            parameter_name="kwargs",
        )
    options = _resolve_options(parser_options, WikitextParserOptions, parser_kwargs)
    with debug_timer(logger, "Parsing (wikitext)"):
        return WikitextParser(options).parse(source)


def from_ast(
    doc: Node,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    *,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render a document tree to Markdown.

    Parameters
    ----------
    doc : Node
        The document root
    output : str, Path, IO[bytes], IO[str], or None
        Where to write the Markdown. When None the Markdown is returned.
    renderer_options : MarkdownRendererOptions, optional
        Pre-configured renderer options
    kwargs : Any
        Individual renderer options overriding fields of ``renderer_options``

    Returns
    -------
    str or None
        The Markdown when ``output`` is None

    Raises
    ------
    RenderingError
        If rendering fails, including OutputCapacityError when the output
        exceeds ``max_output_size``

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    if parser_kwargs:
        raise ValidationError(
            f"Parsing options are not accepted by from_ast(): {', '.join(sorted(parser_kwargs))}",
            parameter_name="kwargs",
        )
    options = _resolve_options(renderer_options, MarkdownRendererOptions, renderer_kwargs)
    renderer = MarkdownRenderer(options)
    with debug_timer(logger, "Rendering (markdown)"):
        content = renderer.render_to_string(doc)
    if output is None:
        return content
    renderer.write_text_output(content, output)
    return None


def to_markdown(
    source: Union[Source, Node],
    *,
    parser_options: Optional[WikitextParserOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert wikitext to Markdown.

    This is the main entry point for the wiki2md library.

    Parameters
    ----------
    source : str, Path, IO[bytes], bytes, or Node
        Wikitext content (str), a file path, a binary stream, raw bytes, or
        an already-parsed document tree
    parser_options : WikitextParserOptions, optional
        Pre-configured parser options
    renderer_options : MarkdownRendererOptions, optional
        Pre-configured renderer options
    kwargs : Any
        Individual options. Each is routed to the parser or the renderer by
        field name and overrides the matching pre-configured options.

    Returns
    -------
    str
        The document converted to Markdown

    Raises
    ------
    ValidationError
        If an option is unknown or invalid
    FileError
        If a source file cannot be read
    ParsingError
        If the document cannot be parsed
    RenderingError
        If rendering fails

    Examples
    --------
        >>> to_markdown("[[Page|Label]]")
        '[Label](Page.md)\\n\\n'
        >>> to_markdown("[[Page]]", internal_link_suffix=".html")
        '[Page](Page.html)\\n\\n'

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)

    if isinstance(source, Node):
        doc = source
    else:
        doc = to_ast(source, parser_options=parser_options, **parser_kwargs)

    content = from_ast(doc, renderer_options=renderer_options, **renderer_kwargs)
    assert content is not None
    return content


def convert_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path, None] = None,
    *,
    parser_options: Optional[WikitextParserOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert a wikitext file to Markdown, optionally writing the result.

    Parameters
    ----------
    input_path : str or Path
        Wikitext file to read
    output_path : str, Path, or None
        File to write the Markdown to

    Returns
    -------
    str
        The Markdown

    Raises
    ------
    FileNotFoundError
        If ``input_path`` does not exist
    OutputWriteError
        If ``output_path`` cannot be written

    """
    markdown = to_markdown(
        Path(input_path), parser_options=parser_options, renderer_options=renderer_options, **kwargs
    )
    if output_path is not None:
        MarkdownRenderer.write_text_output(markdown, output_path)
        logger.info(f"Wrote {len(markdown.encode('utf-8'))} bytes to {output_path}")
    return markdown
