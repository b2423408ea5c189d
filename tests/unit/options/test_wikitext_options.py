#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for parser and renderer options."""

from dataclasses import FrozenInstanceError, fields

import pytest

from wiki2md.constants import DEFAULT_MAX_INPUT_SIZE, DEFAULT_MAX_LINK_SIZE, DEFAULT_MAX_OUTPUT_SIZE
from wiki2md.options import MarkdownRendererOptions, WikitextParserOptions


@pytest.mark.unit
class TestWikitextParserOptions:
    """Test parser options."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = WikitextParserOptions()
        assert options.max_input_size == DEFAULT_MAX_INPUT_SIZE == 500_000
        assert options.strip_comments is True
        assert options.parse_nowiki is True
        assert options.encoding is None

    def test_frozen(self) -> None:
        """Test that options cannot be mutated in place."""
        options = WikitextParserOptions()
        with pytest.raises(FrozenInstanceError):
            options.strip_comments = False  # type: ignore[misc]

    def test_create_updated_returns_copy(self) -> None:
        """Test cloning with changes leaves the original untouched."""
        options = WikitextParserOptions()
        updated = options.create_updated(strip_comments=False)
        assert updated.strip_comments is False
        assert options.strip_comments is True

    @pytest.mark.parametrize("field_name", ["max_input_size", "text_buffer_size"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_sizes_must_be_positive(self, field_name: str, value: int) -> None:
        """Test range validation."""
        with pytest.raises(ValueError):
            WikitextParserOptions(**{field_name: value})

    def test_create_updated_validates(self) -> None:
        """Test that cloned options are validated too."""
        with pytest.raises(ValueError):
            WikitextParserOptions().create_updated(max_input_size=0)

    def test_every_field_has_help(self) -> None:
        """Test that each field documents itself for the CLI."""
        for option_field in fields(WikitextParserOptions):
            assert option_field.metadata.get("help")


@pytest.mark.unit
class TestMarkdownRendererOptions:
    """Test renderer options."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = MarkdownRendererOptions()
        assert options.max_output_size == DEFAULT_MAX_OUTPUT_SIZE == 4 * 1024 * 1024
        assert options.max_link_size == DEFAULT_MAX_LINK_SIZE == 5000
        assert options.internal_link_suffix == ".md"
        assert options.escape_link_parentheses is True
        assert options.collapse_blank_lines is False

    @pytest.mark.parametrize("field_name", ["max_output_size", "max_link_size"])
    def test_sizes_must_be_non_negative(self, field_name: str) -> None:
        """Test range validation."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions(**{field_name: -1})
        assert getattr(MarkdownRendererOptions(**{field_name: 0}), field_name) == 0


@pytest.mark.unit
class TestFromMapping:
    """Test building options from configuration mappings."""

    def test_dashes_accepted(self) -> None:
        """Test that dashed keys map to fields."""
        options = MarkdownRendererOptions.from_mapping({"internal-link-suffix": ".html", "max_link_size": 10})
        assert options.internal_link_suffix == ".html"
        assert options.max_link_size == 10

    def test_unknown_key_rejected(self) -> None:
        """Test that typos are reported."""
        with pytest.raises(ValueError, match="Unknown WikitextParserOptions option"):
            WikitextParserOptions.from_mapping({"strip_coments": False})

    def test_field_names(self) -> None:
        """Test that field_names lists every dataclass field."""
        assert "encoding" in WikitextParserOptions.field_names()
        assert "collapse_blank_lines" in MarkdownRendererOptions.field_names()
        assert WikitextParserOptions.field_names().isdisjoint(MarkdownRendererOptions.field_names())
