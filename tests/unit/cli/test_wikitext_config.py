#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for configuration discovery and loading."""

import argparse
import json

import pytest

from wiki2md.cli.config import (
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    options_from_config,
)


@pytest.mark.unit
class TestFindConfigInParents:
    """Test upward configuration discovery."""

    def test_found_in_parent(self, tmp_path) -> None:
        """Test that a config in an ancestor directory is found."""
        config = tmp_path / ".wiki2md.toml"
        config.write_text("[parser]\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_nearest_wins(self, tmp_path) -> None:
        """Test that the closest directory takes precedence."""
        (tmp_path / ".wiki2md.toml").write_text("", encoding="utf-8")
        nested = tmp_path / "sub"
        nested.mkdir()
        inner = nested / ".wiki2md.json"
        inner.write_text("{}", encoding="utf-8")
        assert find_config_in_parents(nested) == inner.resolve()

    def test_dedicated_file_before_pyproject(self, tmp_path) -> None:
        """Test that a dedicated file beats pyproject.toml in the same directory."""
        (tmp_path / "pyproject.toml").write_text("[tool.wiki2md.parser]\nstrip_comments = false\n", encoding="utf-8")
        dedicated = tmp_path / ".wiki2md.yaml"
        dedicated.write_text("parser: {}\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == dedicated.resolve()

    def test_pyproject_with_section(self, tmp_path) -> None:
        """Test that pyproject.toml counts when it has a [tool.wiki2md] table."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.wiki2md.renderer]\ninternal_link_suffix = ''\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == pyproject.resolve()

    def test_pyproject_without_section_skipped(self, tmp_path) -> None:
        """Test that an unrelated pyproject.toml is not treated as config."""
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
        nested = tmp_path / "sub"
        nested.mkdir()
        found = find_config_in_parents(nested)
        assert found is None or not found.is_relative_to(tmp_path)

    def test_invalid_pyproject_skipped(self, tmp_path) -> None:
        """Test that a broken pyproject.toml does not stop discovery."""
        (tmp_path / "pyproject.toml").write_text("[tool.wiki2md\n", encoding="utf-8")
        found = find_config_in_parents(tmp_path)
        assert found is None or not found.is_relative_to(tmp_path)


@pytest.mark.unit
class TestLoadConfigFile:
    """Test loading each supported format."""

    def test_toml(self, tmp_path) -> None:
        """Test a TOML file."""
        path = tmp_path / "c.toml"
        path.write_text("[parser]\nmax_input_size = 10\n", encoding="utf-8")
        assert load_config_file(path) == {"parser": {"max_input_size": 10}}

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_yaml(self, tmp_path, suffix: str) -> None:
        """Test a YAML file."""
        path = tmp_path / f"c{suffix}"
        path.write_text("renderer:\n  collapse_blank_lines: true\n", encoding="utf-8")
        assert load_config_file(path) == {"renderer": {"collapse_blank_lines": True}}

    def test_empty_yaml(self, tmp_path) -> None:
        """Test that an empty YAML file is an empty config."""
        path = tmp_path / "c.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_json(self, tmp_path) -> None:
        """Test a JSON file."""
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"parser": {"parse_nowiki": False}}), encoding="utf-8")
        assert load_config_file(str(path)) == {"parser": {"parse_nowiki": False}}

    def test_pyproject_section(self, tmp_path) -> None:
        """Test that only the [tool.wiki2md] table is returned."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[project]\nname = 'x'\n\n[tool.wiki2md.parser]\nstrip_comments = false\n", encoding="utf-8")
        assert load_config_file(path) == {"parser": {"strip_comments": False}}

    @pytest.mark.parametrize(
        "name,content,message",
        [
            ("c.toml", "[parser\n", "Invalid TOML"),
            ("c.yaml", "parser: [unclosed\n", "Invalid YAML"),
            ("c.json", "{not json", "Invalid JSON"),
            ("c.ini", "[parser]\n", "Unsupported config file format"),
            ("c.yaml", "- a\n- b\n", "must contain a mapping"),
        ],
    )
    def test_invalid_files(self, tmp_path, name: str, content: str, message: str) -> None:
        """Test that unreadable configuration is reported as an argument error."""
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match=message):
            load_config_file(path)

    def test_missing_file(self, tmp_path) -> None:
        """Test that a missing file is reported."""
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")


@pytest.mark.unit
class TestLoadConfigWithPriority:
    """Test the explicit > environment > discovered order."""

    def test_explicit_beats_env(self, tmp_path) -> None:
        """Test that the explicit path wins."""
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"parser": {"max_input_size": 1}}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"parser": {"max_input_size": 2}}', encoding="utf-8")
        config = load_config_with_priority(explicit_path=str(explicit), env_var_path=str(env))
        assert config["parser"]["max_input_size"] == 1

    def test_env_beats_discovery(self, tmp_path, monkeypatch) -> None:
        """Test that the environment path wins over discovery."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".wiki2md.json").write_text('{"parser": {"max_input_size": 3}}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"parser": {"max_input_size": 2}}', encoding="utf-8")
        assert load_config_with_priority(env_var_path=str(env))["parser"]["max_input_size"] == 2

    def test_discovery(self, tmp_path, monkeypatch) -> None:
        """Test that a discovered file is used when nothing is given."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".wiki2md.json").write_text('{"parser": {"max_input_size": 3}}', encoding="utf-8")
        assert load_config_with_priority()["parser"]["max_input_size"] == 3


@pytest.mark.unit
class TestOptionsFromConfig:
    """Test turning configuration into options."""

    def test_empty_config_gives_defaults(self) -> None:
        """Test that no configuration means default options."""
        parser_options, renderer_options = options_from_config({})
        assert parser_options.strip_comments is True
        assert renderer_options.internal_link_suffix == ".md"

    def test_sections_applied(self) -> None:
        """Test values from both sections."""
        parser_options, renderer_options = options_from_config(
            {"parser": {"strip-comments": False}, "renderer": {"internal_link_suffix": ".html"}}
        )
        assert parser_options.strip_comments is False
        assert renderer_options.internal_link_suffix == ".html"

    def test_empty_section_allowed(self) -> None:
        """Test that a section with no values is accepted."""
        parser_options, _ = options_from_config({"parser": None})
        assert parser_options.max_input_size > 0

    @pytest.mark.parametrize(
        "config,message",
        [
            ({"output": {}}, "Unknown config section"),
            ({"parser": "fast"}, "must be a table"),
            ({"parser": {"strip_coments": False}}, "Invalid configuration"),
            ({"renderer": {"max_output_size": -1}}, "Invalid configuration"),
        ],
    )
    def test_invalid_config(self, config: dict, message: str) -> None:
        """Test that bad configuration is reported as an argument error."""
        with pytest.raises(argparse.ArgumentTypeError, match=message):
            options_from_config(config)
