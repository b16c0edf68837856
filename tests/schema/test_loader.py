"""
Tests for loading configuration documents.
"""

import textwrap

import pytest

from plztree.exceptions import ConfigLoadError
from plztree.schema import (
    AliasAction,
    ExecutionVariable,
    LiteralVariable,
    Platform,
    ShorthandLiteralVariable,
    find_config_file,
    load_config,
    parse_config,
)

EXAMPLE_CONFIG = textwrap.dedent(
    """
    description: Example project
    options:
      autoArgs: true
    variables:
      greeting: Hello
      name:
        value: World
        argument:
          long: name
          short: n
          description: Who to greet
    commands:
      greet:
        description: Say hello
        action: echo "$greeting, $name!"
      dc:
        action:
          alias: docker compose
      tools:
        platforms: [linux, macos]
        commands:
          sha:
            variables:
              head:
                execution: git rev-parse HEAD
            action: echo $head
    """
)


class TestLoadConfig:
    """Test reading YAML documents."""

    def test_loads_example_document(self, tmp_path):
        """Test a document using every major feature."""
        path = tmp_path / "plz.yaml"
        path.write_text(EXAMPLE_CONFIG)

        config = load_config(path)

        assert config.description == "Example project"
        assert config.options.auto_args is True
        assert config.variables["greeting"] == ShorthandLiteralVariable(value="Hello")
        assert isinstance(config.variables["name"], LiteralVariable)
        assert config.variables["name"].argument.short == "n"
        assert config.commands["dc"].action == AliasAction(alias="docker compose")
        assert config.commands["tools"].platform == [Platform.LINUX, Platform.MACOS]
        assert config.commands["tools"].action is None
        sha = config.commands["tools"].commands["sha"]
        assert isinstance(sha.variables["head"], ExecutionVariable)

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a load error."""
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(tmp_path / "missing.yaml")

        assert "missing.yaml" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML is a load error."""
        path = tmp_path / "plz.yaml"
        path.write_text("commands: [unclosed")

        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(path)

        assert "invalid YAML" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None

    def test_schema_violation(self, tmp_path):
        """Test that schema errors are wrapped."""
        path = tmp_path / "plz.yaml"
        path.write_text("commands:\n  bad:\n    hidden: [1, 2]\n")

        with pytest.raises(ConfigLoadError):
            load_config(path)

    def test_empty_document(self, tmp_path):
        """Test that an empty file is an empty configuration."""
        path = tmp_path / "plz.yaml"
        path.write_text("")

        assert load_config(path).commands == {}


class TestParseConfig:
    """Test validating deserialized data."""

    def test_top_level_must_be_mapping(self):
        """Test non-mapping documents."""
        with pytest.raises(ConfigLoadError) as exc_info:
            parse_config(["not", "a", "mapping"])

        assert "list" in str(exc_info.value)


class TestFindConfigFile:
    """Test configuration file discovery."""

    def test_finds_file_in_parent_directory(self, tmp_path):
        """Test walking up from a nested directory."""
        (tmp_path / "plz.yml").write_text("commands: {}\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == (tmp_path / "plz.yml").resolve()

    def test_prefers_yaml_extension(self, tmp_path):
        """Test file name precedence within one directory."""
        (tmp_path / "plz.yaml").write_text("")
        (tmp_path / "plz.yml").write_text("")

        assert find_config_file(tmp_path).name == "plz.yaml"
