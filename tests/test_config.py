"""
Tests for configuration loading, merging and validation.
"""

import json

import pytest
import yaml

from indentguard.config import (
    ConfigurationError,
    ConfigurationManager,
    IndentGuardConfig,
    load_config,
)


class TestDefaults:
    """Tests for default configuration values."""

    def test_default_values(self):
        """Test that defaults infer the unit and use four-column tabs."""
        config = IndentGuardConfig.default()

        assert config.analysis_settings.enabled is True
        assert config.analysis_settings.indent_unit is None
        assert config.analysis_settings.tab_width == 4
        assert config.discovery_settings.max_workers == 1
        assert "**/*.java" in config.discovery_settings.include_patterns
        assert "node_modules" in config.discovery_settings.exclude_dirs
        assert config.report_settings.output_format == "text"

    def test_default_validates(self):
        """Test that the default configuration passes validation."""
        IndentGuardConfig.default().validate()

    def test_summary(self):
        """Test the human-readable summary."""
        summary = IndentGuardConfig.default().get_config_summary()
        assert "Indent unit: inferred" in summary
        assert "Tab width: 4" in summary


class TestFileLoading:
    """Tests for loading configuration files."""

    def test_load_json(self, isolated_env):
        """Test loading a JSON configuration file."""
        path = isolated_env / "custom.json"
        path.write_text(json.dumps({"analysis": {"indent_unit": 2, "tab_width": 8}}))

        config = IndentGuardConfig.load(str(path), use_env=False)
        assert config.analysis_settings.indent_unit == 2
        assert config.analysis_settings.tab_width == 8
        assert config.discovery_settings.max_file_size == 1024 * 1024

    def test_load_yaml(self, isolated_env):
        """Test loading a YAML configuration file."""
        path = isolated_env / "custom.yaml"
        path.write_text(yaml.dump({"report": {"output_format": "json", "show_lines": True}}))

        config = IndentGuardConfig.from_file(str(path))
        assert config.report_settings.output_format == "json"
        assert config.report_settings.show_lines is True

    def test_default_file_discovered(self, isolated_env):
        """Test that indentguard.json in the working directory is picked up."""
        (isolated_env / "indentguard.json").write_text(
            json.dumps({"discovery": {"max_workers": 3}})
        )
        assert IndentGuardConfig.load().discovery_settings.max_workers == 3

    def test_missing_file(self, isolated_env):
        """Test that an explicit missing file is an error."""
        with pytest.raises(ConfigurationError, match="not found"):
            IndentGuardConfig.load("nope.json")

    def test_invalid_json(self, isolated_env):
        """Test that malformed JSON is an error."""
        path = isolated_env / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid configuration file format"):
            IndentGuardConfig.load(str(path))

    def test_non_mapping(self, isolated_env):
        """Test that a top-level list is rejected."""
        path = isolated_env / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            IndentGuardConfig.load(str(path))

    def test_unknown_key_ignored(self, isolated_env):
        """Test that unknown keys do not fail loading."""
        path = isolated_env / "extra.json"
        path.write_text(json.dumps({"analysis": {"colour": "blue"}}))
        config = IndentGuardConfig.load(str(path), use_env=False)
        assert not hasattr(config.analysis_settings, "colour")

    @pytest.mark.parametrize("fmt", ["json", "yaml"])
    def test_round_trip_through_file(self, isolated_env, fmt):
        """Test that a saved configuration loads back unchanged."""
        config = IndentGuardConfig.default()
        config.analysis_settings.indent_unit = 3
        path = isolated_env / f"saved.{fmt}"

        config.to_file(str(path), fmt)
        assert IndentGuardConfig.load(str(path), use_env=False).to_dict() == config.to_dict()


class TestEnvironment:
    """Tests for environment variable overrides."""

    def test_env_overrides_file(self, isolated_env, monkeypatch):
        """Test that environment variables take precedence over the file."""
        (isolated_env / "indentguard.json").write_text(
            json.dumps({"analysis": {"indent_unit": 2}})
        )
        monkeypatch.setenv("INDENTGUARD_INDENT_UNIT", "4")
        monkeypatch.setenv("INDENTGUARD_ENABLED", "false")
        monkeypatch.setenv("INDENTGUARD_INCLUDE_PATTERNS", "**/*.java,**/*.js")

        config = load_config()
        assert config.analysis_settings.indent_unit == 4
        assert config.analysis_settings.enabled is False
        assert config.discovery_settings.include_patterns == ["**/*.java", "**/*.js"]

    def test_invalid_env_value_ignored(self, isolated_env, monkeypatch):
        """Test that non-numeric values fall back to defaults."""
        monkeypatch.setenv("INDENTGUARD_TAB_WIDTH", "wide")
        monkeypatch.setenv("INDENTGUARD_OUTPUT_FORMAT", "pdf")

        config = IndentGuardConfig.from_env()
        assert config.analysis_settings.tab_width == 4
        assert config.report_settings.output_format == "text"

    def test_env_disabled(self, isolated_env, monkeypatch):
        """Test that use_env=False ignores the environment."""
        monkeypatch.setenv("INDENTGUARD_MAX_WORKERS", "8")
        assert IndentGuardConfig.load(use_env=False).discovery_settings.max_workers == 1


class TestValidation:
    """Tests for ConfigurationManager.validate_config."""

    @pytest.mark.parametrize(
        "data",
        [
            {"analysis": {"indent_unit": 0}},
            {"analysis": {"indent_unit": True}},
            {"analysis": {"tab_width": -1}},
            {"analysis": {"enabled": "yes"}},
            {"discovery": {"max_file_size": 0}},
            {"discovery": {"max_workers": "4"}},
            {"discovery": {"include_patterns": "**/*.java"}},
            {"report": {"output_format": "pdf"}},
            {"analysis": 4},
            {"discovery": ["**/*.java"]},
            {"report": "json"},
            {"discovery": {"encoding": "utf-9"}},
            {"discovery": {"encoding": 8}},
            {"report": {"use_rich": "no"}},
            {"report": {"show_lines": 1}},
        ],
    )
    def test_invalid_values(self, data):
        """Test that invalid values are rejected."""
        with pytest.raises(ConfigurationError):
            ConfigurationManager.validate_config(data)

    def test_null_unit_allowed(self):
        """Test that an explicit null unit means inference."""
        ConfigurationManager.validate_config({"analysis": {"indent_unit": None}})

    def test_merge_is_deep(self):
        """Test that nested sections merge key by key."""
        merged = ConfigurationManager.merge_configs(
            {"analysis": {"indent_unit": 2, "tab_width": 8}},
            {"analysis": {"indent_unit": 4}},
        )
        assert merged == {"analysis": {"indent_unit": 4, "tab_width": 8}}

    def test_known_encoding_allowed(self):
        """Test that any codec Python knows is accepted."""
        ConfigurationManager.validate_config({"discovery": {"encoding": "latin-1"}})

    def test_non_mapping_section_in_file(self, isolated_env):
        """Test that a scalar section in a YAML file is a configuration error."""
        path = isolated_env / "scalar.yaml"
        path.write_text("analysis: 4\n")
        with pytest.raises(ConfigurationError, match="'analysis' section must be a mapping"):
            IndentGuardConfig.load(str(path), use_env=False)

    def test_unknown_encoding_in_file(self, isolated_env):
        """Test that an unknown codec name fails when the file is loaded."""
        path = isolated_env / "codec.json"
        path.write_text(json.dumps({"discovery": {"encoding": "utf-9"}}))
        with pytest.raises(ConfigurationError, match="Unknown encoding: utf-9"):
            IndentGuardConfig.load(str(path), use_env=False)
