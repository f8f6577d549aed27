"""
Configuration system for IndentGuard

Provides configuration management with support for files and environment variables.
Includes validation, default value handling, and configuration merging.
"""

import codecs
import os
import json
import yaml
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any
import logging

from .analysis.utils.file_discovery import (
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_EXCLUDE_GLOBS,
    DEFAULT_INCLUDE_PATTERNS,
)

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["text", "json", "html"]


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigurationManager:
    """Manages configuration loading, validation, and merging."""

    DEFAULT_CONFIG_PATHS = [
        "indentguard.json",
        "indentguard.yaml",
        "indentguard.yml",
        ".indentguard.json",
        ".indentguard.yaml",
        ".indentguard.yml",
        os.path.expanduser("~/.indentguard.json"),
        os.path.expanduser("~/.indentguard.yaml"),
    ]

    @staticmethod
    def find_config_file(search_paths: Optional[List[str]] = None) -> Optional[str]:
        """Find the first existing configuration file."""
        paths = search_paths or ConfigurationManager.DEFAULT_CONFIG_PATHS

        for path in paths:
            if os.path.exists(path):
                return path
        return None

    @staticmethod
    def load_config_file(config_path: str) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if config_path.endswith((".yaml", ".yml")):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file format: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping, got {type(data).__name__}"
            )
        return data

    @staticmethod
    def load_env_config() -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config = {}

        # Analysis settings
        analysis = {}
        if os.getenv("INDENTGUARD_INDENT_UNIT"):
            try:
                analysis["indent_unit"] = int(os.getenv("INDENTGUARD_INDENT_UNIT"))
            except ValueError:
                logger.warning("Invalid INDENTGUARD_INDENT_UNIT value, using default")

        if os.getenv("INDENTGUARD_TAB_WIDTH"):
            try:
                analysis["tab_width"] = int(os.getenv("INDENTGUARD_TAB_WIDTH"))
            except ValueError:
                logger.warning("Invalid INDENTGUARD_TAB_WIDTH value, using default")

        if os.getenv("INDENTGUARD_ENABLED"):
            analysis["enabled"] = _env_bool(os.getenv("INDENTGUARD_ENABLED"))

        if analysis:
            config["analysis"] = analysis

        # Discovery settings
        discovery = {}
        if os.getenv("INDENTGUARD_INCLUDE_PATTERNS"):
            discovery["include_patterns"] = os.getenv("INDENTGUARD_INCLUDE_PATTERNS").split(",")

        if os.getenv("INDENTGUARD_EXCLUDE_DIRS"):
            discovery["exclude_dirs"] = os.getenv("INDENTGUARD_EXCLUDE_DIRS").split(",")

        if os.getenv("INDENTGUARD_MAX_FILE_SIZE"):
            try:
                discovery["max_file_size"] = int(os.getenv("INDENTGUARD_MAX_FILE_SIZE"))
            except ValueError:
                logger.warning("Invalid INDENTGUARD_MAX_FILE_SIZE value, using default")

        if os.getenv("INDENTGUARD_MAX_WORKERS"):
            try:
                discovery["max_workers"] = int(os.getenv("INDENTGUARD_MAX_WORKERS"))
            except ValueError:
                logger.warning("Invalid INDENTGUARD_MAX_WORKERS value, using default")

        if discovery:
            config["discovery"] = discovery

        # Report settings
        report = {}
        if os.getenv("INDENTGUARD_OUTPUT_FORMAT"):
            output_format = os.getenv("INDENTGUARD_OUTPUT_FORMAT").lower()
            if output_format in OUTPUT_FORMATS:
                report["output_format"] = output_format
            else:
                logger.warning("Invalid INDENTGUARD_OUTPUT_FORMAT value, using default")

        if report:
            config["report"] = report

        return config

    @staticmethod
    def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge multiple configuration dictionaries, with later ones taking precedence."""
        result = {}

        for config in configs:
            if not config:
                continue

            for key, value in config.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = ConfigurationManager.merge_configs(result[key], value)
                else:
                    result[key] = value

        return result

    @staticmethod
    def validate_config(config_data: Dict[str, Any]) -> None:
        """Validate configuration data."""
        for section in ("analysis", "discovery", "report"):
            if section in config_data and not isinstance(config_data[section], dict):
                raise ConfigurationError(f"'{section}' section must be a mapping")

        # Validate analysis settings
        if "analysis" in config_data:
            analysis = config_data["analysis"]

            indent_unit = analysis.get("indent_unit")
            if indent_unit is not None and not _positive_int(indent_unit):
                raise ConfigurationError("indent_unit must be a positive integer or null")

            if "tab_width" in analysis:
                tab_width = analysis["tab_width"]
                if not _positive_int(tab_width):
                    raise ConfigurationError("tab_width must be a positive integer")

            if "enabled" in analysis and not isinstance(analysis["enabled"], bool):
                raise ConfigurationError("enabled must be a boolean")

        # Validate discovery settings
        if "discovery" in config_data:
            discovery = config_data["discovery"]

            if "max_file_size" in discovery and not _positive_int(discovery["max_file_size"]):
                raise ConfigurationError("max_file_size must be positive")

            if "max_workers" in discovery and not _positive_int(discovery["max_workers"]):
                raise ConfigurationError("max_workers must be positive")

            for key in ("include_patterns", "exclude_dirs", "exclude_globs"):
                if key in discovery and not isinstance(discovery[key], list):
                    raise ConfigurationError(f"{key} must be a list of strings")

            if "encoding" in discovery:
                encoding = discovery["encoding"]
                if not isinstance(encoding, str):
                    raise ConfigurationError("encoding must be a string")
                try:
                    codecs.lookup(encoding)
                except LookupError:
                    raise ConfigurationError(f"Unknown encoding: {encoding}")

        # Validate report settings
        if "report" in config_data:
            report = config_data["report"]

            if "output_format" in report and report["output_format"] not in OUTPUT_FORMATS:
                raise ConfigurationError(f"output_format must be one of: {OUTPUT_FORMATS}")

            for key in ("use_rich", "show_lines"):
                if key in report and not isinstance(report[key], bool):
                    raise ConfigurationError(f"{key} must be a boolean")


@dataclass
class AnalysisConfig:
    """Configuration for the indentation analyzer."""

    enabled: bool = True
    indent_unit: Optional[int] = None  # None infers the unit from the first block
    tab_width: int = 4


@dataclass
class DiscoveryConfig:
    """Configuration for source file discovery."""

    include_patterns: List[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE_PATTERNS))
    exclude_dirs: List[str] = field(default_factory=lambda: sorted(DEFAULT_EXCLUDE_DIRS))
    exclude_globs: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_GLOBS))
    max_file_size: int = 1024 * 1024  # 1MB
    encoding: str = "utf-8"
    max_workers: int = 1


@dataclass
class ReportConfig:
    """Configuration for report output."""

    output_format: str = "text"
    use_rich: bool = True
    show_lines: bool = False


@dataclass
class IndentGuardConfig:
    """Main configuration class for IndentGuard."""

    analysis_settings: AnalysisConfig = field(default_factory=AnalysisConfig)
    discovery_settings: DiscoveryConfig = field(default_factory=DiscoveryConfig)
    report_settings: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def default(cls) -> "IndentGuardConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def load(
        cls,
        config_path: Optional[str] = None,
        use_env: bool = True,
        validate: bool = True,
    ) -> "IndentGuardConfig":
        """
        Load configuration from multiple sources with precedence:
        1. Default values
        2. Configuration file
        3. Environment variables (if use_env=True)

        Args:
            config_path: Path to configuration file. If None, searches for default files.
            use_env: Whether to load environment variables
            validate: Whether to validate the configuration
        """
        configs_to_merge = []

        # Load from file
        file_config = {}
        if config_path:
            file_config = ConfigurationManager.load_config_file(config_path)
        else:
            found_config = ConfigurationManager.find_config_file()
            if found_config:
                file_config = ConfigurationManager.load_config_file(found_config)
                logger.info(f"Loaded configuration from: {found_config}")

        configs_to_merge.append(file_config)

        if use_env:
            configs_to_merge.append(ConfigurationManager.load_env_config())

        merged_config = ConfigurationManager.merge_configs(*configs_to_merge)

        if validate:
            ConfigurationManager.validate_config(merged_config)

        return cls(
            analysis_settings=cls._apply(AnalysisConfig(), merged_config.get("analysis")),
            discovery_settings=cls._apply(DiscoveryConfig(), merged_config.get("discovery")),
            report_settings=cls._apply(ReportConfig(), merged_config.get("report")),
        )

    @staticmethod
    def _apply(section: Any, data: Optional[Dict[str, Any]]) -> Any:
        for key, value in (data or {}).items():
            if hasattr(section, key):
                setattr(section, key, value)
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")
        return section

    @classmethod
    def from_file(cls, config_path: str) -> "IndentGuardConfig":
        """Load configuration from a JSON or YAML file."""
        return cls.load(config_path=config_path, use_env=False)

    @classmethod
    def from_env(cls) -> "IndentGuardConfig":
        """Load configuration from environment variables."""
        return cls.load(config_path=None, use_env=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "analysis": asdict(self.analysis_settings),
            "discovery": asdict(self.discovery_settings),
            "report": asdict(self.report_settings),
        }

    def to_file(self, config_path: str, format: str = "json") -> None:
        """
        Save configuration to file.

        Args:
            config_path: Path to save configuration
            format: File format ('json' or 'yaml')
        """
        config_data = self.to_dict()

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                if format.lower() in ("yaml", "yml"):
                    yaml.dump(config_data, f, default_flow_style=False, indent=2)
                else:
                    json.dump(config_data, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration file: {e}")

    def validate(self) -> None:
        """Validate the current configuration."""
        ConfigurationManager.validate_config(self.to_dict())

    def get_config_summary(self) -> str:
        """Get a human-readable summary of the configuration."""
        unit = self.analysis_settings.indent_unit
        return f"""IndentGuard Configuration Summary:
Analysis:
  - Enabled: {self.analysis_settings.enabled}
  - Indent unit: {unit if unit is not None else "inferred"}
  - Tab width: {self.analysis_settings.tab_width}

Discovery:
  - Include patterns: {len(self.discovery_settings.include_patterns)} patterns
  - Excluded directories: {len(self.discovery_settings.exclude_dirs)} names
  - Max file size: {self.discovery_settings.max_file_size} bytes
  - Encoding: {self.discovery_settings.encoding}
  - Max workers: {self.discovery_settings.max_workers}

Report:
  - Output format: {self.report_settings.output_format}
  - Rich output: {self.report_settings.use_rich}
  - Show violating lines: {self.report_settings.show_lines}
"""


def load_config(config_path: Optional[str] = None, use_env: bool = True) -> IndentGuardConfig:
    """
    Load configuration from file and/or environment variables.

    Args:
        config_path: Path to configuration file
        use_env: Whether to load environment variables

    Returns:
        IndentGuardConfig: Loaded configuration
    """
    return IndentGuardConfig.load(config_path=config_path, use_env=use_env)
