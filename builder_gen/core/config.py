"""
Configuration management for builder generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union, List
from dataclasses import dataclass, field, asdict


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


# How to treat existing methods whose signature matches a generated one
CONFLICT_POLICIES = ("replace", "keep", "fail")

# How field type names are turned into source text
TYPE_RENDERINGS = ("verbatim", "signature")


@dataclass
class GeneratorConfig:
    """Configuration for builder generation."""

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = False
    line_ending: str = "\n"

    # Existing members with the same signature as a generated method
    conflict_policy: str = "replace"  # replace, keep, fail

    # Type handling
    type_rendering: str = "verbatim"  # verbatim, signature

    # Warn about fields that are not final
    final_advisory: bool = True

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size


DEFAULT_CONFIG: Dict[str, Any] = {
    "indent_size": 4,
    "use_tabs": False,
    "line_ending": "\n",
    "conflict_policy": "replace",
    "type_rendering": "verbatim",
    "final_advisory": True,
}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = dict(DEFAULT_CONFIG)

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged and validated configuration

        Raises:
            ConfigError: If the file cannot be read or a value is invalid
        """
        # Start with defaults
        base_config = self._defaults.copy()

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        config = self._dict_to_config(base_config)

        errors = self.validate_config(config)
        if errors:
            raise ConfigError("; ".join(errors))

        return config

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        # Extract known fields
        known_fields = {f.name for f in GeneratorConfig.__dataclass_fields__.values()}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Add custom fields to the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if config.conflict_policy not in CONFLICT_POLICIES:
            errors.append(
                f"Invalid conflict_policy: {config.conflict_policy} "
                f"(expected one of {', '.join(CONFLICT_POLICIES)})"
            )

        if config.type_rendering not in TYPE_RENDERINGS:
            errors.append(
                f"Invalid type_rendering: {config.type_rendering} "
                f"(expected one of {', '.join(TYPE_RENDERINGS)})"
            )

        if not isinstance(config.indent_size, int) or config.indent_size < 0:
            errors.append(f"Invalid indent_size: {config.indent_size}")

        if config.line_ending not in ("\n", "\r\n"):
            errors.append(f"Invalid line_ending: {config.line_ending!r}")

        return errors


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)

