"""Configuration loader with priority-based resolution.

This module implements configuration loading with the following priority order:
1. CLI arguments (highest priority)
2. Environment variables (MCA_ prefix)
3. YAML configuration file
4. Default values (lowest priority)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import AppConfig

ENV_PREFIX = "MCA_"
DEFAULT_CONFIG_PATH = "config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading fails."""

    pass


class ConfigLoader:
    """Configuration loader with priority-based resolution.

    Handles loading configuration from multiple sources with proper precedence:
    CLI arguments > Environment variables > YAML file > Defaults
    """

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Defaults to 'config.yaml' in current directory.
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._yaml_data: dict[str, Any] = {}
        self._cli_overrides: dict[str, Any] = {}

    def load_config(
        self,
        cli_overrides: dict[str, Any] | None = None,
        validate: bool = True,
    ) -> AppConfig:
        """Load configuration with full precedence resolution.

        Args:
            cli_overrides: Dictionary of CLI argument overrides
            validate: When False, skip directory creation (useful for tests)

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigurationError: If configuration loading or validation fails
        """
        try:
            self._cli_overrides = cli_overrides or {}
            self._load_yaml_config()
            merged_config = self._merge_all_sources()
            config = AppConfig(**merged_config)

            if validate:
                config.ensure_directories()

            return config

        except ValidationError as e:
            self._raise_helpful_error(e)
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def _load_yaml_config(self) -> None:
        """Load YAML configuration file if it exists."""
        config_file = Path(self.config_path)

        if not config_file.exists():
            # YAML file is optional - use defaults + env vars
            self._yaml_data = {}
            return

        try:
            with open(config_file, encoding="utf-8") as f:
                self._yaml_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read {config_file}: {e}") from e

        if not isinstance(self._yaml_data, dict):
            raise ConfigurationError(f"Top level of {config_file} must be a mapping")

    def _merge_all_sources(self) -> dict[str, Any]:
        """Merge configuration from all sources with proper precedence."""
        merged = dict(self._yaml_data)
        self._deep_merge(merged, self._get_env_overrides())
        self._deep_merge(merged, self._cli_overrides)
        return merged

    def _get_env_overrides(self) -> dict[str, Any]:
        """Extract MCA_ environment variables as a nested dict.

        MCA_ANALYSIS__COGS_PERCENTAGE=70 becomes {"analysis": {"cogs_percentage": 70}}.
        """
        env_vars = {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}

        nested: dict[str, Any] = {}
        for env_key, env_value in env_vars.items():
            parts = env_key[len(ENV_PREFIX) :].split("__")

            current = nested
            for part in parts[:-1]:
                current = current.setdefault(part.lower(), {})
            current[parts[-1].lower()] = self._parse_env_value(env_value)

        return nested

    def _parse_env_value(self, value: str) -> Any:
        """Parse environment variable value to appropriate Python type.

        Args:
            value: String value from environment variable

        Returns:
            Parsed value (str, int, float or bool)
        """
        if not value:
            return value

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        return value

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> None:
        """Deep merge override dict into base dict (base is modified in place)."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _raise_helpful_error(self, validation_error: ValidationError) -> None:
        """Convert Pydantic validation error to helpful configuration error.

        Raises:
            ConfigurationError: With helpful error message
        """
        error_messages = []

        for error in validation_error.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            error_messages.append(f"  {loc}: {error['msg']}")

        helpful_msg = (
            "Configuration validation failed:\n"
            + "\n".join(error_messages)
            + "\n\nPlease check your configuration in:\n"
            f"  1. {self.config_path} (YAML file)\n"
            "  2. Environment variables (MCA_* prefix)\n"
            "  3. CLI arguments\n"
        )

        raise ConfigurationError(helpful_msg) from validation_error


def load_config(
    config_path: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
    validate: bool = True,
) -> AppConfig:
    """Convenience function to load configuration.

    Raises:
        ConfigurationError: If configuration loading fails
    """
    loader = ConfigLoader(config_path)
    return loader.load_config(cli_overrides, validate)


def load_config_for_testing(
    yaml_content: str | None = None,
    env_vars: dict[str, str] | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Load configuration from inline YAML and temporary environment variables."""
    import tempfile

    config_path = None
    if yaml_content:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8") as f:
            f.write(yaml_content)
            config_path = f.name

    old_env = {}
    if env_vars:
        for key, value in env_vars.items():
            old_env[key] = os.environ.get(key)
            os.environ[key] = value

    try:
        loader = ConfigLoader(config_path or "__no_config__.yaml")
        return loader.load_config(cli_overrides, validate=False)
    finally:
        for key, old_value in old_env.items():
            if old_value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = old_value

        if config_path:
            os.unlink(config_path)
