"""Configuration package for MCA Analyzer.

This package provides configuration management with Pydantic BaseSettings
for type validation and automatic environment variable override support.

Environment Variables:
    Use MCA_ prefix for overrides. For nested configs use double underscore.
    Examples:
        MCA_ANALYSIS__COGS_PERCENTAGE=70
        MCA_ANALYSIS__THRESHOLD_MULTIPLIER=1.2
        MCA_LOGGING__LEVEL=DEBUG
"""

from .loader import ConfigLoader, ConfigurationError, load_config
from .schema import AnalysisConfig, AppConfig, LoggingConfig, PathsConfig

__all__ = [
    "AppConfig",
    "AnalysisConfig",
    "PathsConfig",
    "LoggingConfig",
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
]
