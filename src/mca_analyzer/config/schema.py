"""Configuration schema using Pydantic BaseSettings with environment variable support.

Environment variables override config values using the MCA_ prefix.
For example: MCA_ANALYSIS__COGS_PERCENTAGE=70 or MCA_PATHS__OUTPUT_DIR="/custom/output"
"""

from datetime import datetime
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisConfig(BaseSettings):
    """Tunable parameters for ratio derivation and insight text."""

    model_config = SettingsConfigDict(env_prefix="MCA_ANALYSIS__", env_nested_delimiter="__")

    cogs_percentage: float = Field(
        default=85.0, ge=0.0, le=100.0, description="Estimated COGS as a percentage of revenue"
    )
    threshold_multiplier: float = Field(
        default=1.0, gt=0.0, le=5.0, description="Scale factor for health scorecard thresholds"
    )
    liquidity_target: float = Field(default=1.5, gt=0.0, description="Current ratio target")
    working_capital_benchmark: float = Field(
        default=90.0, gt=0.0, description="Benchmark cash conversion cycle in days"
    )
    max_alerts: int = Field(default=6, ge=1, le=6, description="Maximum number of alerts shown")


class PathsConfig(BaseSettings):
    """File system paths configuration."""

    model_config = SettingsConfigDict(env_prefix="MCA_PATHS__", env_nested_delimiter="__")

    output_dir: Path = Field(default="./data/output", description="Directory for exported reports")
    logs_dir: Path = Field(default="./logs", description="Directory for log files")

    @field_validator("output_dir", "logs_dir", mode="before")
    @classmethod
    def validate_paths(cls, v):
        """Convert string paths to Path objects and resolve them."""
        if isinstance(v, str):
            return Path(v).expanduser().resolve()
        return v


class LoggingConfig(BaseSettings):
    """Logging system configuration."""

    model_config = SettingsConfigDict(env_prefix="MCA_LOGGING__", env_nested_delimiter="__")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Logging level")
    console: bool = Field(default=True, description="Enable console logging")
    file: bool = Field(default=True, description="Enable file logging")
    retention_days: int = Field(default=30, gt=0, description="Log file retention in days")


class AppConfig(BaseSettings):
    """Main application configuration combining all sections."""

    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="MCA_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        for directory in (self.paths.output_dir, self.paths.logs_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def get_log_file_path(self) -> Path:
        """Get the current log file path with date."""
        date_str = datetime.now().strftime("%Y-%m-%d")
        return self.paths.logs_dir / f"{date_str}.log"
