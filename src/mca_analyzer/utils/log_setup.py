import sys
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger


class LogPhases:
    """
    Predefined constants for the analysis phases, so every module tags its
    log lines with the same spelling.
    """

    LOADING = "loading"
    METRICS = "metrics"
    RISK = "risk"
    ALERTS = "alerts"
    INSIGHTS = "insights"
    REPORTING = "reporting"


# Valid context field names
VALID_CONTEXT_FIELDS = {"company", "phase"}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {extra} - {message}"


def format_record(record):
    """
    Custom format function to include context fields if present.
    """
    format_string = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"

    if record["extra"].get("company"):
        format_string += " | <yellow>{extra[company]}</yellow>"
    if record["extra"].get("phase"):
        format_string += " | <magenta>{extra[phase]}</magenta>"

    format_string += " - <level>{message}</level>\n"

    if record["exception"]:
        format_string += "{exception}\n"

    return format_string


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | None = "logs",
    console: bool = True,
    file: bool = True,
    retention_days: int = 30,
):
    """
    Configure logging for the application using Loguru.

    Args:
        log_level: The logging level for the console (default: "INFO")
        log_dir: Directory to store log files (default: "logs")
        console: Add the colorized stderr sink
        file: Add the daily and error file sinks
        retention_days: How long rotated log files are kept
    """
    if log_dir is None:
        log_dir = "logs"

    log_path = Path(log_dir)

    # Remove default handler
    logger.remove()

    if console:
        logger.add(sys.stderr, format=format_record, level=log_level, colorize=True)

    if file:
        log_path.mkdir(parents=True, exist_ok=True)

        # Daily rotation, everything from DEBUG up
        logger.add(
            log_path / "{time:YYYY-MM-DD}.log",
            rotation="1 day",
            retention=f"{retention_days} days",
            format=FILE_FORMAT,
            level="DEBUG",
            encoding="utf-8",
        )

        # Separate file for errors
        logger.add(
            log_path / "errors.log",
            level="ERROR",
            format=FILE_FORMAT,
            rotation="10 MB",
            retention=f"{retention_days} days",
            encoding="utf-8",
            backtrace=True,
            diagnose=True,
        )

    logger.info(f"Logging initialized. Level: {log_level}, Dir: {log_path}")


@contextmanager
def log_context(**kwargs) -> Generator[None, None, None]:
    """
    Bind contextual information to logs using Loguru's contextualize().

    Supported Context Fields:
        company (str): Name of the company being analyzed
        phase (str): Current analysis phase (see LogPhases)

    Raises:
        ValueError: If an invalid field name is provided

    Usage:
        with log_context(company="Acme Ltd", phase=LogPhases.METRICS):
            logger.info("Computing ratios")
    """
    invalid_fields = set(kwargs.keys()) - VALID_CONTEXT_FIELDS
    if invalid_fields:
        raise ValueError(f"Invalid context field(s): {invalid_fields}. " f"Valid fields are: {VALID_CONTEXT_FIELDS}")

    with logger.contextualize(**kwargs):
        yield
