"""
JSON ingestion for MCA financial statement data.

Validates the structure of an uploaded payload before it reaches the
analytics core, which assumes a structurally complete record.
"""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any

from loguru import logger

from mca_analyzer.analytics.models import (
    CurrentAssets,
    CurrentLiabilities,
    FinancialData,
    IncomeStatement,
    NonCurrentLiabilities,
)

REQUIRED_INCOME_FIELDS = ("revenue", "other_income", "total_expenses", "pbt", "pat")
OPTIONAL_INCOME_FIELDS = tuple(
    f.name for f in fields(IncomeStatement) if f.name not in REQUIRED_INCOME_FIELDS
)
OPTIONAL_TOP_LEVEL_FIELDS = (
    "forex_exposure_usd",
    "usd_to_inr_rate",
    "market_cap",
    "share_price",
    "eps",
    "diluted_eps",
    "total_shares",
)

# (path, record type) for fixed-shape sections
_FIXED_SECTIONS = (
    (("assets", "current_assets"), CurrentAssets),
    (("liabilities", "non_current_liabilities"), NonCurrentLiabilities),
    (("liabilities", "current_liabilities"), CurrentLiabilities),
)

# Open mappings whose values are summed
_MAPPING_SECTIONS = (
    ("assets", "fixed_assets"),
    ("liabilities", "equity"),
)


class DataLoadError(Exception):
    """Exception raised when financial data cannot be loaded."""

    pass


class DataValidationError(DataLoadError):
    """Exception raised for structurally invalid financial data."""

    def __init__(self, message: str, problems: list[str] | None = None):
        self.problems = problems or []
        if self.problems:
            message = message + "\n" + "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(message)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _lookup(payload: dict[str, Any], path: tuple[str, ...]) -> Any:
    current: Any = payload
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def validate_payload(payload: Any) -> list[str]:
    """
    Check a decoded JSON payload against the FinancialData shape.

    Args:
        payload: Decoded JSON value

    Returns:
        List of problems; empty when the payload is valid
    """
    if not isinstance(payload, dict):
        return ["Top-level value must be a JSON object"]

    problems: list[str] = []

    company_name = payload.get("company_name")
    if not isinstance(company_name, str) or not company_name.strip():
        problems.append("company_name must be a non-empty string")

    income = payload.get("income_statement")
    if not isinstance(income, dict):
        problems.append("income_statement section is missing")
    else:
        for name in REQUIRED_INCOME_FIELDS:
            if not _is_number(income.get(name)):
                problems.append(f"income_statement.{name} must be a number")
        for name in OPTIONAL_INCOME_FIELDS:
            value = income.get(name)
            if value is not None and not _is_number(value):
                problems.append(f"income_statement.{name} must be a number when present")

    for path in _MAPPING_SECTIONS:
        section = _lookup(payload, path)
        dotted = ".".join(path)
        if not isinstance(section, dict):
            problems.append(f"{dotted} section is missing")
            continue
        for key, value in section.items():
            if not _is_number(value):
                problems.append(f"{dotted}.{key} must be a number")

    for path, record_type in _FIXED_SECTIONS:
        section = _lookup(payload, path)
        dotted = ".".join(path)
        if not isinstance(section, dict):
            problems.append(f"{dotted} section is missing")
            continue
        for field_info in fields(record_type):
            if not _is_number(section.get(field_info.name)):
                problems.append(f"{dotted}.{field_info.name} must be a number")

    for name in ("shareholding", "pending_allotment"):
        section = payload.get(name)
        if section is None:
            continue
        if not isinstance(section, dict):
            problems.append(f"{name} must be an object of holder -> shares")
            continue
        for holder, shares in section.items():
            if not _is_number(shares):
                problems.append(f"{name}.{holder} must be a number")

    for name in OPTIONAL_TOP_LEVEL_FIELDS:
        value = payload.get(name)
        if value is not None and not _is_number(value):
            problems.append(f"{name} must be a number when present")

    return problems


def parse_financial_data(payload: Any) -> FinancialData:
    """
    Validate a decoded payload and build FinancialData from it.

    Raises:
        DataValidationError: If required fields are missing or not numeric
    """
    problems = validate_payload(payload)
    if problems:
        logger.warning("Rejected financial data payload: {} problem(s)", len(problems))
        raise DataValidationError("Invalid JSON structure. Please check the required fields.", problems)

    data = FinancialData.from_dict(payload)
    logger.info("Loaded financial data for {}", data.company_name)
    return data


def load_financial_data(path: Path | str) -> FinancialData:
    """
    Read and validate a financial data JSON file.

    Raises:
        DataLoadError: If the file cannot be read
        DataValidationError: If the file is not valid JSON or fails validation
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DataValidationError(f"Invalid JSON format in {path}: {e}") from e
    except OSError as e:
        raise DataLoadError(f"Failed to read {path}: {e}") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataValidationError(f"Invalid JSON format in {path}: {e}") from e

    return parse_financial_data(payload)


def save_financial_data(data: FinancialData, path: Path | str) -> Path:
    """Write FinancialData as pretty-printed JSON and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Saved financial data for {} to {}", data.company_name, path)
    return path


__all__ = [
    "DataLoadError",
    "DataValidationError",
    "validate_payload",
    "parse_financial_data",
    "load_financial_data",
    "save_financial_data",
]
