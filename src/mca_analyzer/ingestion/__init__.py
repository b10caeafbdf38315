"""
Ingestion module for MCA Analyzer.

Loads financial statement JSON, validates its structure and provides the
bundled sample dataset.
"""

from mca_analyzer.ingestion.loader import (
    DataLoadError,
    DataValidationError,
    load_financial_data,
    parse_financial_data,
    save_financial_data,
    validate_payload,
)
from mca_analyzer.ingestion.sample_data import (
    SAMPLE_FINANCIAL_DATA,
    build_sample_data,
    sample_payload,
)

__all__ = [
    "DataLoadError",
    "DataValidationError",
    "load_financial_data",
    "parse_financial_data",
    "save_financial_data",
    "validate_payload",
    "SAMPLE_FINANCIAL_DATA",
    "build_sample_data",
    "sample_payload",
]
