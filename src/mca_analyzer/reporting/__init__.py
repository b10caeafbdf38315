"""Report assembly and display-row builders."""

from mca_analyzer.reporting.report import FinancialReport, build_report
from mca_analyzer.reporting.summary_builder import (
    SummaryRow,
    build_key_metrics_rows,
    build_valuation_rows,
)

__all__ = [
    "FinancialReport",
    "build_report",
    "SummaryRow",
    "build_key_metrics_rows",
    "build_valuation_rows",
]
