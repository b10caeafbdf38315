"""
Unit tests for report assembly and display rows.
"""

import json
import math

import pytest

from mca_analyzer.analytics.metrics_calculator import calculate_metrics
from mca_analyzer.analytics.models import AlertSeverity, RiskLevel
from mca_analyzer.config.schema import AnalysisConfig
from mca_analyzer.ingestion.sample_data import build_sample_data
from mca_analyzer.reporting.report import build_report
from mca_analyzer.reporting.summary_builder import (
    NEGATIVE,
    POSITIVE,
    build_key_metrics_rows,
    build_valuation_rows,
)


class TestKeyMetricsRows:
    """Headline rows with optional statement lines"""

    def test_core_rows_only_without_optional_lines(self, reference_data):
        rows = build_key_metrics_rows(reference_data, calculate_metrics(reference_data))

        assert [r.label for r in rows] == [
            "Total Assets",
            "Total Equity",
            "Revenue",
            "Net Profit",
            "Net Margin",
            "ROE",
            "Current Ratio",
            "Debt/Equity",
            "Cash",
            "Working Capital",
        ]

    def test_values_and_tones(self, reference_data):
        rows = {r.label: r for r in build_key_metrics_rows(reference_data, calculate_metrics(reference_data))}

        assert rows["Total Assets"].value == "₹12.00 L"
        assert rows["Net Margin"].value == "10.0%"
        assert rows["Net Margin"].tone == POSITIVE
        assert rows["Current Ratio"].value == "1.25"
        assert rows["Cash"].tone == NEGATIVE
        assert rows["Working Capital"].tone == POSITIVE

    def test_optional_lines_add_rows(self):
        data = build_sample_data()
        labels = [r.label for r in build_key_metrics_rows(data, calculate_metrics(data))]

        for label in ("COGS", "Gross Profit", "EBIT", "EBITDA"):
            assert label in labels
        assert labels.index("EBITDA") < labels.index("Net Profit")


class TestValuationRows:
    """Market and shareholding rows"""

    def test_sample_valuation(self):
        rows = {r.label: r.value for r in build_valuation_rows(build_sample_data())}

        assert rows["Market Cap"] == "₹9.60 Cr"
        assert rows["P/E"] == "32.00"
        assert rows["Dividend Yield"].startswith("0.6")
        assert rows["Tax Rate"] == "25.0%"
        assert rows["Total Shares"] == "300,000"
        assert rows["Promoter Holding"] == "83.33%"
        assert rows["Pending Allotment"] == "5,000 shares"
        assert rows["Forex Exposure"] == "₹16.70 L"

    def test_promoter_shares_without_total(self, reference_data):
        rows = {r.label: r.value for r in build_valuation_rows(reference_data)}
        assert rows == {"Promoter Shares": "60,000"}


class TestBuildReport:
    """End-to-end pipeline"""

    def test_sample_report(self):
        report = build_report(build_sample_data())

        assert report.risk.score == 100
        assert report.risk.level is RiskLevel.LOW
        assert [a.severity for a in report.alerts] == [
            AlertSeverity.INFO,
            AlertSeverity.SUCCESS,
            AlertSeverity.SUCCESS,
        ]
        assert report.scorecard.total == 8
        assert set(report.insights) >= {"key_metrics", "liquidity", "working_capital"}

    def test_parameters_recorded(self, reference_data):
        config = AnalysisConfig(cogs_percentage=70, threshold_multiplier=0.5)
        report = build_report(reference_data, config)

        assert report.parameters == {
            "cogs_percentage": 70,
            "threshold_multiplier": 0.5,
            "liquidity_target": 1.5,
            "working_capital_benchmark": 90.0,
        }
        assert report.metrics.dio == pytest.approx(100_000 / 700_000 * 365)

    def test_max_alerts_respected(self, reference_data):
        report = build_report(reference_data, AnalysisConfig(max_alerts=1))
        assert len(report.alerts) == 1

    def test_to_dict_is_json_safe(self, make_data):
        data = make_data(**{"income_statement.revenue": 0, "income_statement.pat": 0})
        report = build_report(data)

        assert math.isnan(report.metrics.net_margin)
        payload = report.to_dict()
        assert payload["metrics"]["net_margin"] is None
        assert payload["risk"]["level"] in {"low", "medium", "high"}
        json.dumps(payload, allow_nan=False)
