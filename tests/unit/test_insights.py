"""
Unit tests for section insight text and the health scorecard.
"""

import math

import pytest

from mca_analyzer.analytics.insights import (
    SCORECARD_THRESHOLDS,
    InsightGenerator,
    asset_composition_insights,
    evaluate_health_scorecard,
    health_scorecard_insights,
    key_metrics_insights,
    liability_composition_insights,
    liquidity_insights,
    profit_loss_insights,
    working_capital_insights,
)
from mca_analyzer.analytics.metrics_calculator import calculate_metrics
from mca_analyzer.analytics.models import ScorecardBand


@pytest.fixture
def reference_metrics(reference_data):
    return calculate_metrics(reference_data)


class TestKeyMetricsInsights:
    """Six-sentence summary of the headline ratios"""

    def test_reference_company(self, reference_data, reference_metrics):
        assert key_metrics_insights(reference_data, reference_metrics) == (
            "Strong profitability with healthy net margin. "
            "Excellent return on equity. "
            "Adequate liquidity. "
            "Conservative leverage. "
            "Limited cash reserves. "
            "Positive working capital."
        )

    def test_distressed_company(self, make_data, make_metrics):
        data = make_data(**{"assets.current_assets.cash": 2_000_000})
        metrics = make_metrics(
            net_margin=-3.0, roe=2.0, current_ratio=0.8, debt_to_equity=1.5, working_capital=-10.0
        )
        assert key_metrics_insights(data, metrics) == (
            "Operating at a loss. "
            "Low return on equity. "
            "Potential liquidity issues. "
            "High leverage risk. "
            "Good cash reserves. "
            "Negative working capital - potential cash flow issues."
        )

    def test_middle_bands(self, reference_data, make_metrics):
        metrics = make_metrics(net_margin=5.0, roe=15.0, current_ratio=1.6, debt_to_equity=1.0)
        text = key_metrics_insights(reference_data, metrics)
        assert text.startswith(
            "Moderate profitability. Decent return on equity. Strong liquidity position. Moderate leverage."
        )


class TestHealthScorecard:
    """Eight ratios banded against scaled thresholds"""

    def test_reference_company_counts(self, reference_metrics):
        summary = evaluate_health_scorecard(reference_metrics)

        assert (summary.excellent, summary.moderate, summary.concerning) == (1, 4, 3)
        assert summary.total == len(SCORECARD_THRESHOLDS) == 8

    def test_reference_company_text(self, reference_metrics):
        assert health_scorecard_insights(reference_metrics) == (
            "Financial Health: 1/8 excellent, 4/8 moderate, 3/8 concerning parameters."
        )

    def test_multiplier_scales_thresholds(self, reference_metrics):
        summary = evaluate_health_scorecard(reference_metrics, threshold_multiplier=0.5)

        assert (summary.excellent, summary.moderate, summary.concerning) == (5, 3, 0)
        current_ratio_row = summary.rows[0]
        assert current_ratio_row.label == "Current Ratio"
        assert current_ratio_row.low == pytest.approx(0.75)
        assert current_ratio_row.high == pytest.approx(1.25)
        assert current_ratio_row.band is ScorecardBand.EXCELLENT

    def test_counts_always_sum_to_eight(self, make_metrics):
        for multiplier in (0.25, 1.0, 3.0):
            summary = evaluate_health_scorecard(make_metrics(), multiplier)
            assert summary.excellent + summary.moderate + summary.concerning == 8

    def test_nan_ratio_is_concerning(self, make_metrics):
        summary = evaluate_health_scorecard(make_metrics(current_ratio=math.nan))
        assert summary.rows[0].band is ScorecardBand.CONCERNING

    def test_band_boundaries(self, make_metrics):
        rows = evaluate_health_scorecard(make_metrics(current_ratio=2.5, quick_ratio=0.8, cash_ratio=0.19)).rows
        assert [row.band for row in rows[:3]] == [
            ScorecardBand.EXCELLENT,
            ScorecardBand.MODERATE,
            ScorecardBand.CONCERNING,
        ]


class TestProfitLossInsights:
    """Profit or loss sentence plus revenue and expense totals"""

    def test_profitable(self, reference_data):
        assert profit_loss_insights(reference_data) == (
            "Profitable operation with PAT of ₹1.00 L. Revenue: ₹10.00 L, Expenses: ₹8.80 L."
        )

    def test_loss_reports_absolute_amount(self, make_data):
        data = make_data(**{"income_statement.pat": -50_000})
        assert profit_loss_insights(data) == (
            "Loss-making operation with loss of ₹50,000. Revenue: ₹10.00 L, Expenses: ₹8.80 L."
        )

    def test_break_even_is_not_profitable(self, make_data):
        data = make_data(**{"income_statement.pat": 0})
        assert profit_loss_insights(data).startswith("Loss-making operation with loss of ₹0.")


class TestAssetCompositionInsights:
    """Observations about how assets are distributed"""

    def test_low_cash_only(self, reference_data, reference_metrics):
        assert asset_composition_insights(reference_data, reference_metrics) == "Low cash reserves."

    def test_balanced_fallback(self, make_data):
        data = make_data(**{"assets.current_assets.cash": 150_000})
        metrics = calculate_metrics(data)
        assert asset_composition_insights(data, metrics) == "Balanced asset composition."

    def test_inventory_receivables_and_asset_heavy(self, make_data):
        data = make_data(
            **{
                "assets.fixed_assets": {"property_equipment": 100_000},
                "assets.current_assets": {
                    "inventories": 400_000,
                    "trade_receivables": 300_000,
                    "cash": 200_000,
                    "other_current": 0,
                },
            }
        )
        metrics = calculate_metrics(data)
        assert asset_composition_insights(data, metrics) == (
            "High inventory levels. Significant receivables. Light asset base."
        )

    def test_asset_heavy(self, make_data):
        data = make_data(
            **{
                "assets.fixed_assets": {"property_equipment": 5_000_000},
                "assets.current_assets.cash": 200_000,
            }
        )
        metrics = calculate_metrics(data)
        assert asset_composition_insights(data, metrics) == "Asset-heavy with high fixed assets."


class TestLiabilityCompositionInsights:
    """Funding mix observations"""

    def test_reference_company(self, reference_data, reference_metrics):
        assert liability_composition_insights(reference_data, reference_metrics) == (
            "Conservative debt usage. Equity exceeds debt."
        )

    def test_debt_heavy(self, make_data):
        data = make_data(
            **{
                "liabilities.equity": {"share_capital": 100_000},
                "liabilities.non_current_liabilities.long_term_borrowings": 800_000,
            }
        )
        metrics = calculate_metrics(data)
        assert liability_composition_insights(data, metrics) == (
            "Low equity, high leverage. High debt levels. Debt exceeds equity."
        )

    def test_strong_equity_base(self, make_data):
        data = make_data(**{"liabilities.equity": {"share_capital": 2_000_000}})
        metrics = calculate_metrics(data)
        assert liability_composition_insights(data, metrics).startswith("Strong equity base.")


class TestLiquidityInsights:
    """Count of liquidity ratios meeting target"""

    def test_weak_against_default_target(self, reference_metrics):
        assert liquidity_insights(reference_metrics) == "Weak liquidity: Only 0/3 ratios meet targets."

    def test_moderate_against_lower_target(self, reference_metrics):
        assert liquidity_insights(reference_metrics, target=1.0) == "Moderate liquidity: 2/3 ratios meet targets."

    def test_strong_against_low_target(self, reference_metrics):
        assert liquidity_insights(reference_metrics, target=0.5) == (
            "Strong liquidity: All 3 ratios meet or exceed targets."
        )

    def test_one_of_three_is_weak(self, make_metrics):
        metrics = make_metrics(current_ratio=1.6, quick_ratio=0.5, cash_ratio=0.1)
        assert liquidity_insights(metrics) == "Weak liquidity: Only 1/3 ratios meet targets."


class TestWorkingCapitalInsights:
    """Cycle component observations against the benchmark"""

    def test_reference_company(self, reference_metrics):
        assert working_capital_insights(reference_metrics) == (
            "Efficient inventory management. Quick payables settlement. Efficient cash conversion cycle."
        )

    def test_slow_cycle(self, make_metrics):
        metrics = make_metrics(dio=150.0, dso=140.0, dpo=200.0, ccc=90.0)
        assert working_capital_insights(metrics) == (
            "High inventory holding period. Slow receivables collection. "
            "Extended payables period. Slow cash conversion cycle."
        )

    def test_benchmark_changes_bands(self, make_metrics):
        metrics = make_metrics(dio=30.0, dso=30.0, dpo=30.0, ccc=30.0)
        assert working_capital_insights(metrics, benchmark=10) == (
            "High inventory holding period. Slow receivables collection. "
            "Extended payables period. Slow cash conversion cycle."
        )
        assert working_capital_insights(metrics, benchmark=90) == (
            "Efficient inventory management. Fast receivables collection. "
            "Quick payables settlement. Efficient cash conversion cycle."
        )

    def test_nan_cycle_is_slow(self, make_metrics):
        text = working_capital_insights(make_metrics(ccc=math.nan))
        assert text.endswith("Slow cash conversion cycle.")


class TestInsightGenerator:
    """All sections generated together"""

    def test_generates_every_section(self, reference_data, reference_metrics):
        insights = InsightGenerator().generate_all(reference_data, reference_metrics)

        assert list(insights) == [
            "key_metrics",
            "health_scorecard",
            "profit_loss",
            "asset_composition",
            "liability_composition",
            "liquidity",
            "working_capital",
        ]
        assert all(text.endswith(".") for text in insights.values())

    def test_parameters_passed_through(self, reference_data, reference_metrics):
        insights = InsightGenerator(
            threshold_multiplier=0.5, liquidity_target=0.5, working_capital_benchmark=20
        ).generate_all(reference_data, reference_metrics)

        assert insights["health_scorecard"].startswith("Financial Health: 5/8 excellent")
        assert insights["liquidity"].startswith("Strong liquidity")
        assert insights["working_capital"].endswith("Slow cash conversion cycle.")
