"""
Unit tests for ratio derivation.

Tests cover:
- Concrete reference company figures
- Loss-making company sign handling
- IEEE-754 behaviour for zero denominators
- COGS estimate feeding DIO/DPO
- Determinism and input immutability
"""

import copy
import math

import pytest

from mca_analyzer.analytics.metrics_calculator import (
    DEFAULT_COGS_PERCENTAGE,
    MetricsCalculator,
    calculate_metrics,
    divide,
)
from mca_analyzer.ingestion.sample_data import build_sample_data


class TestDivide:
    """Test IEEE-754 division helper"""

    def test_regular_division(self):
        assert divide(10, 4) == 2.5

    def test_positive_over_zero_is_inf(self):
        assert divide(5, 0) == math.inf

    def test_negative_over_zero_is_negative_inf(self):
        assert divide(-5, 0) == -math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(divide(0, 0))

    def test_returns_builtin_float(self):
        assert type(divide(1, 3)) is float


class TestReferenceCompany:
    """Revenue 10 L, PAT 1 L, current assets 5 L, current liabilities 4 L, equity 6 L"""

    @pytest.fixture
    def metrics(self, reference_data):
        return calculate_metrics(reference_data)

    def test_totals(self, metrics):
        assert metrics.total_assets == 1_200_000
        assert metrics.total_equity == 600_000
        assert metrics.total_current_assets == 500_000
        assert metrics.total_current_liab == 400_000
        assert metrics.total_liabilities == 600_000
        assert metrics.working_capital == 100_000

    def test_profitability(self, metrics):
        assert metrics.net_margin == pytest.approx(10.0)
        assert metrics.roe == pytest.approx(16.6667, rel=1e-4)
        assert metrics.roa == pytest.approx(8.3333, rel=1e-4)

    def test_liquidity(self, metrics):
        assert metrics.current_ratio == pytest.approx(1.25)
        assert metrics.quick_ratio == pytest.approx(1.0)
        assert metrics.cash_ratio == pytest.approx(0.125)

    def test_leverage_counts_only_long_term_borrowings(self, metrics):
        assert metrics.debt_to_equity == pytest.approx(1 / 3)
        assert metrics.debt_to_assets == pytest.approx(1 / 6)

    def test_asset_turnover(self, metrics):
        assert metrics.asset_turnover == pytest.approx(1_000_000 / 1_200_000)

    def test_working_capital_cycle(self, metrics):
        estimated_cogs = 850_000
        assert metrics.dio == pytest.approx(100_000 / estimated_cogs * 365)
        assert metrics.dso == pytest.approx(54.75)
        assert metrics.dpo == pytest.approx(80_000 / estimated_cogs * 365)
        assert metrics.ccc == pytest.approx(metrics.dio + metrics.dso - metrics.dpo)

    def test_quick_ratio_never_exceeds_current_ratio(self, metrics):
        assert metrics.quick_ratio <= metrics.current_ratio


class TestLossMakingCompany:
    """Negative PAT flows through as negative percentages"""

    def test_negative_profitability(self, make_data):
        metrics = calculate_metrics(make_data(**{"income_statement.pat": -50_000}))

        assert metrics.net_margin == pytest.approx(-5.0)
        assert metrics.roe < 0
        assert metrics.roa < 0


class TestZeroDenominators:
    """Zero denominators produce inf/nan rather than raising"""

    def test_zero_current_liabilities(self, make_data):
        data = make_data(
            **{
                "liabilities.current_liabilities": {
                    "trade_payables": 0,
                    "other_current_liabilities": 0,
                    "short_term_provisions": 0,
                    "current_liability": 0,
                }
            }
        )
        metrics = calculate_metrics(data)

        assert math.isinf(metrics.current_ratio)
        assert math.isinf(metrics.quick_ratio)
        assert math.isinf(metrics.cash_ratio)
        assert metrics.dpo == 0

    def test_zero_revenue_and_zero_pat(self, make_data):
        data = make_data(**{"income_statement.revenue": 0, "income_statement.pat": 0})
        metrics = calculate_metrics(data)

        assert math.isnan(metrics.net_margin)
        assert math.isinf(metrics.dso)
        assert math.isinf(metrics.dio)
        assert math.isinf(metrics.dpo)
        # inf + inf - inf
        assert math.isnan(metrics.ccc)

    def test_zero_equity(self, make_data):
        data = make_data(**{"liabilities.equity": {"share_capital": 0}})
        metrics = calculate_metrics(data)

        assert math.isinf(metrics.roe)
        assert math.isinf(metrics.debt_to_equity)


class TestCogsPercentage:
    """COGS estimate only influences DIO and DPO"""

    def test_default_is_85_percent(self):
        assert DEFAULT_COGS_PERCENTAGE == 85.0
        assert MetricsCalculator().cogs_percentage == 85.0

    def test_lower_cogs_lengthens_inventory_days(self, reference_data):
        base = calculate_metrics(reference_data)
        lean = calculate_metrics(reference_data, cogs_percentage=50)

        assert lean.dio > base.dio
        assert lean.dpo > base.dpo
        assert lean.dso == base.dso
        assert lean.current_ratio == base.current_ratio

    def test_zero_cogs_gives_infinite_days(self, reference_data):
        metrics = calculate_metrics(reference_data, cogs_percentage=0)
        assert math.isinf(metrics.dio)
        assert math.isinf(metrics.dpo)


class TestPurity:
    """Calculator is deterministic and side-effect free"""

    def test_same_input_same_output(self, reference_data):
        assert calculate_metrics(reference_data) == calculate_metrics(reference_data)

    def test_input_not_mutated(self, reference_data):
        before = copy.deepcopy(reference_data)
        calculate_metrics(reference_data)
        assert reference_data == before

    def test_optional_detail_lines_do_not_change_ratios(self, make_data):
        plain = calculate_metrics(make_data())
        detailed = calculate_metrics(
            make_data(**{"income_statement.ebitda": 250_000, "income_statement.cost_of_goods_sold": 10})
        )
        assert plain == detailed


class TestSampleData:
    """Bundled sample dataset produces the documented ratios"""

    def test_sample_ratios(self):
        metrics = calculate_metrics(build_sample_data())

        assert metrics.total_assets == 29_000_000
        assert metrics.current_ratio == pytest.approx(2.125)
        assert metrics.quick_ratio == pytest.approx(1.375)
        assert metrics.cash_ratio == pytest.approx(0.3125)
        assert metrics.net_margin == pytest.approx(6.6667, rel=1e-4)
        assert metrics.roe == pytest.approx(18.75)
        assert metrics.debt_to_equity == pytest.approx(0.25)
        assert metrics.working_capital == 9_000_000
        assert metrics.ccc == pytest.approx(70.37, abs=0.01)
