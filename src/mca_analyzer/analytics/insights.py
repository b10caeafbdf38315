"""Per-section insight text and the financial health scorecard.

Every generator runs an ordered set of threshold checks and joins the
resulting sentences with ". ". Generators whose checks may all stay silent
fall back to a fixed sentence.
"""

from __future__ import annotations

from loguru import logger

from .alerts import LOW_CASH_THRESHOLD
from .formatting import format_inr
from .metrics_calculator import divide
from .models import (
    FinancialData,
    Metrics,
    ScorecardBand,
    ScorecardRow,
    ScorecardSummary,
)

DEFAULT_THRESHOLD_MULTIPLIER = 1.0
DEFAULT_LIQUIDITY_TARGET = 1.5
DEFAULT_WORKING_CAPITAL_BENCHMARK = 90.0

# Quick and cash ratio targets relative to the current ratio target
QUICK_RATIO_TARGET_FACTOR = 0.67
CASH_RATIO_TARGET_FACTOR = 0.2

# (label, metrics attribute, low threshold, high threshold) before scaling
SCORECARD_THRESHOLDS: tuple[tuple[str, str, float, float], ...] = (
    ("Current Ratio", "current_ratio", 1.5, 2.5),
    ("Quick Ratio", "quick_ratio", 0.8, 1.2),
    ("Cash Ratio", "cash_ratio", 0.2, 0.5),
    ("Net Margin %", "net_margin", 3, 8),
    ("ROE %", "roe", 10, 20),
    ("ROA %", "roa", 5, 10),
    ("Debt/Equity", "debt_to_equity", 0.3, 0.7),
    ("Asset Turnover", "asset_turnover", 1.0, 2.0),
)


def _join(sentences: list[str]) -> str:
    return ". ".join(sentences) + "."


def evaluate_health_scorecard(
    metrics: Metrics,
    threshold_multiplier: float = DEFAULT_THRESHOLD_MULTIPLIER,
) -> ScorecardSummary:
    """Band the eight scorecard ratios against scaled thresholds.

    ``value >= high`` is excellent, ``value >= low`` is moderate and anything
    else, including ``nan``, is concerning.
    """
    summary = ScorecardSummary()

    for label, attribute, low, high in SCORECARD_THRESHOLDS:
        value = getattr(metrics, attribute)
        low_threshold = low * threshold_multiplier
        high_threshold = high * threshold_multiplier

        if value >= high_threshold:
            band = ScorecardBand.EXCELLENT
            summary.excellent += 1
        elif value >= low_threshold:
            band = ScorecardBand.MODERATE
            summary.moderate += 1
        else:
            band = ScorecardBand.CONCERNING
            summary.concerning += 1

        summary.rows.append(
            ScorecardRow(
                label=label,
                value=value,
                low=low_threshold,
                high=high_threshold,
                band=band,
            )
        )

    return summary


class InsightGenerator:
    """Summarize each dashboard section in one or two sentences."""

    def __init__(
        self,
        threshold_multiplier: float = DEFAULT_THRESHOLD_MULTIPLIER,
        liquidity_target: float = DEFAULT_LIQUIDITY_TARGET,
        working_capital_benchmark: float = DEFAULT_WORKING_CAPITAL_BENCHMARK,
    ) -> None:
        self.threshold_multiplier = threshold_multiplier
        self.liquidity_target = liquidity_target
        self.working_capital_benchmark = working_capital_benchmark
        self.logger = logger.bind(module="insights")

    def generate_all(self, data: FinancialData, metrics: Metrics) -> dict[str, str]:
        """Insight text for every section, keyed by section name."""
        insights = {
            "key_metrics": key_metrics_insights(data, metrics),
            "health_scorecard": health_scorecard_insights(metrics, self.threshold_multiplier),
            "profit_loss": profit_loss_insights(data),
            "asset_composition": asset_composition_insights(data, metrics),
            "liability_composition": liability_composition_insights(data, metrics),
            "liquidity": liquidity_insights(metrics, self.liquidity_target),
            "working_capital": working_capital_insights(metrics, self.working_capital_benchmark),
        }
        self.logger.debug("Generated insights for {} sections", len(insights))
        return insights


# ------------------------------------------------------------------
# Section generators
# ------------------------------------------------------------------
def key_metrics_insights(data: FinancialData, metrics: Metrics) -> str:
    insights: list[str] = []

    if metrics.net_margin > 5:
        insights.append("Strong profitability with healthy net margin")
    elif metrics.net_margin < 0:
        insights.append("Operating at a loss")
    else:
        insights.append("Moderate profitability")

    if metrics.roe > 15:
        insights.append("Excellent return on equity")
    elif metrics.roe < 5:
        insights.append("Low return on equity")
    else:
        insights.append("Decent return on equity")

    if metrics.current_ratio > 1.5:
        insights.append("Strong liquidity position")
    elif metrics.current_ratio < 1:
        insights.append("Potential liquidity issues")
    else:
        insights.append("Adequate liquidity")

    if metrics.debt_to_equity < 0.5:
        insights.append("Conservative leverage")
    elif metrics.debt_to_equity > 1:
        insights.append("High leverage risk")
    else:
        insights.append("Moderate leverage")

    if data.assets.current_assets.cash >= LOW_CASH_THRESHOLD:
        insights.append("Good cash reserves")
    else:
        insights.append("Limited cash reserves")

    if metrics.working_capital >= 0:
        insights.append("Positive working capital")
    else:
        insights.append("Negative working capital - potential cash flow issues")

    return _join(insights)


def health_scorecard_insights(
    metrics: Metrics,
    threshold_multiplier: float = DEFAULT_THRESHOLD_MULTIPLIER,
) -> str:
    summary = evaluate_health_scorecard(metrics, threshold_multiplier)
    total = summary.total
    return (
        f"Financial Health: {summary.excellent}/{total} excellent, "
        f"{summary.moderate}/{total} moderate, "
        f"{summary.concerning}/{total} concerning parameters."
    )


def profit_loss_insights(data: FinancialData) -> str:
    income = data.income_statement
    totals = f"Revenue: {format_inr(income.revenue)}, Expenses: {format_inr(income.total_expenses)}."

    if income.pat > 0:
        return f"Profitable operation with PAT of {format_inr(income.pat)}. {totals}"
    return f"Loss-making operation with loss of {format_inr(abs(income.pat))}. {totals}"


def asset_composition_insights(data: FinancialData, metrics: Metrics) -> str:
    current_assets = data.assets.current_assets
    total_assets = metrics.total_assets
    fixed_pct = divide(sum(data.assets.fixed_assets.values()), total_assets) * 100

    insights: list[str] = []

    if current_assets.cash < LOW_CASH_THRESHOLD:
        insights.append("Low cash reserves")
    if current_assets.inventories > total_assets * 0.3:
        insights.append("High inventory levels")
    if current_assets.trade_receivables > total_assets * 0.2:
        insights.append("Significant receivables")
    if fixed_pct > 70:
        insights.append("Asset-heavy with high fixed assets")
    elif fixed_pct < 30:
        insights.append("Light asset base")

    return _join(insights) if insights else "Balanced asset composition."


def liability_composition_insights(data: FinancialData, metrics: Metrics) -> str:
    funding_base = metrics.total_equity + metrics.total_liabilities
    equity_pct = divide(metrics.total_equity, funding_base) * 100
    debt_pct = metrics.debt_to_assets * 100

    insights: list[str] = []

    if equity_pct > 60:
        insights.append("Strong equity base")
    elif equity_pct < 30:
        insights.append("Low equity, high leverage")

    if debt_pct > 50:
        insights.append("High debt levels")
    elif debt_pct < 20:
        insights.append("Conservative debt usage")

    if metrics.debt_to_equity > 1:
        insights.append("Debt exceeds equity")
    else:
        insights.append("Equity exceeds debt")

    return _join(insights)


def liquidity_insights(metrics: Metrics, target: float = DEFAULT_LIQUIDITY_TARGET) -> str:
    ratios = (
        (metrics.current_ratio, target),
        (metrics.quick_ratio, target * QUICK_RATIO_TARGET_FACTOR),
        (metrics.cash_ratio, target * CASH_RATIO_TARGET_FACTOR),
    )
    meeting = sum(1 for value, ratio_target in ratios if value >= ratio_target)
    total = len(ratios)

    if meeting == total:
        return f"Strong liquidity: All {total} ratios meet or exceed targets."
    if meeting >= total / 2:
        return f"Moderate liquidity: {meeting}/{total} ratios meet targets."
    return f"Weak liquidity: Only {meeting}/{total} ratios meet targets."


def working_capital_insights(
    metrics: Metrics,
    benchmark: float = DEFAULT_WORKING_CAPITAL_BENCHMARK,
) -> str:
    high = benchmark * 1.5
    low = benchmark * 0.5
    insights: list[str] = []

    if metrics.dio > high:
        insights.append("High inventory holding period")
    elif metrics.dio < low:
        insights.append("Efficient inventory management")

    if metrics.dso > high:
        insights.append("Slow receivables collection")
    elif metrics.dso < low:
        insights.append("Fast receivables collection")

    if metrics.dpo < low:
        insights.append("Quick payables settlement")
    elif metrics.dpo > high:
        insights.append("Extended payables period")

    if metrics.ccc < benchmark:
        insights.append("Efficient cash conversion cycle")
    else:
        insights.append("Slow cash conversion cycle")

    return _join(insights)


__all__ = [
    "SCORECARD_THRESHOLDS",
    "InsightGenerator",
    "evaluate_health_scorecard",
    "key_metrics_insights",
    "health_scorecard_insights",
    "profit_loss_insights",
    "asset_composition_insights",
    "liability_composition_insights",
    "liquidity_insights",
    "working_capital_insights",
]
