"""Series preparation for the dashboard charts.

Turns FinancialData and Metrics into labelled value series. Drawing the
charts is left to the caller; these helpers only decide what is plotted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .insights import (
    CASH_RATIO_TARGET_FACTOR,
    DEFAULT_LIQUIDITY_TARGET,
    QUICK_RATIO_TARGET_FACTOR,
)
from .metrics_calculator import divide
from .models import FinancialData, Metrics

BASE_EMPHASIS = 0.7
EMPHASIS_RANGE = 0.3


@dataclass(frozen=True)
class SeriesPoint:
    """One bar of a chart."""

    label: str
    value: float
    emphasis: Optional[float] = None  # opacity weight for composition charts


@dataclass(frozen=True)
class TargetPoint:
    """A ratio plotted against its target."""

    label: str
    value: float
    target: float

    @property
    def meets_target(self) -> bool:
        return self.value >= self.target


def _with_emphasis(labels: list[str], values: list[float], focus: float) -> list[SeriesPoint]:
    """Attach an emphasis weight that grows with each value's share of the max.

    ``focus`` of 0 renders every bar equally; 1 highlights the largest.
    """
    max_value = max(values)
    points: list[SeriesPoint] = []
    for label, value in zip(labels, values):
        emphasis = focus * divide(value, max_value)
        points.append(
            SeriesPoint(
                label=label,
                value=value,
                emphasis=max(BASE_EMPHASIS, BASE_EMPHASIS + emphasis * EMPHASIS_RANGE),
            )
        )
    return points


def profit_loss_series(data: FinancialData, scale: float = 1.0) -> list[SeriesPoint]:
    """Revenue to net profit bars; expenses and tax are shown as magnitudes."""
    income = data.income_statement
    tax = income.pbt - income.pat
    return [
        SeriesPoint("Revenue", income.revenue * scale),
        SeriesPoint("Other Income", income.other_income * scale),
        SeriesPoint("Expenses", income.total_expenses * scale),
        SeriesPoint("Tax", tax * scale),
        SeriesPoint("Net Profit", income.pat * scale),
    ]


def asset_composition_series(
    data: FinancialData,
    metrics: Metrics,
    focus: float = 0.5,
) -> list[SeriesPoint]:
    current_assets = data.assets.current_assets
    labels = ["Fixed Assets", "Inventories", "Receivables", "Cash", "Other Current"]
    values = [
        sum(data.assets.fixed_assets.values()),
        current_assets.inventories,
        current_assets.trade_receivables,
        current_assets.cash,
        current_assets.other_current,
    ]
    return _with_emphasis(labels, values, focus)


def liability_composition_series(
    data: FinancialData,
    metrics: Metrics,
    focus: float = 0.5,
) -> list[SeriesPoint]:
    liabilities = data.liabilities
    payables = liabilities.current_liabilities.trade_payables
    labels = ["Equity", "Long-term Debt", "Payables", "Other Current Liab"]
    values = [
        metrics.total_equity,
        liabilities.non_current_liabilities.total(),
        payables,
        metrics.total_current_liab - payables,
    ]
    return _with_emphasis(labels, values, focus)


def liquidity_series(metrics: Metrics, target: float = DEFAULT_LIQUIDITY_TARGET) -> list[TargetPoint]:
    return [
        TargetPoint("Current Ratio", metrics.current_ratio, target),
        TargetPoint("Quick Ratio", metrics.quick_ratio, target * QUICK_RATIO_TARGET_FACTOR),
        TargetPoint("Cash Ratio", metrics.cash_ratio, target * CASH_RATIO_TARGET_FACTOR),
    ]


def working_capital_series(metrics: Metrics) -> list[SeriesPoint]:
    """Cycle components; payment days are negative since they shorten the cycle."""
    return [
        SeriesPoint("Inventory Days", metrics.dio),
        SeriesPoint("Collection Days", metrics.dso),
        SeriesPoint("Payment Days", -metrics.dpo),
        SeriesPoint("Cash Cycle", metrics.ccc),
    ]


__all__ = [
    "SeriesPoint",
    "TargetPoint",
    "profit_loss_series",
    "asset_composition_series",
    "liability_composition_series",
    "liquidity_series",
    "working_capital_series",
]
