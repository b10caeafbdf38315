"""Display rows for the key metrics and valuation panels.

Optional statement lines only produce a row when they are present in the
source data; the core rows are always shown.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mca_analyzer.analytics.alerts import LOW_CASH_THRESHOLD
from mca_analyzer.analytics.formatting import format_inr, format_number, format_percent
from mca_analyzer.analytics.metrics_calculator import divide
from mca_analyzer.analytics.models import FinancialData, Metrics

POSITIVE = "positive"
NEGATIVE = "negative"


@dataclass(frozen=True)
class SummaryRow:
    """Label, display text and an optional tone used for colouring."""

    label: str
    value: str
    tone: Optional[str] = None


def _sign_tone(value: float) -> str:
    return POSITIVE if value > 0 else NEGATIVE


def build_key_metrics_rows(data: FinancialData, metrics: Metrics) -> list[SummaryRow]:
    income = data.income_statement
    cash = data.assets.current_assets.cash

    rows = [
        SummaryRow("Total Assets", format_inr(metrics.total_assets)),
        SummaryRow("Total Equity", format_inr(metrics.total_equity)),
        SummaryRow("Revenue", format_inr(income.revenue)),
    ]

    if income.cost_of_goods_sold is not None:
        rows.append(SummaryRow("COGS", format_inr(income.cost_of_goods_sold)))
    if income.gross_profit is not None:
        rows.append(SummaryRow("Gross Profit", format_inr(income.gross_profit), POSITIVE))
    if income.operating_income is not None:
        rows.append(SummaryRow("EBIT", format_inr(income.operating_income), _sign_tone(income.operating_income)))
    if income.ebitda is not None:
        rows.append(SummaryRow("EBITDA", format_inr(income.ebitda), _sign_tone(income.ebitda)))

    rows.extend(
        [
            SummaryRow("Net Profit", format_inr(income.pat), _sign_tone(income.pat)),
            SummaryRow("Net Margin", format_percent(metrics.net_margin), _sign_tone(metrics.net_margin)),
            SummaryRow("ROE", format_percent(metrics.roe)),
            SummaryRow("Current Ratio", format_number(metrics.current_ratio, 2)),
            SummaryRow("Debt/Equity", format_number(metrics.debt_to_equity, 2)),
            SummaryRow("Cash", format_inr(cash), POSITIVE if cash >= LOW_CASH_THRESHOLD else NEGATIVE),
            SummaryRow(
                "Working Capital",
                format_inr(metrics.working_capital),
                POSITIVE if metrics.working_capital >= 0 else NEGATIVE,
            ),
        ]
    )
    return rows


def build_valuation_rows(data: FinancialData) -> list[SummaryRow]:
    """Market, per-share and shareholding figures that are present."""
    income = data.income_statement
    rows: list[SummaryRow] = []

    if data.market_cap is not None:
        rows.append(SummaryRow("Market Cap", format_inr(data.market_cap)))
    if data.share_price is not None:
        rows.append(SummaryRow("Share Price", format_inr(data.share_price)))
    if data.eps is not None:
        rows.append(SummaryRow("EPS", format_inr(data.eps), _sign_tone(data.eps)))
    if data.diluted_eps is not None:
        rows.append(SummaryRow("Diluted EPS", format_inr(data.diluted_eps), _sign_tone(data.diluted_eps)))
    if data.share_price is not None and data.eps is not None:
        rows.append(SummaryRow("P/E", format_number(divide(data.share_price, data.eps), 2)))
    if data.share_price is not None and income.dividend_per_share is not None:
        dividend_yield = divide(income.dividend_per_share, data.share_price) * 100
        rows.append(SummaryRow("Dividend Yield", format_percent(dividend_yield, 2)))
    if income.tax_rate is not None:
        rows.append(SummaryRow("Tax Rate", format_percent(income.tax_rate)))

    if data.total_shares is not None:
        rows.append(SummaryRow("Total Shares", f"{data.total_shares:,.0f}"))
    if data.shareholding:
        held = sum(data.shareholding.values())
        if data.total_shares is not None:
            rows.append(SummaryRow("Promoter Holding", format_percent(divide(held, data.total_shares) * 100, 2)))
        else:
            rows.append(SummaryRow("Promoter Shares", f"{held:,.0f}"))
    if data.pending_allotment:
        rows.append(SummaryRow("Pending Allotment", f"{sum(data.pending_allotment.values()):,.0f} shares"))
    if data.forex_exposure_usd:
        rows.append(SummaryRow("Forex Exposure", format_inr(data.forex_exposure_usd * data.usd_to_inr_rate)))

    return rows


__all__ = ["SummaryRow", "build_key_metrics_rows", "build_valuation_rows"]
