"""Ratio derivation from a single set of financial statements.

Produces the fixed 19-field Metrics record: size totals, profitability,
liquidity, leverage, efficiency and the working capital cycle. COGS is not a
guaranteed line item in MCA filings, so DIO and DPO are computed against an
estimate expressed as a percentage of revenue.

Zero denominators are not special-cased. Division follows IEEE-754 so a zero
current-liabilities figure yields ``inf`` and 0/0 yields ``nan``; every
threshold comparison against ``nan`` is false, so such a ratio never trips a
low or high band downstream.
"""

from __future__ import annotations

import numpy as np
from loguru import logger

from .models import FinancialData, Metrics

DEFAULT_COGS_PERCENTAGE = 85.0
DAYS_IN_YEAR = 365


def divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: x/0 is +/-inf and 0/0 is nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


class MetricsCalculator:
    """Derive standardized ratios from FinancialData.

    Only the required statement lines feed the ratios (revenue, PAT,
    inventories, receivables, cash, payables, long-term borrowings and the
    summed totals). Optional detail lines never change the math.
    """

    def __init__(self, cogs_percentage: float = DEFAULT_COGS_PERCENTAGE) -> None:
        """Initialize calculator.

        Args:
            cogs_percentage: Estimated cost of goods sold as a percentage of
                revenue, used for DIO and DPO.
        """
        self.cogs_percentage = cogs_percentage
        self.logger = logger.bind(module="metrics_calculator")

    def calculate(self, data: FinancialData) -> Metrics:
        """Compute the Metrics record for ``data`` without mutating it."""
        income = data.income_statement
        current_assets = data.assets.current_assets
        non_current = data.liabilities.non_current_liabilities
        current_liab = data.liabilities.current_liabilities

        # Totals
        total_fixed_assets = sum(data.assets.fixed_assets.values())
        total_current_assets = current_assets.total()
        total_assets = total_fixed_assets + total_current_assets

        total_equity = sum(data.liabilities.equity.values())
        total_non_current_liab = non_current.total()
        total_current_liab = current_liab.total()
        total_liabilities = total_non_current_liab + total_current_liab

        # Profitability (%)
        net_margin = divide(income.pat, income.revenue) * 100
        roe = divide(income.pat, total_equity) * 100
        roa = divide(income.pat, total_assets) * 100

        # Liquidity
        current_ratio = divide(total_current_assets, total_current_liab)
        quick_ratio = divide(
            total_current_assets - current_assets.inventories, total_current_liab
        )
        cash_ratio = divide(current_assets.cash, total_current_liab)

        # Leverage: only long-term borrowings count as debt
        debt_to_equity = divide(non_current.long_term_borrowings, total_equity)
        debt_to_assets = divide(non_current.long_term_borrowings, total_assets)

        asset_turnover = divide(income.revenue, total_assets)
        working_capital = total_current_assets - total_current_liab

        # Working capital cycle against estimated COGS
        estimated_cogs = income.revenue * (self.cogs_percentage / 100)
        dio = divide(current_assets.inventories, estimated_cogs) * DAYS_IN_YEAR
        dso = divide(current_assets.trade_receivables, income.revenue) * DAYS_IN_YEAR
        dpo = divide(current_liab.trade_payables, estimated_cogs) * DAYS_IN_YEAR
        ccc = dio + dso - dpo

        metrics = Metrics(
            total_assets=float(total_assets),
            total_equity=float(total_equity),
            total_liabilities=float(total_liabilities),
            total_current_assets=float(total_current_assets),
            total_current_liab=float(total_current_liab),
            working_capital=float(working_capital),
            net_margin=net_margin,
            roe=roe,
            roa=roa,
            current_ratio=current_ratio,
            quick_ratio=quick_ratio,
            cash_ratio=cash_ratio,
            debt_to_equity=debt_to_equity,
            debt_to_assets=debt_to_assets,
            asset_turnover=asset_turnover,
            dio=dio,
            dso=dso,
            dpo=dpo,
            ccc=ccc,
        )

        self.logger.debug(
            "Metrics for {}: net_margin={:.2f}%, current_ratio={:.2f}, ccc={:.1f} days",
            data.company_name,
            net_margin,
            current_ratio,
            ccc,
        )
        return metrics


def calculate_metrics(
    data: FinancialData,
    cogs_percentage: float = DEFAULT_COGS_PERCENTAGE,
) -> Metrics:
    """Convenience wrapper around :class:`MetricsCalculator`."""
    return MetricsCalculator(cogs_percentage).calculate(data)


__all__ = [
    "DEFAULT_COGS_PERCENTAGE",
    "divide",
    "MetricsCalculator",
    "calculate_metrics",
]
