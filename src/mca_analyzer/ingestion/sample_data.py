"""Sample MCA financial statement payload for demos and first-run exploration."""

from __future__ import annotations

import copy
from typing import Any

from mca_analyzer.analytics.models import FinancialData

SAMPLE_FINANCIAL_DATA: dict[str, Any] = {
    "company_name": "Sample Manufacturing Private Limited",
    "income_statement": {
        "revenue": 45_000_000,
        "other_income": 500_000,
        "total_expenses": 41_500_000,
        "pbt": 4_000_000,
        "pat": 3_000_000,
        "cost_of_goods_sold": 36_000_000,
        "gross_profit": 9_000_000,
        "operating_income": 4_300_000,
        "ebitda": 5_500_000,
        "depreciation_amortization": 1_200_000,
        "interest_expense": 800_000,
        "income_tax": 1_000_000,
        "tax_rate": 25,
        "basic_eps": 10,
        "dividend_per_share": 2,
    },
    "assets": {
        "fixed_assets": {
            "property_equipment": 8_000_000,
            "intangible_assets": 1_500_000,
            "other_non_current": 2_500_000,
        },
        "current_assets": {
            "inventories": 6_000_000,
            "trade_receivables": 7_500_000,
            "cash": 2_500_000,
            "other_current": 1_000_000,
        },
    },
    "liabilities": {
        "equity": {
            "share_capital": 3_000_000,
            "reserves_surplus": 13_000_000,
        },
        "non_current_liabilities": {
            "long_term_borrowings": 4_000_000,
            "deferred_tax": 500_000,
            "long_term_provisions": 500_000,
        },
        "current_liabilities": {
            "trade_payables": 5_000_000,
            "other_current_liabilities": 2_000_000,
            "short_term_provisions": 500_000,
            "current_liability": 500_000,
        },
    },
    "shareholding": {
        "Promoter A": 150_000,
        "Promoter B": 100_000,
    },
    "pending_allotment": {
        "ESOP Trust": 5_000,
    },
    "forex_exposure_usd": 20_000,
    "usd_to_inr_rate": 83.5,
    "market_cap": 96_000_000,
    "share_price": 320,
    "eps": 10,
    "diluted_eps": 9.8,
    "total_shares": 300_000,
}


def sample_payload() -> dict[str, Any]:
    """Deep copy of the sample payload, safe to mutate."""
    return copy.deepcopy(SAMPLE_FINANCIAL_DATA)


def build_sample_data() -> FinancialData:
    """Fresh FinancialData built from the sample payload."""
    return FinancialData.from_dict(sample_payload())


__all__ = ["SAMPLE_FINANCIAL_DATA", "sample_payload", "build_sample_data"]
