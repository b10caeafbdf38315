"""Shared fixtures for MCA Analyzer tests."""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Any

import pytest

from mca_analyzer.analytics.models import FinancialData, Metrics

# Reference company: revenue 10 L, PAT 1 L, current assets 5 L,
# current liabilities 4 L, equity 6 L, total assets 12 L.
BASE_PAYLOAD: dict[str, Any] = {
    "company_name": "Reference Traders Private Limited",
    "income_statement": {
        "revenue": 1_000_000,
        "other_income": 10_000,
        "total_expenses": 880_000,
        "pbt": 130_000,
        "pat": 100_000,
    },
    "assets": {
        "fixed_assets": {
            "property_equipment": 500_000,
            "intangible_assets": 150_000,
            "other_non_current": 50_000,
        },
        "current_assets": {
            "inventories": 100_000,
            "trade_receivables": 150_000,
            "cash": 50_000,
            "other_current": 200_000,
        },
    },
    "liabilities": {
        "equity": {
            "share_capital": 100_000,
            "reserves_surplus": 500_000,
        },
        "non_current_liabilities": {
            "long_term_borrowings": 200_000,
            "deferred_tax": 0,
            "long_term_provisions": 0,
        },
        "current_liabilities": {
            "trade_payables": 80_000,
            "other_current_liabilities": 200_000,
            "short_term_provisions": 70_000,
            "current_liability": 50_000,
        },
    },
    "shareholding": {"Promoter Group": 60_000},
}

# A record that trips no penalty, alert band or fallback on its own
HEALTHY_METRICS = Metrics(
    total_assets=1_000_000.0,
    total_equity=600_000.0,
    total_liabilities=400_000.0,
    total_current_assets=500_000.0,
    total_current_liab=250_000.0,
    working_capital=250_000.0,
    net_margin=6.0,
    roe=12.0,
    roa=6.0,
    current_ratio=1.8,
    quick_ratio=1.0,
    cash_ratio=0.4,
    debt_to_equity=0.5,
    debt_to_assets=0.3,
    asset_turnover=1.2,
    dio=30.0,
    dso=30.0,
    dpo=30.0,
    ccc=30.0,
)


@pytest.fixture
def base_payload() -> dict[str, Any]:
    return copy.deepcopy(BASE_PAYLOAD)


@pytest.fixture
def make_payload():
    """Factory returning a deep-copied payload with dotted-path overrides.

    Example: make_payload(**{"income_statement.pat": -50_000})
    """

    def _make(**overrides: Any) -> dict[str, Any]:
        payload = copy.deepcopy(BASE_PAYLOAD)
        for dotted, value in overrides.items():
            *parents, leaf = dotted.split(".")
            target = payload
            for key in parents:
                target = target[key]
            target[leaf] = value
        return payload

    return _make


@pytest.fixture
def make_data(make_payload):
    """Factory returning FinancialData with dotted-path overrides."""

    def _make(**overrides: Any) -> FinancialData:
        return FinancialData.from_dict(make_payload(**overrides))

    return _make


@pytest.fixture
def reference_data(make_data) -> FinancialData:
    return make_data()


@pytest.fixture
def make_metrics():
    """Factory returning HEALTHY_METRICS with field overrides."""

    def _make(**overrides: float) -> Metrics:
        return replace(HEALTHY_METRICS, **overrides)

    return _make
