"""Shared dataclasses for analytics modules.

Monetary values are plain rupee amounts exactly as they appear in the MCA
filing; nothing is rescaled to crores or lakhs until display time.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Optional


# ------------------------------------------------------------------
# Input records
# ------------------------------------------------------------------
@dataclass
class IncomeStatement:
    """Profit and loss statement for the reporting period."""

    revenue: float
    other_income: float
    total_expenses: float
    pbt: float
    pat: float

    # Optional detail lines, used only for display and insight text
    gross_income: Optional[float] = None
    cost_of_goods_sold: Optional[float] = None
    gross_profit: Optional[float] = None
    operating_expenses: Optional[float] = None
    selling_general_admin: Optional[float] = None
    research_development: Optional[float] = None
    depreciation_amortization: Optional[float] = None
    operating_income: Optional[float] = None  # EBIT
    interest_expense: Optional[float] = None
    interest_income: Optional[float] = None
    other_non_operating: Optional[float] = None
    income_tax: Optional[float] = None
    tax_rate: Optional[float] = None
    ebitda: Optional[float] = None
    net_income_from_continuing_ops: Optional[float] = None
    basic_eps: Optional[float] = None
    dividend_per_share: Optional[float] = None


@dataclass
class CurrentAssets:
    """Current assets block of the balance sheet."""

    inventories: float
    trade_receivables: float
    cash: float
    other_current: float

    def total(self) -> float:
        return self.inventories + self.trade_receivables + self.cash + self.other_current


@dataclass
class Assets:
    """Asset side of the balance sheet."""

    fixed_assets: dict[str, float]
    current_assets: CurrentAssets


@dataclass
class NonCurrentLiabilities:
    """Long-term obligations."""

    long_term_borrowings: float
    deferred_tax: float
    long_term_provisions: float

    def total(self) -> float:
        return self.long_term_borrowings + self.deferred_tax + self.long_term_provisions


@dataclass
class CurrentLiabilities:
    """Obligations falling due within twelve months."""

    trade_payables: float
    other_current_liabilities: float
    short_term_provisions: float
    current_liability: float

    def total(self) -> float:
        return (
            self.trade_payables
            + self.other_current_liabilities
            + self.short_term_provisions
            + self.current_liability
        )


@dataclass
class Liabilities:
    """Equity and liabilities side of the balance sheet."""

    equity: dict[str, float]
    non_current_liabilities: NonCurrentLiabilities
    current_liabilities: CurrentLiabilities


_VALUATION_FIELDS = ("market_cap", "share_price", "eps", "diluted_eps", "total_shares")


@dataclass
class FinancialData:
    """A single company's financial statements as filed with the MCA.

    ``shareholding`` and ``pending_allotment`` map holder names to share
    counts; any holder name is accepted.
    """

    company_name: str
    income_statement: IncomeStatement
    assets: Assets
    liabilities: Liabilities
    shareholding: dict[str, float] = field(default_factory=dict)
    pending_allotment: dict[str, float] = field(default_factory=dict)
    forex_exposure_usd: float = 0.0
    usd_to_inr_rate: float = 0.0

    # Optional valuation / market data
    market_cap: Optional[float] = None
    share_price: Optional[float] = None
    eps: Optional[float] = None
    diluted_eps: Optional[float] = None
    total_shares: Optional[float] = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> FinancialData:
        """Build the record tree from its JSON representation.

        The payload is assumed to be structurally valid; see
        ``mca_analyzer.ingestion.loader.validate_payload``.
        """
        income = payload["income_statement"]
        income_names = {f.name for f in fields(IncomeStatement)}
        assets = payload["assets"]
        liabilities = payload["liabilities"]

        return cls(
            company_name=payload["company_name"],
            income_statement=IncomeStatement(
                **{k: float(v) for k, v in income.items() if k in income_names and v is not None}
            ),
            assets=Assets(
                fixed_assets={k: float(v) for k, v in assets["fixed_assets"].items()},
                current_assets=CurrentAssets(
                    **{k: float(assets["current_assets"][k]) for k in _field_names(CurrentAssets)}
                ),
            ),
            liabilities=Liabilities(
                equity={k: float(v) for k, v in liabilities["equity"].items()},
                non_current_liabilities=NonCurrentLiabilities(
                    **{
                        k: float(liabilities["non_current_liabilities"][k])
                        for k in _field_names(NonCurrentLiabilities)
                    }
                ),
                current_liabilities=CurrentLiabilities(
                    **{
                        k: float(liabilities["current_liabilities"][k])
                        for k in _field_names(CurrentLiabilities)
                    }
                ),
            ),
            shareholding={k: float(v) for k, v in (payload.get("shareholding") or {}).items()},
            pending_allotment={k: float(v) for k, v in (payload.get("pending_allotment") or {}).items()},
            forex_exposure_usd=float(payload.get("forex_exposure_usd") or 0.0),
            usd_to_inr_rate=float(payload.get("usd_to_inr_rate") or 0.0),
            **{k: float(payload[k]) for k in _VALUATION_FIELDS if payload.get(k) is not None},
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation, omitting unset optional fields."""
        return _drop_none(asdict(self))


def _field_names(record_type: type) -> list[str]:
    return [f.name for f in fields(record_type)]


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    return value


# ------------------------------------------------------------------
# Derived values
# ------------------------------------------------------------------
@dataclass(frozen=True)
class Metrics:
    """Standardized ratios derived from one FinancialData snapshot.

    Profitability fields are percentages (already multiplied by 100),
    liquidity/leverage/efficiency fields are plain ratios and the working
    capital cycle is expressed in days.
    """

    # Size
    total_assets: float
    total_equity: float
    total_liabilities: float
    total_current_assets: float
    total_current_liab: float
    working_capital: float

    # Profitability (%)
    net_margin: float
    roe: float
    roa: float

    # Liquidity
    current_ratio: float
    quick_ratio: float
    cash_ratio: float

    # Leverage
    debt_to_equity: float
    debt_to_assets: float

    # Efficiency
    asset_turnover: float

    # Working capital cycle (days)
    dio: float
    dso: float
    dpo: float
    ccc: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


class RiskLevel(str, Enum):
    """Overall risk classification."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class RiskAssessment:
    """Composite 0-100 risk score (higher is healthier) and its band."""

    score: int
    level: RiskLevel


class AlertSeverity(str, Enum):
    """Alert severity bands, most urgent first."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    AlertSeverity.CRITICAL: 0,
    AlertSeverity.WARNING: 1,
    AlertSeverity.INFO: 2,
    AlertSeverity.SUCCESS: 3,
}


@dataclass(frozen=True)
class Alert:
    """A single prioritized observation about the company."""

    severity: AlertSeverity
    icon: str
    message: str


class ScorecardBand(str, Enum):
    """Band a scorecard ratio falls into."""

    EXCELLENT = "excellent"
    MODERATE = "moderate"
    CONCERNING = "concerning"


@dataclass(frozen=True)
class ScorecardRow:
    """One ratio on the health scorecard with its scaled thresholds."""

    label: str
    value: float
    low: float
    high: float
    band: ScorecardBand


@dataclass
class ScorecardSummary:
    """Tri-count of scorecard ratios per band."""

    excellent: int = 0
    moderate: int = 0
    concerning: int = 0
    rows: list[ScorecardRow] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.rows)


__all__ = [
    "IncomeStatement",
    "CurrentAssets",
    "Assets",
    "NonCurrentLiabilities",
    "CurrentLiabilities",
    "Liabilities",
    "FinancialData",
    "Metrics",
    "RiskLevel",
    "RiskAssessment",
    "AlertSeverity",
    "Alert",
    "ScorecardBand",
    "ScorecardRow",
    "ScorecardSummary",
]
