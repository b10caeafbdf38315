"""Analytics modules for MCA financial statement analysis."""

from .alerts import AlertEngine, AlertRule, generate_alerts
from .chart_data import (
    SeriesPoint,
    TargetPoint,
    asset_composition_series,
    liability_composition_series,
    liquidity_series,
    profit_loss_series,
    working_capital_series,
)
from .formatting import format_inr, format_number, format_percent
from .insights import (
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
from .metrics_calculator import MetricsCalculator, calculate_metrics
from .models import (
    Alert,
    AlertSeverity,
    Assets,
    CurrentAssets,
    CurrentLiabilities,
    FinancialData,
    IncomeStatement,
    Liabilities,
    Metrics,
    NonCurrentLiabilities,
    RiskAssessment,
    RiskLevel,
    ScorecardBand,
    ScorecardRow,
    ScorecardSummary,
)
from .risk_scoring import PenaltyBand, PenaltyRule, RiskScorer, calculate_risk_score

__all__ = [
    # Models
    "FinancialData",
    "IncomeStatement",
    "Assets",
    "CurrentAssets",
    "Liabilities",
    "NonCurrentLiabilities",
    "CurrentLiabilities",
    "Metrics",
    "RiskAssessment",
    "RiskLevel",
    "Alert",
    "AlertSeverity",
    "ScorecardBand",
    "ScorecardRow",
    "ScorecardSummary",
    # Metrics Calculator
    "MetricsCalculator",
    "calculate_metrics",
    # Risk Scoring
    "PenaltyBand",
    "PenaltyRule",
    "RiskScorer",
    "calculate_risk_score",
    # Alerts
    "AlertEngine",
    "AlertRule",
    "generate_alerts",
    # Insights
    "InsightGenerator",
    "evaluate_health_scorecard",
    "key_metrics_insights",
    "health_scorecard_insights",
    "profit_loss_insights",
    "asset_composition_insights",
    "liability_composition_insights",
    "liquidity_insights",
    "working_capital_insights",
    # Chart series
    "SeriesPoint",
    "TargetPoint",
    "profit_loss_series",
    "asset_composition_series",
    "liability_composition_series",
    "liquidity_series",
    "working_capital_series",
    # Formatting
    "format_inr",
    "format_number",
    "format_percent",
]
