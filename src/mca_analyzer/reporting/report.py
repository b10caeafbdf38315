"""End-to-end analysis of one FinancialData record.

Runs metrics, risk scoring, alerts, scorecard and insight generation in
order, passing data and metrics explicitly between stages.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from loguru import logger

from mca_analyzer.analytics.alerts import AlertEngine
from mca_analyzer.analytics.insights import InsightGenerator, evaluate_health_scorecard
from mca_analyzer.analytics.metrics_calculator import MetricsCalculator
from mca_analyzer.analytics.models import (
    Alert,
    FinancialData,
    Metrics,
    RiskAssessment,
    ScorecardSummary,
)
from mca_analyzer.analytics.risk_scoring import RiskScorer
from mca_analyzer.config.schema import AnalysisConfig
from mca_analyzer.utils.log_setup import LogPhases, log_context


@dataclass
class FinancialReport:
    """Everything derived from one FinancialData snapshot."""

    data: FinancialData
    metrics: Metrics
    risk: RiskAssessment
    alerts: list[Alert]
    scorecard: ScorecardSummary
    insights: dict[str, str] = field(default_factory=dict)
    parameters: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe representation; non-finite numbers become None."""
        return {
            "company_name": self.data.company_name,
            "parameters": dict(self.parameters),
            "metrics": {k: _finite_or_none(v) for k, v in self.metrics.as_dict().items()},
            "risk": {"score": self.risk.score, "level": self.risk.level.value},
            "alerts": [
                {"severity": a.severity.value, "icon": a.icon, "message": a.message}
                for a in self.alerts
            ],
            "scorecard": {
                "excellent": self.scorecard.excellent,
                "moderate": self.scorecard.moderate,
                "concerning": self.scorecard.concerning,
                "rows": [
                    {
                        **asdict(row),
                        "value": _finite_or_none(row.value),
                        "band": row.band.value,
                    }
                    for row in self.scorecard.rows
                ],
            },
            "insights": dict(self.insights),
        }


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def build_report(data: FinancialData, config: Optional[AnalysisConfig] = None) -> FinancialReport:
    """Run the full analysis pipeline for ``data``."""
    config = config or AnalysisConfig()

    with log_context(company=data.company_name):
        with log_context(phase=LogPhases.METRICS):
            metrics = MetricsCalculator(config.cogs_percentage).calculate(data)

        with log_context(phase=LogPhases.RISK):
            risk = RiskScorer().score(metrics)

        with log_context(phase=LogPhases.ALERTS):
            alerts = AlertEngine(max_alerts=config.max_alerts).generate(data, metrics)

        with log_context(phase=LogPhases.INSIGHTS):
            scorecard = evaluate_health_scorecard(metrics, config.threshold_multiplier)
            insights = InsightGenerator(
                threshold_multiplier=config.threshold_multiplier,
                liquidity_target=config.liquidity_target,
                working_capital_benchmark=config.working_capital_benchmark,
            ).generate_all(data, metrics)

        logger.info(
            "Report built: risk {} ({}), {} alerts, scorecard {}/{}/{}",
            risk.score,
            risk.level.value,
            len(alerts),
            scorecard.excellent,
            scorecard.moderate,
            scorecard.concerning,
        )

    return FinancialReport(
        data=data,
        metrics=metrics,
        risk=risk,
        alerts=alerts,
        scorecard=scorecard,
        insights=insights,
        parameters={
            "cogs_percentage": config.cogs_percentage,
            "threshold_multiplier": config.threshold_multiplier,
            "liquidity_target": config.liquidity_target,
            "working_capital_benchmark": config.working_capital_benchmark,
        },
    )


__all__ = ["FinancialReport", "build_report"]
