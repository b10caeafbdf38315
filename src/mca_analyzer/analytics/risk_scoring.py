"""Composite risk scoring.

Starts every company at 100 and deducts a fixed penalty for each ratio that
falls into a weak band. Each ratio is checked as an if/elif chain so it
contributes at most one penalty, while penalties from different ratios
stack. The final score is clamped to 0-100 and classified as low (>= 70),
medium (>= 40) or high risk.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable

from loguru import logger

from .models import Metrics, RiskAssessment, RiskLevel

MAX_SCORE = 100
MIN_SCORE = 0
LOW_RISK_MIN_SCORE = 70
MEDIUM_RISK_MIN_SCORE = 40

_OPERATORS: dict[str, Callable[[float, float], bool]] = {
    "<": operator.lt,
    ">": operator.gt,
}


@dataclass(frozen=True)
class PenaltyBand:
    """Deduct ``penalty`` when ``metric <op> threshold`` holds."""

    op: str
    threshold: float
    penalty: int

    def matches(self, value: float) -> bool:
        return _OPERATORS[self.op](value, self.threshold)


@dataclass(frozen=True)
class PenaltyRule:
    """Ordered penalty bands for a single metric; first match wins."""

    metric: str
    bands: tuple[PenaltyBand, ...]

    def penalty_for(self, metrics: Metrics) -> int:
        value = getattr(metrics, self.metric)
        for band in self.bands:
            if band.matches(value):
                return band.penalty
        return 0


# ------------------------------------------------------------------
# Default penalty table
# ------------------------------------------------------------------
DEFAULT_PENALTY_RULES: tuple[PenaltyRule, ...] = (
    PenaltyRule("current_ratio", (PenaltyBand("<", 1.0, 20), PenaltyBand("<", 1.5, 10))),
    PenaltyRule("quick_ratio", (PenaltyBand("<", 0.5, 15), PenaltyBand("<", 0.8, 8))),
    PenaltyRule("cash_ratio", (PenaltyBand("<", 0.1, 15), PenaltyBand("<", 0.2, 8))),
    PenaltyRule("net_margin", (PenaltyBand("<", 0, 25), PenaltyBand("<", 3, 12))),
    PenaltyRule("roe", (PenaltyBand("<", 0, 15), PenaltyBand("<", 5, 8))),
    PenaltyRule("debt_to_equity", (PenaltyBand(">", 1.5, 20), PenaltyBand(">", 0.8, 10))),
    PenaltyRule("working_capital", (PenaltyBand("<", 0, 20),)),
    PenaltyRule("ccc", (PenaltyBand(">", 120, 10), PenaltyBand(">", 90, 5))),
)


def classify_score(score: int) -> RiskLevel:
    """Map a clamped score to its risk level."""
    if score >= LOW_RISK_MIN_SCORE:
        return RiskLevel.LOW
    if score >= MEDIUM_RISK_MIN_SCORE:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


class RiskScorer:
    """Apply the penalty table to a Metrics record."""

    def __init__(self, rules: tuple[PenaltyRule, ...] = DEFAULT_PENALTY_RULES) -> None:
        self.rules = rules
        self.logger = logger.bind(module="risk_scoring")

    def score(self, metrics: Metrics) -> RiskAssessment:
        """Return the clamped score and its classification."""
        total_penalty = 0
        for rule in self.rules:
            penalty = rule.penalty_for(metrics)
            if penalty:
                self.logger.debug(
                    "Penalty {} applied for {}={}",
                    penalty,
                    rule.metric,
                    getattr(metrics, rule.metric),
                )
            total_penalty += penalty

        score = max(MIN_SCORE, min(MAX_SCORE, MAX_SCORE - total_penalty))
        level = classify_score(score)
        self.logger.info("Risk score {} ({}), total penalty {}", score, level.value, total_penalty)
        return RiskAssessment(score=score, level=level)


def calculate_risk_score(metrics: Metrics) -> RiskAssessment:
    """Convenience wrapper using the default penalty table."""
    return RiskScorer().score(metrics)


__all__ = [
    "DEFAULT_PENALTY_RULES",
    "PenaltyBand",
    "PenaltyRule",
    "RiskScorer",
    "calculate_risk_score",
    "classify_score",
]
