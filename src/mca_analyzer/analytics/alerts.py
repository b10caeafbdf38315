"""Prioritized alerts for the dashboard.

Each rule is an independent predicate over FinancialData + Metrics with a
fixed severity and message template. Matching rules are collected in table
order, stable-sorted by severity (critical, warning, info, success) and
capped, so rules of equal severity keep their table order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from loguru import logger

from .formatting import format_inr, format_number
from .models import Alert, AlertSeverity, FinancialData, Metrics

MAX_ALERTS = 6
LOW_CASH_THRESHOLD = 100_000  # absolute rupees, not scaled to company size

SEVERITY_ICONS: dict[AlertSeverity, str] = {
    AlertSeverity.CRITICAL: "🚨",
    AlertSeverity.WARNING: "⚠️",
    AlertSeverity.INFO: "ℹ️",
    AlertSeverity.SUCCESS: "✅",
}


@dataclass(frozen=True)
class AlertRule:
    """Predicate plus message builder for one alert."""

    rule_id: str
    severity: AlertSeverity
    condition: Callable[[FinancialData, Metrics], bool]
    message: Callable[[FinancialData, Metrics], str]


# ------------------------------------------------------------------
# Default rule table (evaluation order matters for equal severities)
# ------------------------------------------------------------------
DEFAULT_ALERT_RULES: tuple[AlertRule, ...] = (
    # Critical
    AlertRule(
        "LIQ-CRIT",
        AlertSeverity.CRITICAL,
        lambda d, m: m.current_ratio < 1.0,
        lambda d, m: f"Liquidity crisis: current ratio of {format_number(m.current_ratio, 2)} is below 1.0",
    ),
    AlertRule(
        "PROFIT-LOSS",
        AlertSeverity.CRITICAL,
        lambda d, m: m.net_margin < 0,
        lambda d, m: f"Operating at a loss with net margin of {format_number(m.net_margin, 1)}%",
    ),
    AlertRule(
        "WC-NEG",
        AlertSeverity.CRITICAL,
        lambda d, m: m.working_capital < 0,
        lambda d, m: f"Negative working capital of {format_inr(m.working_capital)}",
    ),
    # Warning
    AlertRule(
        "LEV-HIGH",
        AlertSeverity.WARNING,
        lambda d, m: m.debt_to_equity > 1.0,
        lambda d, m: f"High leverage: debt-to-equity ratio of {format_number(m.debt_to_equity, 2)}",
    ),
    AlertRule(
        "CASH-LOW",
        AlertSeverity.WARNING,
        lambda d, m: d.assets.current_assets.cash < LOW_CASH_THRESHOLD,
        lambda d, m: f"Low cash reserves of {format_inr(d.assets.current_assets.cash)}",
    ),
    AlertRule(
        "CCC-LONG",
        AlertSeverity.WARNING,
        lambda d, m: m.ccc > 120,
        lambda d, m: f"Long cash conversion cycle of {format_number(m.ccc, 0)} days",
    ),
    AlertRule(
        "QUICK-WEAK",
        AlertSeverity.WARNING,
        lambda d, m: m.quick_ratio < 0.8,
        lambda d, m: f"Weak quick ratio of {format_number(m.quick_ratio, 2)}",
    ),
    # Info
    AlertRule(
        "DIO-HIGH",
        AlertSeverity.INFO,
        lambda d, m: m.dio > 90,
        lambda d, m: f"Inventory held for {format_number(m.dio, 0)} days on average",
    ),
    AlertRule(
        "DSO-HIGH",
        AlertSeverity.INFO,
        lambda d, m: m.dso > 45,
        lambda d, m: f"Receivables collected in {format_number(m.dso, 0)} days on average",
    ),
    # Success
    AlertRule(
        "LIQ-STRONG",
        AlertSeverity.SUCCESS,
        lambda d, m: m.current_ratio >= 2.0,
        lambda d, m: f"Strong liquidity with current ratio of {format_number(m.current_ratio, 2)}",
    ),
    AlertRule(
        "MARGIN-HEALTHY",
        AlertSeverity.SUCCESS,
        lambda d, m: m.net_margin >= 8,
        lambda d, m: f"Healthy net margin of {format_number(m.net_margin, 1)}%",
    ),
    AlertRule(
        "ROE-EXCELLENT",
        AlertSeverity.SUCCESS,
        lambda d, m: m.roe >= 15,
        lambda d, m: f"Excellent return on equity of {format_number(m.roe, 1)}%",
    ),
)


class AlertEngine:
    """Evaluate alert rules and return the highest-priority findings."""

    def __init__(
        self,
        rules: tuple[AlertRule, ...] = DEFAULT_ALERT_RULES,
        max_alerts: int = MAX_ALERTS,
    ) -> None:
        """Initialize engine.

        Args:
            rules: Ordered alert rules.
            max_alerts: Maximum number of alerts returned, never above MAX_ALERTS.
        """
        self.rules = rules
        self.max_alerts = min(max_alerts, MAX_ALERTS)
        self.logger = logger.bind(module="alerts")

    def generate(self, data: FinancialData, metrics: Metrics) -> list[Alert]:
        """Return matching alerts, most severe first, capped at ``max_alerts``."""
        alerts: list[Alert] = []

        for rule in self.rules:
            if rule.condition(data, metrics):
                alerts.append(
                    Alert(
                        severity=rule.severity,
                        icon=SEVERITY_ICONS[rule.severity],
                        message=rule.message(data, metrics),
                    )
                )
                self.logger.debug("Alert {} triggered ({})", rule.rule_id, rule.severity.value)

        # sorted() is stable, so equal severities keep rule order
        ranked = sorted(alerts, key=lambda a: a.severity.rank)
        selected = ranked[: self.max_alerts]

        self.logger.info(
            "Alert evaluation complete: {} matched, {} returned ({} critical)",
            len(alerts),
            len(selected),
            sum(1 for a in selected if a.severity is AlertSeverity.CRITICAL),
        )
        return selected


def generate_alerts(
    data: FinancialData,
    metrics: Metrics,
    max_alerts: int = MAX_ALERTS,
) -> list[Alert]:
    """Convenience wrapper using the default rule table."""
    return AlertEngine(max_alerts=max_alerts).generate(data, metrics)


__all__ = [
    "MAX_ALERTS",
    "LOW_CASH_THRESHOLD",
    "SEVERITY_ICONS",
    "AlertRule",
    "AlertEngine",
    "DEFAULT_ALERT_RULES",
    "generate_alerts",
]
