# domain/models.py

import os
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum


@dataclass(frozen=True)
class InsightSettings:
    """
    Configuration values controlling insight thresholds and registry makeup.

    Constant for a deployment; never mutated at runtime.
    """

    # Price-to-earnings ratio at or below this value is considered attractive
    pe_threshold: Decimal = Decimal("15")
    # Consecutive completed years that must each contain a dividend
    dividend_years: int = 5
    # Event types counted as dividend payouts (compared case-insensitively)
    dividend_event_types: frozenset[str] = frozenset(
        {"dividend", "dividendo", "jrs cap proprio"},
    )
    # Trailing periods inspected by the short profit constancy check
    short_profit_window: int = 5
    # Trailing periods inspected by the long profit constancy check
    long_profit_window: int = 10
    # Date windows are anchored to; None means today
    reference_date: date | None = None
    # Insight keys applied to every stock, in registry order
    active_insights: tuple[str, ...] = (
        "dividend_constancy",
        "price_to_earnings",
        "profit_constancy_5y",
        "profit_constancy_10y",
    )


def default_settings() -> InsightSettings:
    """
    Return default insight thresholds.

    Returns:
        InsightSettings: Default configuration values.
    """
    return InsightSettings()


def settings_from_env(base: InsightSettings | None = None) -> InsightSettings:
    """
    Overlay environment overrides onto the given (or default) settings.

    Recognised variables:
        STOCK_INSIGHTS_PE_THRESHOLD: decimal P/E ceiling.
        STOCK_INSIGHTS_DIVIDEND_YEARS: positive integer window length.
        STOCK_INSIGHTS_ACTIVE: comma separated insight keys.

    Args:
        base: Settings to start from; defaults to default_settings().

    Returns:
        InsightSettings: Settings with any environment overrides applied.

    Raises:
        ValueError: If an override cannot be parsed.
    """
    settings = base or default_settings()
    overrides: dict[str, object] = {}

    pe_threshold = os.getenv("STOCK_INSIGHTS_PE_THRESHOLD")
    if pe_threshold:
        try:
            overrides["pe_threshold"] = Decimal(pe_threshold)
        except InvalidOperation as error:
            raise ValueError(
                f"Invalid STOCK_INSIGHTS_PE_THRESHOLD: {pe_threshold!r}",
            ) from error

    dividend_years = os.getenv("STOCK_INSIGHTS_DIVIDEND_YEARS")
    if dividend_years:
        years = int(dividend_years)
        if years < 1:
            raise ValueError("STOCK_INSIGHTS_DIVIDEND_YEARS must be positive")
        overrides["dividend_years"] = years

    active = os.getenv("STOCK_INSIGHTS_ACTIVE")
    if active:
        overrides["active_insights"] = tuple(
            key.strip() for key in active.split(",") if key.strip()
        )

    return replace(settings, **overrides)


class Outcome(Enum):
    """
    Result of applying one insight to one stock.

    Attributes:
        POSITIVE: The rule holds.
        NEGATIVE: The rule does not hold.
        INDETERMINATE: The stock lacks the data the rule needs.
        FAILED: The insight raised an unexpected error.
    """

    POSITIVE = "positive"
    NEGATIVE = "negative"
    INDETERMINATE = "indeterminate"
    FAILED = "failed"


@dataclass(frozen=True)
class Verdict:
    """
    Captures the outcome of a single insight on a single stock.
    """

    insight: str
    title: str
    outcome: Outcome
    detail: str | None = None

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.POSITIVE


@dataclass(frozen=True)
class VerdictSet:
    """
    All verdicts for one stock, in registry order.
    """

    stock_name: str
    verdicts: tuple[Verdict, ...] = field(default_factory=tuple)

    @property
    def positive_count(self) -> int:
        return sum(1 for verdict in self.verdicts if verdict.passed)

    @property
    def total(self) -> int:
        return len(self.verdicts)

    @property
    def score(self) -> str:
        return f"{self.positive_count}/{self.total}"


@dataclass(frozen=True)
class EntityFailure:
    """
    A stock that could not be evaluated, with the reason why.
    """

    name: str | None
    reason: str
