# schemas/scoring.py

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from .stock import Holder


class ScoredStock(BaseModel):
    """
    Display-oriented projection of a stock and its insight verdicts.

    Created fresh for every evaluation pass and replaced wholesale when the
    source stocks change.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    business: str
    price: Decimal
    main_holder: Holder | None
    total_dividends_last_5_years: Decimal
    positive_insights: int
    total_insights: int
    insights_score: str


class VerdictOutput(BaseModel):
    """
    Outcome of a single insight applied to a single stock.
    """

    model_config = ConfigDict(frozen=True)

    insight: str
    title: str
    outcome: str
    detail: str | None = None


class FailureOutput(BaseModel):
    """
    A stock that could not be validated or scored.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None
    reason: str


class ScoreReport(BaseModel):
    """
    Machine-readable envelope for a complete scoring pass.

    Rankings are sorted by positive insights, highest first, with ties kept
    in input order. Verdicts are keyed by stock name for detail views.
    """

    model_config = ConfigDict(frozen=True)

    generated_at: str
    stocks_scored: int
    stocks_failed: int
    insights_applied: tuple[str, ...]
    rankings: tuple[ScoredStock, ...]
    verdicts: dict[str, tuple[VerdictOutput, ...]]
    failures: tuple[FailureOutput, ...]
