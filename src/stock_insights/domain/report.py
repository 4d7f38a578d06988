# domain/report.py

from collections.abc import Sequence
from datetime import UTC, datetime

from stock_insights.schemas import (
    FailureOutput,
    ScoredStock,
    ScoreReport,
    VerdictOutput,
)

from .models import EntityFailure, VerdictSet


def build_score_report(
    rankings: Sequence[ScoredStock],
    verdict_sets: Sequence[VerdictSet],
    failures: Sequence[EntityFailure],
    insight_keys: tuple[str, ...],
) -> ScoreReport:
    """
    Convert internal dataclass results into a Pydantic ScoreReport.

    Args:
        rankings: Scored stocks, already sorted.
        verdict_sets: Verdicts for every scored stock.
        failures: Stocks that could not be scored.
        insight_keys: Keys of the applied insights, in registry order.

    Returns:
        ScoreReport: Machine-readable report envelope.
    """
    return ScoreReport(
        generated_at=datetime.now(UTC).isoformat(),
        stocks_scored=len(rankings),
        stocks_failed=len(failures),
        insights_applied=insight_keys,
        rankings=tuple(rankings),
        verdicts=_index_verdicts(verdict_sets),
        failures=tuple(
            FailureOutput(name=failure.name, reason=failure.reason)
            for failure in failures
        ),
    )


def find_verdicts(
    report: ScoreReport,
    name: str,
) -> tuple[VerdictOutput, ...] | None:
    """
    Look up the verdicts for one stock, as used by detail views.

    Args:
        report: A completed scoring report.
        name: Exact stock name.

    Returns:
        tuple[VerdictOutput, ...] | None: Verdicts in registry order, or None
            if the stock was not scored.
    """
    return report.verdicts.get(name)


def _index_verdicts(
    verdict_sets: Sequence[VerdictSet],
) -> dict[str, tuple[VerdictOutput, ...]]:
    """
    Key verdicts by stock name. A repeated name keeps its first entry.
    """
    index: dict[str, tuple[VerdictOutput, ...]] = {}
    for verdict_set in verdict_sets:
        index.setdefault(verdict_set.stock_name, _convert_verdicts(verdict_set))
    return index


def _convert_verdicts(verdict_set: VerdictSet) -> tuple[VerdictOutput, ...]:
    return tuple(
        VerdictOutput(
            insight=verdict.insight,
            title=verdict.title,
            outcome=verdict.outcome.value,
            detail=verdict.detail,
        )
        for verdict in verdict_set.verdicts
    )
