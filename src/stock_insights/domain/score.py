# domain/score.py

import asyncio
import logging
from collections.abc import Iterable, Mapping, Sequence

from stock_insights.schemas import ScoredStock, ScoreReport, Stock

from .evaluation import evaluate_stocks
from .insights import InsightRegistry, build_registry
from .intake import parse_stocks
from .models import EntityFailure, InsightSettings, VerdictSet, default_settings
from .ranking import project_stock, rank_scored_stocks
from .report import build_score_report

logger = logging.getLogger(__name__)


async def score_stocks(
    stocks: Sequence[Stock],
    settings: InsightSettings | None = None,
    registry: InsightRegistry | None = None,
    *,
    intake_failures: Sequence[EntityFailure] = (),
) -> ScoreReport:
    """
    Evaluate, project and rank a batch of stocks.

    Per-stock problems never abort the pass; they are reported in the
    envelope's failures alongside any intake failures passed in.

    Args:
        stocks: Stocks to score; treated as immutable for the whole pass.
        settings: Optional insight configuration (defaults to standard settings).
        registry: Optional registry; built from settings when omitted.
        intake_failures: Failures recorded before scoring, e.g. by parse_stocks.

    Returns:
        ScoreReport: Ranked stocks, their verdicts, and all failures.
    """
    active_settings = settings or default_settings()
    active_registry = registry if registry is not None else build_registry(
        active_settings,
    )

    results = await evaluate_stocks(stocks, active_registry)

    scored: list[ScoredStock] = []
    verdict_sets: list[VerdictSet] = []
    failures = list(intake_failures)

    for stock, result in zip(stocks, results, strict=True):
        if isinstance(result, EntityFailure):
            failures.append(result)
            continue

        try:
            scored.append(project_stock(stock, result, active_settings))
        except (AttributeError, TypeError, ValueError) as error:
            logger.warning(
                "Skipping stock %s: projection failed: %s",
                stock.name,
                error,
            )
            failures.append(EntityFailure(name=stock.name, reason=str(error)))
            continue

        verdict_sets.append(result)

    return build_score_report(
        rank_scored_stocks(scored),
        verdict_sets,
        failures,
        active_registry.keys(),
    )


def analyse_stocks(
    documents: Iterable[Mapping[str, object]],
    settings: InsightSettings | None = None,
) -> ScoreReport:
    """
    Run the complete insight analysis over raw stock documents.

    Validates the documents, scores every valid stock and returns the ranked
    report. Must not be called from inside a running event loop; use
    score_stocks there instead.

    Args:
        documents: Raw stock documents from the document store.
        settings: Optional insight configuration (defaults to standard settings).

    Returns:
        ScoreReport: The completed scoring report.
    """
    stocks, intake_failures = parse_stocks(documents)

    report = asyncio.run(
        score_stocks(stocks, settings, intake_failures=intake_failures),
    )

    logger.info(
        "Insight analysis complete: %d stocks scored, %d failed, %d insights",
        report.stocks_scored,
        report.stocks_failed,
        len(report.insights_applied),
    )

    return report
