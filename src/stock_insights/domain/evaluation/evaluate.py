# evaluation/evaluate.py

import asyncio
import inspect
import logging
from collections.abc import Sequence

from stock_insights.schemas import Stock

from ..insights import Insight, InsightRegistry, InsufficientDataError
from ..models import EntityFailure, Outcome, Verdict, VerdictSet

logger = logging.getLogger(__name__)


class MalformedStockError(ValueError):
    """
    Raised when a stock lacks a field every insight depends on.
    """


async def evaluate_stock(stock: Stock, registry: InsightRegistry) -> VerdictSet:
    """
    Apply every insight in the registry to a single stock.

    Insights run concurrently. A failing insight is recorded as an
    indeterminate or failed verdict and never stops the others.

    Args:
        stock: The stock to evaluate.
        registry: Insights to apply.

    Returns:
        VerdictSet: One verdict per insight, in registry order.
    """
    verdicts = await asyncio.gather(
        *(_verify(insight, stock) for insight in registry),
    )
    return VerdictSet(stock_name=stock.name, verdicts=tuple(verdicts))


async def evaluate_stocks(
    stocks: Sequence[Stock],
    registry: InsightRegistry,
) -> list[VerdictSet | EntityFailure]:
    """
    Evaluate a batch of stocks concurrently.

    A malformed stock yields an EntityFailure in its slot; the rest of the
    batch is unaffected.

    Args:
        stocks: Stocks to evaluate.
        registry: Insights to apply to each stock.

    Returns:
        list[VerdictSet | EntityFailure]: Results aligned with the input order.
    """
    return list(
        await asyncio.gather(
            *(_evaluate_isolated(stock, registry) for stock in stocks),
        ),
    )


async def _evaluate_isolated(
    stock: Stock,
    registry: InsightRegistry,
) -> VerdictSet | EntityFailure:
    """
    Evaluate one stock, converting entity-level errors into an EntityFailure.

    Returns:
        VerdictSet | EntityFailure: Verdicts, or the reason evaluation failed.
    """
    try:
        _ensure_well_formed(stock)
        return await evaluate_stock(stock, registry)
    except Exception as error:
        name = getattr(stock, "name", None)
        logger.warning("Skipping stock %s: %s", name, error)
        return EntityFailure(name=name, reason=str(error))


def _ensure_well_formed(stock: Stock) -> None:
    """
    Reject stocks built without validation that miss required fields.

    Raises:
        MalformedStockError: If the name or current state is absent.
    """
    if not getattr(stock, "name", None):
        raise MalformedStockError("stock has no name")

    if getattr(stock, "current_state", None) is None:
        raise MalformedStockError(f"{stock.name} has no current state")


async def _verify(insight: Insight, stock: Stock) -> Verdict:
    """
    Run one insight against one stock, isolating its failures.

    Sync and async implementations of `verify` are both accepted.

    Returns:
        Verdict: Positive, negative, indeterminate or failed outcome.
    """
    try:
        result = insight.verify(stock)
        if inspect.isawaitable(result):
            result = await result
    except InsufficientDataError as error:
        return Verdict(insight.key, insight.title, Outcome.INDETERMINATE, str(error))
    except Exception as error:
        logger.warning(
            "Insight %s failed for %s: %s",
            insight.key,
            stock.name,
            error,
        )
        return Verdict(
            insight.key,
            insight.title,
            Outcome.FAILED,
            f"{type(error).__name__}: {error}",
        )

    outcome = Outcome.POSITIVE if result else Outcome.NEGATIVE
    return Verdict(insight.key, insight.title, outcome)
