# ranking/project.py

from collections.abc import Iterable
from decimal import Decimal

from stock_insights.schemas import Holder, ScoredStock, Stock, StockEvent

from .._utils import dividend_events, trailing_years
from ..models import InsightSettings, VerdictSet


def project_stock(
    stock: Stock,
    verdict_set: VerdictSet,
    settings: InsightSettings,
) -> ScoredStock:
    """
    Combine a stock and its verdicts into a display-ready record.

    Args:
        stock: The evaluated stock.
        verdict_set: Verdicts produced for the stock.
        settings: Window and dividend type configuration.

    Returns:
        ScoredStock: Projection carrying the score and derived aggregates.
    """
    return ScoredStock(
        name=stock.name,
        business=stock.business,
        price=stock.current_state.price,
        main_holder=select_main_holder(stock.current_state.holders),
        total_dividends_last_5_years=total_dividends(stock.events, settings),
        positive_insights=verdict_set.positive_count,
        total_insights=verdict_set.total,
        insights_score=verdict_set.score,
    )


def select_main_holder(holders: Iterable[Holder]) -> Holder | None:
    """
    Pick the holder with the largest total share.

    Ties keep the first holder reaching the maximum; later equal holders
    never replace it.

    Returns:
        Holder | None: The main holder, or None when there are no holders.
    """
    main: Holder | None = None
    for holder in holders:
        if main is None or holder.total_shares > main.total_shares:
            main = holder
    return main


def total_dividends(
    events: Iterable[StockEvent],
    settings: InsightSettings,
) -> Decimal:
    """
    Sum dividend payouts dated within the trailing dividend window.

    Returns:
        Decimal: Total dividend amount paid in the window.
    """
    window = trailing_years(settings.dividend_years, settings.reference_date)
    return sum(
        (
            event.amount
            for event in dividend_events(events, settings.dividend_event_types)
            if event.date.year in window
        ),
        Decimal(0),
    )
