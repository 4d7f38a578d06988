# _utils/_windows.py

from collections.abc import Iterable
from datetime import date

from stock_insights.schemas import StockEvent


def trailing_years(years: int, reference_date: date | None = None) -> range:
    """
    Return the last `years` completed calendar years before the reference date.

    The reference year itself is excluded since its payouts may still be
    pending. For a reference date in 2024 and a five year window, this is
    2019 through 2023.

    Returns:
        range: Ascending range of calendar years.
    """
    anchor = reference_date or date.today()
    return range(anchor.year - years, anchor.year)


def dividend_events(
    events: Iterable[StockEvent],
    dividend_types: frozenset[str],
) -> list[StockEvent]:
    """
    Filter events down to dividend payouts, matching types case-insensitively.

    Returns:
        list[StockEvent]: Dividend events in their original order.
    """
    accepted = {kind.casefold() for kind in dividend_types}
    return [event for event in events if event.type.strip().casefold() in accepted]
