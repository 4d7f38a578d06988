# insights/profit_constancy.py

from collections.abc import Sequence
from decimal import Decimal
from itertools import pairwise

from stock_insights.schemas import HistoryPoint, Stock

from .base import Insight
from .errors import InsufficientDataError


class ProfitConstancy(Insight):
    """
    Holds when earnings per share never declined over the trailing `years`
    periods of history.

    Every period in the window must report a non-negative EPS. A missing
    figure fails the check rather than being skipped.
    """

    def __init__(self, *, years: int, key: str | None = None) -> None:
        if years < 2:
            raise ValueError("years must be at least 2")
        self.years = years
        self.key = key or f"profit_constancy_{years}y"
        self.title = f"Profit constancy ({years} years)"
        self.description = f"EPS non-decreasing over the last {years} periods."

    async def verify(self, stock: Stock) -> bool:
        """
        Inspect the trailing window of earnings per share.

        Returns:
            bool: True when EPS is present, non-negative and non-decreasing.

        Raises:
            InsufficientDataError: If history is shorter than the window.
        """
        if len(stock.history) < self.years:
            raise InsufficientDataError(
                f"{stock.name} has {len(stock.history)} periods of history, "
                f"{self.years} required",
            )

        return _is_non_decreasing(stock.history[-self.years :])


class ProfitConstancy5Years(ProfitConstancy):
    def __init__(self) -> None:
        super().__init__(years=5)


class ProfitConstancy10Years(ProfitConstancy):
    def __init__(self) -> None:
        super().__init__(years=10)


def _is_non_decreasing(window: Sequence[HistoryPoint]) -> bool:
    """
    Check a window of history points for missing, negative or declining EPS.

    Returns:
        bool: True when every step holds or grows from a non-negative start.
    """
    values = [point.earnings_per_share for point in window]

    if any(value is None or value < Decimal(0) for value in values):
        return False

    return all(earlier <= later for earlier, later in pairwise(values))
