# insights/dividend_constancy.py

from datetime import date

from stock_insights.schemas import Stock

from .._utils import dividend_events, trailing_years
from ..models import InsightSettings
from .base import Insight


class DividendConstancy(Insight):
    """
    Holds when the stock paid at least one dividend in each of the last
    `years` completed calendar years.
    """

    key = "dividend_constancy"
    title = "Dividend constancy"

    def __init__(
        self,
        *,
        years: int = 5,
        dividend_types: frozenset[str] = InsightSettings.dividend_event_types,
        reference_date: date | None = None,
    ) -> None:
        if years < 1:
            raise ValueError("years must be positive")
        self.years = years
        self.dividend_types = dividend_types
        self.reference_date = reference_date
        self.description = (
            f"Paid dividends in each of the last {years} completed years."
        )

    async def verify(self, stock: Stock) -> bool:
        """
        Check for a dividend in every year of the trailing window.

        Returns:
            bool: True when no year in the window is missing a dividend.
        """
        paid_years = {
            event.date.year
            for event in dividend_events(stock.events, self.dividend_types)
        }
        window = trailing_years(self.years, self.reference_date)
        return all(year in paid_years for year in window)
