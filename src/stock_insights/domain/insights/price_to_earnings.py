# insights/price_to_earnings.py

from decimal import Decimal

from stock_insights.schemas import Stock

from .base import Insight
from .errors import InsufficientDataError


class PriceToEarnings(Insight):
    """
    Holds when the price-to-earnings ratio is positive and no higher than
    the configured threshold. A non-positive ratio means the company is not
    profitable and never holds.
    """

    key = "price_to_earnings"
    title = "Price to earnings"

    def __init__(self, *, threshold: Decimal = Decimal("15")) -> None:
        self.threshold = Decimal(threshold)
        self.description = f"P/E between 0 and {self.threshold}."

    async def verify(self, stock: Stock) -> bool:
        ratio = stock.current_state.price_to_earnings
        if ratio is None:
            raise InsufficientDataError(f"{stock.name} has no P/E ratio")
        return Decimal(0) < ratio <= self.threshold
