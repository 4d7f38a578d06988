# insights/registry.py

import logging
from collections.abc import Callable, Iterable, Iterator

from ..models import InsightSettings, default_settings
from .base import Insight
from .dividend_constancy import DividendConstancy
from .price_to_earnings import PriceToEarnings
from .profit_constancy import ProfitConstancy

logger = logging.getLogger(__name__)

InsightFactory = Callable[[InsightSettings], Insight]

# Insight key -> factory building the insight from settings
INSIGHT_FACTORIES: dict[str, InsightFactory] = {
    "dividend_constancy": lambda settings: DividendConstancy(
        years=settings.dividend_years,
        dividend_types=settings.dividend_event_types,
        reference_date=settings.reference_date,
    ),
    "price_to_earnings": lambda settings: PriceToEarnings(
        threshold=settings.pe_threshold,
    ),
    "profit_constancy_5y": lambda settings: ProfitConstancy(
        years=settings.short_profit_window,
        key="profit_constancy_5y",
    ),
    "profit_constancy_10y": lambda settings: ProfitConstancy(
        years=settings.long_profit_window,
        key="profit_constancy_10y",
    ),
}


class InsightRegistry:
    """
    Ordered, immutable collection of insights applied to every stock.

    Order is preserved so score strings are reproducible; it plays no part
    in ranking.
    """

    __slots__ = ("_insights",)

    def __init__(self, insights: Iterable[Insight]) -> None:
        """
        Initialise from insights, rejecting duplicate keys.

        Args:
            insights: Insights in evaluation order.

        Raises:
            ValueError: If two insights share a key.
        """
        ordered = tuple(insights)
        keys = [insight.key for insight in ordered]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"Duplicate insight keys: {', '.join(duplicates)}")
        self._insights = ordered

    def __iter__(self) -> Iterator[Insight]:
        return iter(self._insights)

    def __len__(self) -> int:
        return len(self._insights)

    def __getitem__(self, index: int) -> Insight:
        return self._insights[index]

    def __repr__(self) -> str:
        return f"InsightRegistry({', '.join(self.keys())})"

    def keys(self) -> tuple[str, ...]:
        return tuple(insight.key for insight in self._insights)


def build_registry(settings: InsightSettings | None = None) -> InsightRegistry:
    """
    Build the registry named by settings.active_insights, preserving order.

    Args:
        settings: Optional insight configuration (defaults to standard settings).

    Returns:
        InsightRegistry: Registry of configured insights.

    Raises:
        ValueError: If a key is unknown or repeated.
    """
    active_settings = settings or default_settings()

    unknown = [
        key for key in active_settings.active_insights if key not in INSIGHT_FACTORIES
    ]
    if unknown:
        raise ValueError(f"Unknown insight keys: {', '.join(unknown)}")

    registry = InsightRegistry(
        INSIGHT_FACTORIES[key](active_settings)
        for key in active_settings.active_insights
    )

    logger.debug("Built insight registry: %s", ", ".join(registry.keys()))
    return registry


def default_registry() -> InsightRegistry:
    """
    Return the standard registry: dividend constancy, price to earnings, and
    profit constancy over five and ten years.

    Returns:
        InsightRegistry: Registry built from default settings.
    """
    return build_registry(default_settings())
