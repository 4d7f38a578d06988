# domain/scoreboard.py

import asyncio
import logging
from collections.abc import Iterable

from stock_insights.schemas import ScoreReport, Stock

from .insights import InsightRegistry, build_registry
from .models import InsightSettings, default_settings
from .score import score_stocks

logger = logging.getLogger(__name__)


class Scoreboard:
    """
    Holds the most recent scoring pass for a changing set of stocks.

    Each refresh supersedes any pass still in flight: the older pass is
    cancelled and its partial results are discarded, so a published report
    always comes from a single input snapshot.
    """

    __slots__ = (
        "_generation",
        "_latest",
        "_pending",
        "_registry",
        "_settings",
    )

    def __init__(
        self,
        *,
        settings: InsightSettings | None = None,
        registry: InsightRegistry | None = None,
    ) -> None:
        """
        Initialise with a fixed configuration.

        Args:
            settings: Insight configuration, or None for defaults.
            registry: Insights to apply, or None to build from settings.
        """
        self._settings = settings or default_settings()
        self._registry = (
            registry if registry is not None else build_registry(self._settings)
        )
        self._generation = 0
        self._latest: ScoreReport | None = None
        self._pending: asyncio.Task[ScoreReport] | None = None

    @property
    def latest(self) -> ScoreReport | None:
        """
        The last published report, or None before the first pass completes.
        """
        return self._latest

    async def refresh(self, stocks: Iterable[Stock]) -> ScoreReport | None:
        """
        Score a new snapshot of stocks and publish the result.

        Args:
            stocks: The new input snapshot.

        Returns:
            ScoreReport | None: The published report, or None if a newer
                refresh superseded this one before it finished.
        """
        self._generation += 1
        generation = self._generation
        snapshot = tuple(stocks)

        if self._pending is not None and not self._pending.done():
            logger.info("Superseding in-flight scoring pass")
            self._pending.cancel()

        task = asyncio.create_task(
            score_stocks(snapshot, self._settings, self._registry),
        )
        self._pending = task

        try:
            report = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                return None
            raise

        if generation != self._generation:
            return None

        self._latest = report
        self._pending = None
        return report
