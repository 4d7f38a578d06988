# domain/test_scoreboard.py

import asyncio

import pytest

from stock_insights.domain.insights import Insight, InsightRegistry
from stock_insights.domain.scoreboard import Scoreboard
from stock_insights.schemas import Stock

pytestmark = pytest.mark.unit


class _Gated(Insight):
    """
    Blocks on a gate for stocks named "SLOW", answers True otherwise.
    """

    key = "gated"
    title = "Gated"

    def __init__(self, gate: asyncio.Event) -> None:
        self.gate = gate

    async def verify(self, stock: Stock) -> bool:
        if stock.name == "SLOW":
            await self.gate.wait()
        return True


def _stock(name: str) -> Stock:
    return Stock(name=name, current_state={"price": 10})


async def test_latest_is_none_before_refresh() -> None:
    """
    ARRANGE: fresh scoreboard
    ACT:     read latest
    ASSERT:  None
    """
    board = Scoreboard(registry=InsightRegistry([_Gated(asyncio.Event())]))

    assert board.latest is None


async def test_refresh_publishes_report() -> None:
    """
    ARRANGE: scoreboard and one stock
    ACT:     refresh
    ASSERT:  latest is the returned report
    """
    board = Scoreboard(registry=InsightRegistry([_Gated(asyncio.Event())]))

    actual = await board.refresh([_stock("FAST")])

    assert board.latest is actual and actual.rankings[0].name == "FAST"


async def test_refresh_supersedes_in_flight_pass() -> None:
    """
    ARRANGE: first refresh blocked on a slow stock
    ACT:     second refresh with a new snapshot
    ASSERT:  first returns None, only the second is published
    """
    board = Scoreboard(registry=InsightRegistry([_Gated(asyncio.Event())]))

    first = asyncio.create_task(board.refresh([_stock("SLOW")]))
    await asyncio.sleep(0)
    second = await board.refresh([_stock("FAST")])

    assert await first is None
    assert board.latest is second
    assert [stock.name for stock in board.latest.rankings] == ["FAST"]


async def test_refresh_replaces_previous_report() -> None:
    """
    ARRANGE: two sequential refreshes
    ACT:     refresh twice
    ASSERT:  latest reflects the second snapshot
    """
    board = Scoreboard(registry=InsightRegistry([_Gated(asyncio.Event())]))

    await board.refresh([_stock("A")])
    await board.refresh([_stock("B")])

    assert [stock.name for stock in board.latest.rankings] == ["B"]
