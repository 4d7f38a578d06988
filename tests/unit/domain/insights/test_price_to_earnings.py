# insights/test_price_to_earnings.py

from decimal import Decimal

import pytest

from stock_insights.domain.insights import InsufficientDataError, PriceToEarnings
from stock_insights.schemas import Stock

pytestmark = pytest.mark.unit


def _stock(price_to_earnings: float | None) -> Stock:
    return Stock(
        name="BBAS3",
        current_state={"price": 25, "price_to_earnings": price_to_earnings},
    )


async def test_verify_below_threshold_is_true() -> None:
    """
    ARRANGE: P/E of 6
    ACT:     verify with default threshold
    ASSERT:  True
    """
    actual = await PriceToEarnings().verify(_stock(6))

    assert actual is True


async def test_verify_at_threshold_is_true() -> None:
    """
    ARRANGE: P/E equal to threshold
    ACT:     verify
    ASSERT:  True
    """
    actual = await PriceToEarnings(threshold=Decimal("10")).verify(_stock(10))

    assert actual is True


async def test_verify_above_threshold_is_false() -> None:
    """
    ARRANGE: P/E of 40
    ACT:     verify with default threshold
    ASSERT:  False
    """
    actual = await PriceToEarnings().verify(_stock(40))

    assert actual is False


async def test_verify_negative_ratio_is_false() -> None:
    """
    ARRANGE: negative P/E (loss-making company)
    ACT:     verify
    ASSERT:  False
    """
    actual = await PriceToEarnings().verify(_stock(-3))

    assert actual is False


async def test_verify_missing_ratio_raises() -> None:
    """
    ARRANGE: no P/E ratio
    ACT:     verify
    ASSERT:  raises InsufficientDataError
    """
    with pytest.raises(InsufficientDataError):
        await PriceToEarnings().verify(_stock(None))
