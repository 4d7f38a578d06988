# schemas/stock.py

from datetime import datetime
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Documents arrive with camelCase keys (e.g. "currentState", "priceToEarnings"),
# while Python callers use the snake_case field names.
_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class Holder(BaseModel):
    """
    A shareholder of a stock.

    Args:
        name (str): Holder name.
        ordinary_shares (Decimal): Ordinary (voting) share percentage.
        preferred_shares (Decimal): Preferred share percentage.
        total_shares (Decimal): Total share percentage. Derived as
            ordinary + preferred when omitted.
    """

    model_config = _MODEL_CONFIG

    name: str
    ordinary_shares: Decimal = Field(default=Decimal("0"), ge=0)
    preferred_shares: Decimal = Field(default=Decimal("0"), ge=0)
    total_shares: Decimal = Field(ge=0)

    @model_validator(mode="before")
    @classmethod
    def _derive_total_shares(cls, data: object) -> object:
        """
        Fill in total_shares from its components when the source omits it.
        """
        if not isinstance(data, dict):
            return data

        if data.get("totalShares") is not None or data.get("total_shares") is not None:
            return data

        ordinary = data.get("ordinaryShares", data.get("ordinary_shares")) or 0
        preferred = data.get("preferredShares", data.get("preferred_shares")) or 0

        try:
            total = Decimal(str(ordinary)) + Decimal(str(preferred))
        except InvalidOperation as error:
            raise ValueError(
                f"share counts must be numeric, got {ordinary!r} and {preferred!r}",
            ) from error

        return {**data, "total_shares": total}


class StockState(BaseModel):
    """
    Current market state of a stock.
    """

    model_config = _MODEL_CONFIG

    price: Decimal
    price_to_earnings: Decimal | None = None
    holders: tuple[Holder, ...] = ()


class StockEvent(BaseModel):
    """
    A dated corporate event, e.g. a dividend payout.

    The date accepts ISO strings, datetimes or unix timestamps (seconds or
    milliseconds).
    """

    model_config = _MODEL_CONFIG

    date: datetime
    amount: Decimal
    type: str


class HistoryPoint(BaseModel):
    """
    Earnings per share for one reporting period. A None value marks a period
    with no reported figure.
    """

    model_config = _MODEL_CONFIG

    period: str
    earnings_per_share: Decimal | None = None


class Stock(BaseModel):
    """
    Canonical representation of a listed stock as read by insights.

    Events and history are stored as tuples; history is ordered
    chronologically, oldest first.
    """

    model_config = _MODEL_CONFIG

    name: str = Field(min_length=1)
    business: str = ""
    current_state: StockState
    events: tuple[StockEvent, ...] = ()
    history: tuple[HistoryPoint, ...] = ()
