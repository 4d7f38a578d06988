# insights/__init__.py

from .base import Insight
from .dividend_constancy import DividendConstancy
from .errors import InsightError, InsufficientDataError
from .price_to_earnings import PriceToEarnings
from .profit_constancy import (
    ProfitConstancy,
    ProfitConstancy5Years,
    ProfitConstancy10Years,
)
from .registry import (
    INSIGHT_FACTORIES,
    InsightRegistry,
    build_registry,
    default_registry,
)

__all__ = [
    "INSIGHT_FACTORIES",
    "DividendConstancy",
    "Insight",
    "InsightError",
    "InsightRegistry",
    "InsufficientDataError",
    "PriceToEarnings",
    "ProfitConstancy",
    "ProfitConstancy5Years",
    "ProfitConstancy10Years",
    "build_registry",
    "default_registry",
]
