# stock_insights/__init__.py

from .domain import (
    InsightSettings,
    Scoreboard,
    analyse_stocks,
    build_registry,
    default_registry,
    find_verdicts,
    score_stocks,
)
from .schemas import ScoredStock, ScoreReport, Stock

__all__ = [
    "analyse_stocks",
    "build_registry",
    "default_registry",
    "find_verdicts",
    "score_stocks",
    "InsightSettings",
    "Scoreboard",
    "ScoredStock",
    "ScoreReport",
    "Stock",
]
