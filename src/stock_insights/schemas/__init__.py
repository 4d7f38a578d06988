# schemas/__init__.py

from .scoring import FailureOutput, ScoredStock, ScoreReport, VerdictOutput
from .stock import HistoryPoint, Holder, Stock, StockEvent, StockState

__all__ = [
    # stock
    "HistoryPoint",
    "Holder",
    "Stock",
    "StockEvent",
    "StockState",
    # scoring
    "FailureOutput",
    "ScoredStock",
    "ScoreReport",
    "VerdictOutput",
]
