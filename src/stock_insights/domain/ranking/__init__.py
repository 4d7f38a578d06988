# ranking/__init__.py

from .project import project_stock, select_main_holder, total_dividends
from .rank import rank_scored_stocks

__all__ = [
    "project_stock",
    "rank_scored_stocks",
    "select_main_holder",
    "total_dividends",
]
