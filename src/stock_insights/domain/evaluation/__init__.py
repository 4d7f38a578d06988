# evaluation/__init__.py

from .evaluate import MalformedStockError, evaluate_stock, evaluate_stocks

__all__ = [
    "MalformedStockError",
    "evaluate_stock",
    "evaluate_stocks",
]
