# _utils/__init__.py

from ._windows import dividend_events, trailing_years

__all__ = [
    "dividend_events",
    "trailing_years",
]
