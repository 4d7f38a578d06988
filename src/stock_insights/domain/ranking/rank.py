# ranking/rank.py

from collections.abc import Iterable

from stock_insights.schemas import ScoredStock


def rank_scored_stocks(scored: Iterable[ScoredStock]) -> list[ScoredStock]:
    """
    Order scored stocks by positive insights, highest first.

    The sort is stable, so stocks with equal scores keep their input order.

    Returns:
        list[ScoredStock]: Newly sorted list; the input is left untouched.
    """
    return sorted(scored, key=lambda stock: stock.positive_insights, reverse=True)
