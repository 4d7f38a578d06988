# domain/test_score.py

import json
from datetime import date

import pytest

from stock_insights.domain.insights import Insight, InsightRegistry
from stock_insights.domain.models import InsightSettings
from stock_insights.domain.report import find_verdicts
from stock_insights.domain.score import analyse_stocks, score_stocks
from stock_insights.schemas import ScoreReport, Stock

pytestmark = pytest.mark.unit

_SETTINGS = InsightSettings(reference_date=date(2024, 6, 1))


class _PositiveFor(Insight):
    """
    Holds for stocks whose name is in the given set.
    """

    def __init__(self, key: str, names: set[str]) -> None:
        self.key = key
        self.title = key
        self.names = names

    async def verify(self, stock: Stock) -> bool:
        return stock.name in self.names


def _stock(name: str) -> Stock:
    return Stock(name=name, current_state={"price": 10})


def _document(name: str, years: range, eps: list[float], pe: float) -> dict:
    return {
        "name": name,
        "business": "Utilities",
        "currentState": {
            "price": 20,
            "priceToEarnings": pe,
            "holders": [{"name": "State", "totalShares": 51}],
        },
        "events": [
            {"date": f"{year}-06-30", "amount": 1, "type": "dividend"} for year in years
        ],
        "history": [
            {"period": str(2014 + index), "earningsPerShare": value}
            for index, value in enumerate(eps)
        ],
    }


async def test_score_stocks_ranks_by_positive_count() -> None:
    """
    ARRANGE: stocks with positive counts 2, 4, 1 out of 4
    ACT:     score_stocks
    ASSERT:  ranked 4, 2, 1
    """
    registry = InsightRegistry(
        [
            _PositiveFor("a", {"TWO", "FOUR", "ONE"}),
            _PositiveFor("b", {"TWO", "FOUR"}),
            _PositiveFor("c", {"FOUR"}),
            _PositiveFor("d", {"FOUR"}),
        ],
    )
    stocks = [_stock("TWO"), _stock("FOUR"), _stock("ONE")]

    actual = await score_stocks(stocks, _SETTINGS, registry)

    assert [stock.insights_score for stock in actual.rankings] == ["4/4", "2/4", "1/4"]


async def test_score_stocks_ties_keep_input_order() -> None:
    """
    ARRANGE: three stocks with equal scores
    ACT:     score_stocks
    ASSERT:  input order preserved
    """
    registry = InsightRegistry([_PositiveFor("a", set())])
    stocks = [_stock("C"), _stock("A"), _stock("B")]

    actual = await score_stocks(stocks, _SETTINGS, registry)

    assert [stock.name for stock in actual.rankings] == ["C", "A", "B"]


async def test_score_stocks_reports_malformed_stock() -> None:
    """
    ARRANGE: malformed stock alongside a valid one
    ACT:     score_stocks
    ASSERT:  one scored, one failed
    """
    registry = InsightRegistry([_PositiveFor("a", {"OK"})])
    malformed = Stock.model_construct(name="BROKEN", current_state=None)

    actual = await score_stocks([malformed, _stock("OK")], _SETTINGS, registry)

    assert (actual.stocks_scored, actual.failures[0].name) == (1, "BROKEN")


async def test_score_stocks_verdicts_keyed_by_name() -> None:
    """
    ARRANGE: one stock, two insights
    ACT:     score_stocks then find_verdicts
    ASSERT:  verdict outcomes in registry order
    """
    registry = InsightRegistry(
        [_PositiveFor("a", {"X"}), _PositiveFor("b", set())],
    )

    report = await score_stocks([_stock("X")], _SETTINGS, registry)
    actual = find_verdicts(report, "X")

    assert [verdict.outcome for verdict in actual] == ["positive", "negative"]


async def test_score_stocks_unknown_name_has_no_verdicts() -> None:
    """
    ARRANGE: report for one stock
    ACT:     find_verdicts with another name
    ASSERT:  None
    """
    registry = InsightRegistry([_PositiveFor("a", {"X"})])

    report = await score_stocks([_stock("X")], _SETTINGS, registry)

    assert find_verdicts(report, "Y") is None


async def test_score_stocks_uses_default_registry() -> None:
    """
    ARRANGE: no registry supplied
    ACT:     score_stocks
    ASSERT:  four standard insights applied
    """
    actual = await score_stocks([_stock("X")], _SETTINGS)

    assert len(actual.insights_applied) == 4


async def test_score_stocks_empty_input() -> None:
    """
    ARRANGE: no stocks
    ACT:     score_stocks
    ASSERT:  empty rankings
    """
    actual = await score_stocks([], _SETTINGS)

    assert actual.rankings == ()


def test_analyse_stocks_end_to_end() -> None:
    """
    ARRANGE: a constant payer with growing EPS and a weak stock
    ACT:     analyse_stocks with default insights
    ASSERT:  strong stock ranked first with 4/4
    """
    documents = [
        _document("WEAK", range(2022, 2024), [1.0, 0.8, 0.9, 0.7, 0.6], 45),
        _document("STRONG", range(2015, 2024), [float(n) for n in range(1, 11)], 8),
    ]

    actual = analyse_stocks(documents, _SETTINGS)

    assert [(stock.name, stock.insights_score) for stock in actual.rankings] == [
        ("STRONG", "4/4"),
        ("WEAK", "0/4"),
    ]


def test_analyse_stocks_short_history_is_indeterminate() -> None:
    """
    ARRANGE: stock with five years of history
    ACT:     analyse_stocks
    ASSERT:  ten year profit constancy verdict is indeterminate
    """
    documents = [_document("NEW", range(2019, 2024), [1, 2, 3, 4, 5], 10)]

    report = analyse_stocks(documents, _SETTINGS)
    actual = {verdict.insight: verdict.outcome for verdict in report.verdicts["NEW"]}

    assert actual["profit_constancy_10y"] == "indeterminate"


def test_analyse_stocks_includes_intake_failures() -> None:
    """
    ARRANGE: one valid and one malformed document
    ACT:     analyse_stocks
    ASSERT:  one failure reported
    """
    documents = [
        _document("OK", range(2019, 2024), [1, 2, 3, 4, 5], 10),
        {"name": "BROKEN"},
    ]

    actual = analyse_stocks(documents, _SETTINGS)

    assert (actual.stocks_scored, actual.stocks_failed) == (1, 1)


def test_analyse_stocks_report_is_json_serialisable() -> None:
    """
    ARRANGE: one valid document
    ACT:     analyse_stocks then dump as JSON
    ASSERT:  round trips through ScoreReport
    """
    documents = [_document("OK", range(2019, 2024), [1, 2, 3, 4, 5], 10)]

    report = analyse_stocks(documents, _SETTINGS)
    payload = json.dumps(report.model_dump(mode="json"))

    assert ScoreReport.model_validate_json(payload).model_dump() == report.model_dump()
