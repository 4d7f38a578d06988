#!/usr/bin/env python3
"""
Insight Ranking Demo for stock-insights package.

This script demonstrates the analyse_stocks() function: it scores a small set
of stock documents against the default insights and prints the ranked table
followed by the per-insight verdicts of the top stock.

Pass a path to a JSON file holding a list of stock documents to rank your own
data instead of the bundled sample.
"""

import json
import logging
import sys
from pathlib import Path

from stock_insights import ScoreReport, analyse_stocks, find_verdicts

SAMPLE_DOCUMENTS = [
    {
        "name": "TAEE11",
        "business": "Electric utilities",
        "currentState": {
            "price": 35.1,
            "priceToEarnings": 7.4,
            "holders": [
                {"name": "Cemig", "ordinaryShares": 21.7, "preferredShares": 0},
                {"name": "ISA", "ordinaryShares": 14.9, "preferredShares": 0},
            ],
        },
        "events": [
            {"date": f"{year}-08-15", "amount": 1.8, "type": "dividend"}
            for year in range(2015, 2025)
        ],
        "history": [
            {"period": str(year), "earningsPerShare": 1.0 + (year - 2014) / 10}
            for year in range(2014, 2025)
        ],
    },
    {
        "name": "MGLU3",
        "business": "Retail",
        "currentState": {
            "price": 2.1,
            "priceToEarnings": -12.0,
            "holders": [{"name": "Trajano family", "totalShares": 53.1}],
        },
        "events": [{"date": "2021-03-01", "amount": 0.01, "type": "dividend"}],
        "history": [
            {"period": str(year), "earningsPerShare": eps}
            for year, eps in zip(range(2019, 2024), [0.06, 0.02, 0.01, -0.06, -0.17])
        ],
    },
    {
        "name": "EMPTY",
        "business": "Holding",
    },
]


def print_separator(title: str) -> None:
    """Print a formatted section separator."""
    print(f"\n{'=' * 60}")
    print(f" {title}")
    print(f"{'=' * 60}")


def load_documents(argv: list[str]) -> list[dict]:
    """Load documents from the JSON file named on the command line, if any."""
    if len(argv) < 2:
        return SAMPLE_DOCUMENTS
    return json.loads(Path(argv[1]).read_text())


def print_rankings(report: ScoreReport) -> None:
    """Print the ranked stock table."""
    print_separator("🏆 RANKED STOCKS")
    print(f"   {'Name':10} {'Price':>8} {'Main holder':24} {'Div/5yr':>9} Score")
    for stock in report.rankings:
        holder = (
            f"{stock.main_holder.name} ({stock.main_holder.total_shares}%)"
            if stock.main_holder
            else "N/A"
        )
        print(
            f"   {stock.name:10} {stock.price:>8} {holder[:24]:24} "
            f"{stock.total_dividends_last_5_years:>9.4f} {stock.insights_score}"
        )

    for failure in report.failures:
        print(f"   ⚠️  {failure.name or '<unnamed>'}: {failure.reason}")


def print_top_verdicts(report: ScoreReport) -> None:
    """Print the verdicts of the best ranked stock."""
    if not report.rankings:
        return

    top = report.rankings[0]
    print_separator(f"🔬 INSIGHTS FOR {top.name}")
    for verdict in find_verdicts(report, top.name) or ():
        suffix = f" ({verdict.detail})" if verdict.detail else ""
        print(f"   {verdict.title:30} {verdict.outcome}{suffix}")


def main() -> None:
    """Main demonstration function."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    print("🚀 STOCK INSIGHTS - RANKING DEMONSTRATION")
    report = analyse_stocks(load_documents(sys.argv))

    print_rankings(report)
    print_top_verdicts(report)

    print_separator("✅ RANKING COMPLETE")
    print(f"• {report.stocks_scored:,} stocks scored, {report.stocks_failed:,} failed")
    print(f"• Insights applied: {', '.join(report.insights_applied)}")


if __name__ == "__main__":
    main()
