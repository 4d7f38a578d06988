# domain/__init__.py

from .evaluation import MalformedStockError, evaluate_stock, evaluate_stocks
from .insights import (
    DividendConstancy,
    Insight,
    InsightError,
    InsightRegistry,
    InsufficientDataError,
    PriceToEarnings,
    ProfitConstancy,
    ProfitConstancy5Years,
    ProfitConstancy10Years,
    build_registry,
    default_registry,
)
from .intake import parse_stocks
from .models import (
    EntityFailure,
    InsightSettings,
    Outcome,
    Verdict,
    VerdictSet,
    default_settings,
    settings_from_env,
)
from .ranking import project_stock, rank_scored_stocks, select_main_holder
from .report import find_verdicts
from .score import analyse_stocks, score_stocks
from .scoreboard import Scoreboard

__all__ = [
    # insights
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
    # evaluation
    "MalformedStockError",
    "evaluate_stock",
    "evaluate_stocks",
    # models
    "EntityFailure",
    "InsightSettings",
    "Outcome",
    "Verdict",
    "VerdictSet",
    "default_settings",
    "settings_from_env",
    # ranking
    "project_stock",
    "rank_scored_stocks",
    "select_main_holder",
    # scoring
    "Scoreboard",
    "analyse_stocks",
    "find_verdicts",
    "parse_stocks",
    "score_stocks",
]
