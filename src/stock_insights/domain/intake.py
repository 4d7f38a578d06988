# domain/intake.py

import logging
from collections.abc import Iterable, Mapping

from pydantic import ValidationError

from stock_insights.schemas import Stock

from .models import EntityFailure

logger = logging.getLogger(__name__)


def parse_stocks(
    documents: Iterable[Mapping[str, object]],
) -> tuple[list[Stock], list[EntityFailure]]:
    """
    Validate raw stock documents into Stock models.

    Documents that fail validation are logged and reported as failures;
    the remaining documents are still parsed.

    Args:
        documents: Raw mappings as delivered by the document store, with
            camelCase or snake_case keys.

    Returns:
        tuple[list[Stock], list[EntityFailure]]: Valid stocks in input order,
            and a failure for each rejected document.
    """
    stocks: list[Stock] = []
    failures: list[EntityFailure] = []

    for document in documents:
        try:
            stocks.append(Stock.model_validate(document))
        except ValidationError as error:
            name = document.get("name") if isinstance(document, Mapping) else None
            failures.append(
                EntityFailure(
                    name=name if isinstance(name, str) else None,
                    reason=f"failed validation ({error.error_count()} errors)",
                ),
            )
            logger.warning("Skipping stock document %s: failed validation", name)

    logger.info(
        "Parsed %d stocks (skipped %d).",
        len(stocks),
        len(failures),
    )

    return stocks, failures
