"""
Entry point of the leaderboard core.

``analyze_sales_data`` validates its two inputs, then runs the stages in
order: seed + index, accumulate purchases, rank, and build the reports.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from .accumulator import accumulate_purchases
from .diagnostics import DiagnosticsSink, LoggingDiagnostics
from .exceptions import InvalidInputError
from .indexer import build_product_index, build_seller_index, seed_seller_stats
from .ranker import finalize_rankings, rank_sellers, to_report
from .schemas import SalesData, SellerReport
from .strategies import AnalysisOptions

logger = logging.getLogger(__name__)

REQUIRED_COLLECTIONS = ("sellers", "products", "purchase_records")


def validate_sales_data(data: Any) -> SalesData:
    """Checks that all three collections are present and non-empty, and shape-checks the records."""
    if isinstance(data, SalesData):
        payload = data.model_dump()
    elif isinstance(data, Mapping):
        payload = data
    else:
        raise InvalidInputError("Sales data must be a mapping with sellers, products and purchase_records.")

    for name in REQUIRED_COLLECTIONS:
        collection = payload.get(name)
        if (
            not isinstance(collection, Sequence)
            or isinstance(collection, (str, bytes))
            or len(collection) == 0
        ):
            raise InvalidInputError(f"'{name}' must be a non-empty list.")

    if isinstance(data, SalesData):
        return data

    try:
        return SalesData.model_validate(
            {name: list(payload[name]) for name in REQUIRED_COLLECTIONS}
        )
    except ValidationError as e:
        raise InvalidInputError(f"Sales data has malformed records:\n{e}") from e


def analyze_sales_data(
    data: Any,
    options: Any,
    diagnostics: DiagnosticsSink | None = None,
) -> list[SellerReport]:
    """
    Builds the seller leaderboard, best seller first.

    Raises ``InvalidInputError`` or ``InvalidOptionsError`` before doing any
    work. Unknown sellers or SKUs in purchase records are reported to
    ``diagnostics`` (warnings on the module logger by default) and skipped.
    """
    sales_data = validate_sales_data(data)
    opts = AnalysisOptions.coerce(options)
    diagnostics = diagnostics or LoggingDiagnostics()

    stats = seed_seller_stats(sales_data.sellers)
    seller_index = build_seller_index(stats)
    product_index = build_product_index(sales_data.products)

    accumulate_purchases(
        sales_data.purchase_records,
        seller_index,
        product_index,
        opts.calculate_revenue,
        diagnostics,
    )

    ranked = rank_sellers(stats)
    finalize_rankings(ranked, product_index, opts.calculate_bonus)

    logger.debug(f"Ranked {len(ranked)} sellers from {len(sales_data.purchase_records)} records.")
    return [to_report(stat) for stat in ranked]
