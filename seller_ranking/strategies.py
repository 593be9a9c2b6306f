"""
Default revenue and bonus strategies for the seller leaderboard.

Both are plain functions so they can be swapped out through
``AnalysisOptions`` without touching the aggregation code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping

from .exceptions import InvalidOptionsError
from .schemas import LineItem, Product

if TYPE_CHECKING:
    from .stats import SellerStat


# Receives the whole line item, sku included. Items and products are frozen
# models, so a strategy can read them but cannot change the aggregation inputs.
RevenueStrategy = Callable[[LineItem, Product], float]
BonusStrategy = Callable[[int, int, "SellerStat"], float]

# Share of profit paid out per leaderboard position
BONUS_RATES = {
    "first": 0.15,
    "runner_up": 0.10,  # ranks 1 and 2
    "last": 0.0,
    "default": 0.05,
}


def calculate_simple_revenue(item: LineItem, _product: Product) -> float:
    """Revenue of a single line: sale price times quantity, minus the discount percentage."""
    discount = 1 - (item.discount / 100)
    return item.sale_price * item.quantity * discount


def calculate_bonus_by_profit(index: int, total: int, seller: SellerStat) -> float:
    """
    Bonus in currency units for the seller at zero-based position ``index``.

    The first matching rule wins: top seller, then the two runners-up, then the
    last seller, otherwise the default rate. With only one or two sellers this
    means nobody falls into the "last" bucket.
    """
    if index == 0:
        rate = BONUS_RATES["first"]
    elif index in (1, 2):
        rate = BONUS_RATES["runner_up"]
    elif index == total - 1:
        rate = BONUS_RATES["last"]
    else:
        rate = BONUS_RATES["default"]

    return seller.profit * rate


@dataclass(frozen=True)
class AnalysisOptions:
    calculate_revenue: RevenueStrategy
    calculate_bonus: BonusStrategy

    @classmethod
    def coerce(cls, options: Any) -> "AnalysisOptions":
        """
        Accepts an ``AnalysisOptions`` or a mapping with both strategy functions.
        Mapping keys may be snake_case (``calculate_revenue``) or camelCase
        (``calculateRevenue``), as in option bundles written in JSON style.
        """
        if isinstance(options, cls):
            candidate = options
        elif isinstance(options, Mapping):
            candidate = cls(
                calculate_revenue=options.get("calculate_revenue", options.get("calculateRevenue")),
                calculate_bonus=options.get("calculate_bonus", options.get("calculateBonus")),
            )
        else:
            raise InvalidOptionsError("Options must be an AnalysisOptions or a mapping.")

        missing = [
            name
            for name in ("calculate_revenue", "calculate_bonus")
            if not callable(getattr(candidate, name))
        ]
        if missing:
            raise InvalidOptionsError(
                f"Options are missing required functions: {', '.join(missing)}"
            )
        return candidate


DEFAULT_OPTIONS = AnalysisOptions(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)
