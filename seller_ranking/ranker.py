from typing import Mapping

from . import settings
from .schemas import Product, SellerReport, TopProduct
from .stats import SellerStat
from .strategies import BonusStrategy


def _name_key(name: str) -> tuple[str, str]:
    """Case-insensitive first; for names equal up to case, lowercase sorts first."""
    return name.casefold(), name.swapcase()


def ranking_key(stat: SellerStat) -> tuple:
    """Profit, revenue and sales count descending, then name ascending."""
    return (-stat.profit, -stat.revenue, -stat.sales_count, _name_key(stat.name))


def rank_sellers(stats: list[SellerStat]) -> list[SellerStat]:
    # sorted() is stable, so exact ties keep their input order
    return sorted(stats, key=ranking_key)


def top_products(
    sold_quantities: Mapping[str, int],
    product_index: Mapping[str, Product],
    limit: int = settings.TOP_PRODUCTS_LIMIT,
) -> list[TopProduct]:
    """Best-selling SKUs by quantity. Equal quantities keep first-sold order."""
    entries = []
    for sku, quantity in sold_quantities.items():
        product = product_index.get(sku)
        entries.append(
            TopProduct(
                sku=sku,
                quantity=quantity,
                product_name=product.name if product else sku,
                category=product.category if product else settings.UNKNOWN_CATEGORY,
            )
        )

    entries.sort(key=lambda entry: entry.quantity, reverse=True)
    return entries[:limit]


def finalize_rankings(
    ranked: list[SellerStat],
    product_index: Mapping[str, Product],
    calculate_bonus: BonusStrategy,
) -> None:
    """Assigns the bonus and top products of every seller, in rank order."""
    total = len(ranked)
    for index, stat in enumerate(ranked):
        stat.bonus = calculate_bonus(index, total, stat)
        stat.top_products = top_products(stat.sold_quantities, product_index)


def to_report(stat: SellerStat) -> SellerReport:
    return SellerReport(
        seller_id=stat.id,
        name=stat.name,
        revenue=round(stat.revenue, 2),
        profit=round(stat.profit, 2),
        sales_count=stat.sales_count,
        top_products=stat.top_products,
        bonus=round(stat.bonus, 2),
    )
