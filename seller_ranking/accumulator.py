from typing import Iterable, Mapping

from .diagnostics import DiagnosticsSink
from .schemas import Product, PurchaseRecord
from .stats import SellerStat
from .strategies import RevenueStrategy


def accumulate_purchases(
    records: Iterable[PurchaseRecord],
    seller_index: Mapping[str, SellerStat],
    product_index: Mapping[str, Product],
    calculate_revenue: RevenueStrategy,
    diagnostics: DiagnosticsSink,
) -> None:
    """
    Walks the purchase records once and updates the matching SellerStats in place.

    - A record whose seller is unknown is skipped entirely.
    - A line item whose SKU is unknown is skipped on its own; the record still
      counts as a sale and its total amount still goes to revenue.
    """
    for record in records:
        seller = seller_index.get(record.seller_id)
        if seller is None:
            diagnostics.seller_not_found(record.seller_id, record.id)
            continue

        seller.sales_count += 1
        seller.revenue += record.total_amount

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                diagnostics.product_not_found(item.sku, record.id)
                continue

            cost = product.purchase_price * item.quantity
            revenue = calculate_revenue(item, product)
            seller.profit += revenue - cost

            seller.sold_quantities[item.sku] = (
                seller.sold_quantities.get(item.sku, 0) + item.quantity
            )
