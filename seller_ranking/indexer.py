import logging
from typing import Iterable

from .schemas import Product, Seller
from .stats import SellerStat

logger = logging.getLogger(__name__)


def seed_seller_stats(sellers: Iterable[Seller]) -> list[SellerStat]:
    """Creates one empty SellerStat per input seller, in input order."""
    return [SellerStat.from_seller(seller) for seller in sellers]


def build_seller_index(stats: Iterable[SellerStat]) -> dict[str, SellerStat]:
    """Maps seller id -> SellerStat. On duplicate ids the last one wins."""
    index: dict[str, SellerStat] = {}
    for stat in stats:
        if stat.id in index:
            logger.debug(f"Duplicate seller id {stat.id}; keeping the last entry.")
        index[stat.id] = stat
    return index


def build_product_index(products: Iterable[Product]) -> dict[str, Product]:
    """Maps SKU -> Product. On duplicate SKUs the last one wins."""
    index: dict[str, Product] = {}
    for product in products:
        if product.sku in index:
            logger.debug(f"Duplicate SKU {product.sku}; keeping the last entry.")
        index[product.sku] = product
    return index
