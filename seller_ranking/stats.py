from dataclasses import dataclass, field

from .schemas import Seller, TopProduct


@dataclass
class SellerStat:
    """Running totals for one seller during a single leaderboard run."""

    id: str
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    sold_quantities: dict[str, int] = field(default_factory=dict)  # SKU -> units
    bonus: float = 0.0
    top_products: list[TopProduct] = field(default_factory=list)

    @classmethod
    def from_seller(cls, seller: Seller) -> "SellerStat":
        return cls(id=seller.id, name=f"{seller.first_name} {seller.last_name}")
