from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Seller(BaseModel):
    """A seller whose performance is ranked. Extra keys from the source are ignored."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    first_name: str
    last_name: str


class Product(BaseModel):
    """A catalog entry. `purchase_price` is the unit cost used for profit."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    sku: str
    name: str
    category: str
    purchase_price: float


class LineItem(BaseModel):
    """One product line inside a purchase record."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    sku: str
    sale_price: float
    quantity: int
    # Percentage (0-100), not range-checked.
    discount: float = 0.0


class PurchaseRecord(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    # Receipts exported from the shop carry their id as "receipt_id".
    id: str = Field(validation_alias=AliasChoices("id", "receipt_id"))
    seller_id: str
    total_amount: float
    items: list[LineItem] = Field(default_factory=list)


class SalesData(BaseModel):
    """The input bundle: all three collections for one analysis run."""

    model_config = ConfigDict(frozen=True)

    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


class TopProduct(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sku: str = Field(..., alias="SKU")
    # Net units; returns recorded as negative quantities pass through unchanged.
    quantity: int = Field(..., alias="Quantity")
    product_name: str = Field(..., alias="Product Name")
    category: str = Field(..., alias="Category")


class SellerReport(BaseModel):
    """
    Defines the data contract for a single row of the final leaderboard.

    Revenue, profit and bonus are rounded with Python's round(x, 2), which
    works on the binary float and rounds exact halves to even: 0.125 becomes
    0.12 and 0.375 becomes 0.38. Callers that need half-up cents must round
    the unrounded amounts themselves.
    """

    model_config = ConfigDict(populate_by_name=True)

    seller_id: str = Field(..., alias="Seller ID")
    name: str = Field(..., alias="Name")
    revenue: float = Field(..., alias="Revenue")
    profit: float = Field(..., alias="Profit")
    sales_count: int = Field(default=0, alias="Sales Count")
    top_products: list[TopProduct] = Field(default_factory=list, alias="Top Products")
    bonus: float = Field(default=0.0, alias="Bonus")
