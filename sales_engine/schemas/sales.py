"""
Pydantic schemas for seller performance data
"""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Input — reference catalogs and purchase records
# ---------------------------------------------------------------------------

class Seller(BaseModel):
    """Seller catalog entry"""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(..., description="Seller identifier", examples=["seller_1"])
    first_name: str = Field(..., description="Seller first name", examples=["Alexey"])
    last_name: str = Field(..., description="Seller last name", examples=["Petrov"])


class Product(BaseModel):
    """Product catalog entry, keyed by SKU"""

    model_config = ConfigDict(extra="allow", frozen=True)

    sku: str = Field(..., description="Stock-keeping unit", examples=["SKU_001"])
    purchase_price: float = Field(..., description="Unit cost basis", examples=[12.5])


class PurchaseItem(BaseModel):
    """One line item inside a purchase record"""

    model_config = ConfigDict(extra="allow")

    sku: str = Field(..., description="SKU of the sold product")
    quantity: Union[int, float] = Field(..., description="Units sold")
    sale_price: float = Field(..., description="Unit sale price before discount")
    discount: float = Field(0, description="Discount percentage (0-100)")


class PurchaseRecord(BaseModel):
    """A single sale (receipt) attributed to one seller"""

    model_config = ConfigDict(extra="allow")

    seller_id: str = Field(..., description="Identifier of the selling seller")
    items: List[PurchaseItem] = Field(default_factory=list, description="Line items")


class SalesDataset(BaseModel):
    """Complete analysis input: two catalogs plus the purchase log"""

    sellers: List[Seller] = Field(default_factory=list)
    products: List[Product] = Field(default_factory=list)
    purchase_records: List[PurchaseRecord] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Output — seller report
# ---------------------------------------------------------------------------

class TopProduct(BaseModel):
    """SKU and cumulative quantity sold by one seller"""

    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: Union[int, float]


class SellerReport(BaseModel):
    """Final per-seller performance record"""

    model_config = ConfigDict(frozen=True)

    seller_id: str = Field(..., description="Seller identifier")
    name: str = Field(..., description="Seller display name")
    revenue: float = Field(..., description="Revenue after discounts, rounded")
    profit: float = Field(..., description="Revenue minus purchase cost, rounded")
    sales_count: int = Field(..., description="Number of purchase records")
    top_products: List[TopProduct] = Field(
        default_factory=list,
        description="Up to N best-selling SKUs by quantity",
    )
    bonus: float = Field(..., description="Rank-based bonus, rounded")
