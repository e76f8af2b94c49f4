"""
Seller Aggregation — Fold purchase records into per-seller running totals.

Public API:
    init_seller_stats(sellers)                              -> list[SellerStats]
    accumulate_purchases(records, sellers, products, rev)   -> int
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ....schemas import TopProduct
from ..core.options import RevenueStrategy
from .revenue import calculate_profit

logger = logging.getLogger(__name__)


@dataclass
class SellerStats:
    """Mutable per-seller accumulator; read-only once ranking starts."""

    id: str
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    products_sold: dict = field(default_factory=dict)

    # Filled in by the ranking stage
    bonus: float = 0.0
    top_products: list[TopProduct] = field(default_factory=list)


def init_seller_stats(sellers: list[dict]) -> list[SellerStats]:
    """One zeroed SellerStats per catalog seller, in catalog order."""
    return [
        SellerStats(
            id=seller["id"],
            name=f"{seller['first_name']} {seller['last_name']}",
        )
        for seller in sellers
    ]


def accumulate_purchases(
    purchase_records: list[dict],
    seller_index: dict[str, SellerStats],
    product_index: dict[str, dict],
    calculate_revenue: RevenueStrategy,
) -> int:
    """
    Add every purchase record to its seller's running totals.

    - Unknown seller_id: whole record skipped, not counted.
    - Known seller: sales_count += 1, even if no line item is usable.
    - Unknown SKU: that line item skipped.

    Returns the number of records attributed to a known seller.
    """
    attributed = 0
    skipped_items = 0

    for record in purchase_records:
        seller = seller_index.get(record.get("seller_id"))
        if seller is None:
            logger.debug("Skipping purchase record for unknown seller %r", record.get("seller_id"))
            continue

        seller.sales_count += 1
        attributed += 1

        for item in record.get("items") or []:
            product = product_index.get(item.get("sku"))
            if product is None:
                skipped_items += 1
                logger.debug("Skipping line item with unknown SKU %r", item.get("sku"))
                continue

            revenue = calculate_revenue(item, product)
            seller.revenue += revenue
            seller.profit += calculate_profit(revenue, item, product)

            sku = item["sku"]
            if sku not in seller.products_sold:
                seller.products_sold[sku] = 0
            seller.products_sold[sku] += item["quantity"]

    logger.info(
        "Aggregated %d/%d purchase records (%d unknown SKU line items skipped)",
        attributed, len(purchase_records), skipped_items,
    )
    return attributed
