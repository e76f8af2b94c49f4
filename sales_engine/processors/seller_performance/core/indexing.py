"""
Indexing — O(1) lookup tables used during the aggregation fold.

A missing key is a normal "not found" outcome; callers use dict.get().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..metrics.sellers import SellerStats


def build_seller_index(stats: list[SellerStats]) -> dict[str, SellerStats]:
    """Map seller id → its mutable SellerStats record."""
    return {seller.id: seller for seller in stats}


def build_product_index(products: list[dict]) -> dict[str, dict]:
    """Map SKU → product catalog entry. Later duplicates win."""
    return {product["sku"]: product for product in products}
