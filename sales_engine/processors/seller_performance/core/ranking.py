"""
Ranking — Profit ordering and best-seller extraction.

Both sorts are stable descending sorts, so ties keep their prior order:
sellers keep catalog order, SKUs keep first-sold order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from ....config import settings
from ....schemas import TopProduct

if TYPE_CHECKING:
    from ..metrics.sellers import SellerStats


def rank_by_profit(stats: list[SellerStats]) -> list[SellerStats]:
    """
    Return a new list of sellers ordered by profit, highest first.

    Example:
        profits [10, 30, 10, 20] → order [30, 20, 10 (first), 10 (second)]
    """
    if not stats:
        return []

    frame = pd.DataFrame({"profit": [seller.profit for seller in stats]})
    order = frame.sort_values("profit", ascending=False, kind="stable").index

    return [stats[i] for i in order]


def extract_top_products(
    products_sold: dict[str, float],
    limit: int | None = None,
) -> list[TopProduct]:
    """
    Pick the best-selling SKUs by cumulative quantity.

    Args:
        products_sold: SKU → quantity, in first-sold order.
        limit:         Max entries. Defaults to settings.TOP_PRODUCTS_LIMIT.

    Returns:
        [TopProduct(sku="SKU_008", quantity=10), ...]
    """
    if limit is None:
        limit = settings.TOP_PRODUCTS_LIMIT
    if not products_sold:
        return []

    # Pandas only orders the SKUs; quantities come back untouched
    sold = pd.Series(products_sold)
    order = sold.sort_values(ascending=False, kind="stable").head(limit).index

    return [
        TopProduct(sku=str(sku), quantity=products_sold[sku])
        for sku in order.tolist()
    ]
