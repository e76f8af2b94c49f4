"""
Reporting — Project ranked SellerStats into the public report shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ....config import settings
from ....schemas import SellerReport

if TYPE_CHECKING:
    from ..metrics.sellers import SellerStats


def round_money(value: float, digits: int | None = None) -> float:
    """Round a monetary amount to settings.MONEY_DECIMALS places."""
    if digits is None:
        digits = settings.MONEY_DECIMALS
    return round(float(value), digits)


def project_report(ranked: list[SellerStats]) -> list[SellerReport]:
    """
    Build one SellerReport per ranked seller, preserving rank order.

    Expects bonus and top_products to be filled in already.
    """
    return [
        SellerReport(
            seller_id=seller.id,
            name=seller.name,
            revenue=round_money(seller.revenue),
            profit=round_money(seller.profit),
            sales_count=int(seller.sales_count),
            top_products=seller.top_products,
            bonus=round_money(seller.bonus),
        )
        for seller in ranked
    ]
