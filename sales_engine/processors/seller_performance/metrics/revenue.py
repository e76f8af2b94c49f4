"""
Revenue & Profit — Per-line-item money formulas.

Discount is a percentage; the effective multiplier is 1 - discount / 100.
Out-of-range discounts and negative quantities are not clamped.
"""

from __future__ import annotations


def calculate_simple_revenue(item: dict, _product: dict | None = None) -> float:
    """
    Default revenue strategy: sale_price * quantity * (1 - discount / 100).

    Example:
        {"sale_price": 10, "quantity": 2, "discount": 25} → 15.0
    """
    multiplier = 1 - (item.get("discount", 0) / 100)
    return item["sale_price"] * item["quantity"] * multiplier


def calculate_cost(item: dict, product: dict) -> float:
    """Purchase cost of a line item: unit purchase price times quantity."""
    return product["purchase_price"] * item["quantity"]


def calculate_profit(revenue: float, item: dict, product: dict) -> float:
    """Profit contribution of a line item given its (strategy) revenue."""
    return revenue - calculate_cost(item, product)
