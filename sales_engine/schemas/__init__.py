"""
Pydantic schemas for sales input data and the seller report
"""

from .sales import (
    Seller, Product, PurchaseItem, PurchaseRecord, SalesDataset,
    TopProduct, SellerReport,
)

__all__ = [
    # Input schemas
    "Seller", "Product", "PurchaseItem", "PurchaseRecord", "SalesDataset",
    # Report schemas
    "TopProduct", "SellerReport",
]
