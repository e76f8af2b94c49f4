"""Shared fixtures for the seller performance tests."""

import pytest

from .core.options import AnalysisOptions
from .factories import make_item


@pytest.fixture
def options():
    return AnalysisOptions.default()


@pytest.fixture
def sales_data():
    """
    Four sellers, three products, one orphan record.

    Expected profits: s2=15, s1=10, s3=6, s4=0.
    """
    return {
        "sellers": [
            {"id": "s1", "first_name": "Anna", "last_name": "Berg"},
            {"id": "s2", "first_name": "Carl", "last_name": "Dahl"},
            {"id": "s3", "first_name": "Eva", "last_name": "Fors"},
            {"id": "s4", "first_name": "Gus", "last_name": "Holm"},
        ],
        "products": [
            {"sku": "X", "purchase_price": 5},
            {"sku": "Y", "purchase_price": 2},
            {"sku": "Z", "purchase_price": 1},
        ],
        "purchase_records": [
            {"seller_id": "s1", "items": [make_item("X", 2, 10)]},
            {"seller_id": "s2", "items": [make_item("Y", 10, 4, 50), make_item("X", 1, 20)]},
            {"seller_id": "s3", "items": [make_item("Z", 3, 3)]},
            {"seller_id": "s9", "items": [make_item("X", 100, 100)]},
            {"seller_id": "s4", "items": [make_item("NOPE", 7, 50)]},
        ],
    }
