"""
Seller Performance — Revenue, profit, ranking and bonus report per seller.

Takes seller and product catalogs plus a purchase log and produces one
SellerReport per seller, ordered by profit. Revenue and bonus formulas
are injected through AnalysisOptions.
"""

from .analyzer import SalesAnalyzer, analyze_sales_data
from .core.options import AnalysisOptions
from .core.validation import InvalidInputError
from .metrics.bonus import calculate_bonus_by_profit
from .metrics.revenue import calculate_simple_revenue

__all__ = [
    "SalesAnalyzer", "analyze_sales_data", "AnalysisOptions", "InvalidInputError",
    "calculate_bonus_by_profit", "calculate_simple_revenue",
]
