"""
Sales Analyzer — The single entry point for seller performance reporting.

Runs the pipeline strictly forward:
    validate → index → aggregate → rank → bonus / top products → report

Usage:
    analyzer = SalesAnalyzer()
    report = analyzer.analyze(data, AnalysisOptions.default())
"""

from __future__ import annotations

import logging

from ...schemas import SalesDataset, SellerReport
from .core.indexing import build_product_index, build_seller_index
from .core.options import AnalysisOptions
from .core.ranking import extract_top_products, rank_by_profit
from .core.reporting import project_report
from .core.validation import resolve_options, validate_sales_input
from .metrics.sellers import accumulate_purchases, init_seller_stats

logger = logging.getLogger(__name__)


class SalesAnalyzer:
    """
    Turns sellers, products and purchase records into a ranked report.

    Holds no state between calls; one instance can serve any number of
    independent datasets.
    """

    def analyze(self, data, options) -> list[SellerReport]:
        """
        Compute revenue, profit, sales count, top products and bonus per seller.

        Args:
            data:    {"sellers": [...], "products": [...], "purchase_records": [...]}
                     or a SalesDataset.
            options: AnalysisOptions, or a mapping with calculate_revenue /
                     calculate_bonus callables.

        Returns:
            SellerReport list ordered by profit, highest first.

        Raises:
            InvalidInputError: before any aggregation, if the input is malformed.
        """
        if isinstance(data, SalesDataset):
            data = data.model_dump()

        validate_sales_input(data, options)
        strategies: AnalysisOptions = resolve_options(options)

        # --- Index reference data ---
        stats = init_seller_stats(data["sellers"])
        seller_index = build_seller_index(stats)
        product_index = build_product_index(data["products"])

        # --- Fold purchase records ---
        accumulate_purchases(
            data["purchase_records"],
            seller_index,
            product_index,
            strategies.calculate_revenue,
        )

        # --- Rank, reward, summarise ---
        ranked = rank_by_profit(stats)
        total = len(ranked)
        for index, seller in enumerate(ranked):
            seller.bonus = strategies.calculate_bonus(index, total, seller)
            seller.top_products = extract_top_products(seller.products_sold)

        report = project_report(ranked)
        logger.info("Seller report ready: %d sellers ranked by profit", len(report))
        return report


def analyze_sales_data(data, options) -> list[SellerReport]:
    """Functional alias for SalesAnalyzer().analyze(data, options)."""
    return SalesAnalyzer().analyze(data, options)
