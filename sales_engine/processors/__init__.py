"""
Processors — Source-specific data pipelines.

Packages:
    seller_performance — Seller revenue, profit, ranking and bonus report
"""
