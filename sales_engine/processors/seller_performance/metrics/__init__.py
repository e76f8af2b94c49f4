"""
Metrics — Pure-function business-logic modules for seller performance.

No I/O, no side effects beyond the SellerStats builders they are handed.

Modules:
    revenue  — Discounted revenue, purchase cost and profit per line item
    bonus    — Default rank-based bonus policy
    sellers  — SellerStats builder and the purchase-record fold
"""
