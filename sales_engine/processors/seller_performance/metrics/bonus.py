"""
Bonus — Default rank-based bonus policy.

Position in the profit ranking picks the rate; profit is the base.
Branches are evaluated in order, so with a single seller rank 0 wins
over "last place".
"""

from __future__ import annotations

from ....config import settings


def calculate_bonus_by_profit(index: int, total: int, seller) -> float:
    """
    Args:
        index:  Position in the profit-descending ranking (0 = best).
        total:  Number of ranked sellers.
        seller: Anything with a numeric .profit (SellerStats).

    Returns:
        rank 0       → 15% of profit
        rank 1, 2    → 10%
        last rank    → 0
        otherwise    → 5%
    """
    if index == 0:
        return seller.profit * settings.BONUS_RATE_FIRST
    elif index in (1, 2):
        return seller.profit * settings.BONUS_RATE_PODIUM
    elif index == total - 1:
        return 0
    else:
        return seller.profit * settings.BONUS_RATE_DEFAULT
