"""
Options — The pluggable pricing policy for one analysis run.

Both strategies are plain callables:
    calculate_revenue(item, product)       -> float
    calculate_bonus(index, total, seller)  -> float
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

RevenueStrategy = Callable[[dict, dict], float]
BonusStrategy = Callable[[int, int, Any], float]


@dataclass(frozen=True)
class AnalysisOptions:
    calculate_revenue: RevenueStrategy
    calculate_bonus: BonusStrategy

    @classmethod
    def default(cls) -> "AnalysisOptions":
        """Simple discounted revenue plus the profit-rank bonus policy."""
        from ..metrics.bonus import calculate_bonus_by_profit
        from ..metrics.revenue import calculate_simple_revenue

        return cls(
            calculate_revenue=calculate_simple_revenue,
            calculate_bonus=calculate_bonus_by_profit,
        )
