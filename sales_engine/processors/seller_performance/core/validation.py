"""
Validation — Fail-fast checks run before any aggregation work.

Only the shape of the dataset is checked here. Unknown seller ids and
SKUs inside the purchase log are not errors; the aggregation step skips them.
"""

from __future__ import annotations

from collections.abc import Mapping

from .options import AnalysisOptions

REQUIRED_COLLECTIONS = ("sellers", "products", "purchase_records")

# Accepted spellings for each strategy when options arrive as a mapping
_STRATEGY_KEYS = {
    "calculate_revenue": ("calculate_revenue", "calculateRevenue"),
    "calculate_bonus": ("calculate_bonus", "calculateBonus"),
}


class InvalidInputError(ValueError):
    """Raised when the analysis input is malformed."""


def _is_list_shaped(value) -> bool:
    return isinstance(value, (list, tuple))


def validate_sales_input(data, options) -> None:
    """
    Reject malformed input before any computation.

    Raises InvalidInputError when:
        - data is missing or not a mapping
        - sellers / products / purchase_records is not a list
        - options is not an AnalysisOptions or a mapping
        - any of the three lists is empty
    """
    if data is None:
        raise InvalidInputError("Invalid input data: dataset is missing")
    if not isinstance(data, Mapping):
        raise InvalidInputError(
            f"Invalid input data: expected a mapping, got {type(data).__name__}"
        )

    for key in REQUIRED_COLLECTIONS:
        if not _is_list_shaped(data.get(key)):
            raise InvalidInputError(f"Invalid input data: '{key}' must be a list")

    if not isinstance(options, (AnalysisOptions, Mapping)):
        raise InvalidInputError("Invalid input data: options must be an object")

    for key in REQUIRED_COLLECTIONS:
        if len(data[key]) == 0:
            raise InvalidInputError(f"Invalid input data: '{key}' is empty")


def resolve_options(options) -> AnalysisOptions:
    """
    Normalise options into an AnalysisOptions instance.

    Mappings may use snake_case or camelCase keys. Raises InvalidInputError
    if either strategy is absent or not callable.
    """
    if isinstance(options, AnalysisOptions):
        resolved = {
            "calculate_revenue": options.calculate_revenue,
            "calculate_bonus": options.calculate_bonus,
        }
    elif isinstance(options, Mapping):
        resolved = {}
        for field, keys in _STRATEGY_KEYS.items():
            resolved[field] = next(
                (options[k] for k in keys if options.get(k) is not None), None
            )
    else:
        raise InvalidInputError("Invalid input data: options must be an object")

    for field, strategy in resolved.items():
        if not callable(strategy):
            raise InvalidInputError(
                f"Invalid options: '{field}' must be a callable"
            )

    return AnalysisOptions(**resolved)
