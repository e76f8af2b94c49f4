"""
sales_engine — Seller performance reporting engine.

Submodules:
    - config: Environment-driven settings (rates, limits, rounding)
    - schemas: Pydantic models for sales input and the seller report
    - processors: Source-specific data pipelines
"""
