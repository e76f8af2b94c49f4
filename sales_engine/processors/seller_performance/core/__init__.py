"""
Core utilities for seller performance processing.

Modules:
    options     — Injectable revenue / bonus strategy bundle
    validation  — Input shape checks, InvalidInputError
    indexing    — Seller and product lookup indexes
    ranking     — Profit ranking and top-products extraction
    reporting   — Projection of ranked stats into SellerReport records
"""
