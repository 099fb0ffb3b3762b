"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry already-formatted values to the presentation layer, so a
renderer never touches Money or the domain model directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str  # formatted, e.g. "$999.00"


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    name: str
    quantity: int
    price: str
    line_total: str


@dataclass(frozen=True)
class SnapshotDTO:
    """Output: the whole storefront as displayed to the user."""

    version: int
    products: list[ProductDTO]
    items: list[CartLineDTO]
    count: int
    total: str
