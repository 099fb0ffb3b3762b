"""Snapshot: the immutable view of store state handed to the outside."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Snapshot:
    """Catalog and cart at one instant.

    Everything a renderer needs is derived from ``products`` and
    ``cart``; nothing is cached alongside them.
    """

    version: int
    products: tuple[Product, ...]
    cart: Cart

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return self.cart.lines

    @property
    def total(self) -> Money:
        return self.cart.total

    @property
    def count(self) -> int:
        return self.cart.count
