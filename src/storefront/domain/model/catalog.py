"""Catalog aggregate.

The catalog is append-only: products are registered, looked up and
listed, but never edited or removed. It is also the only place that
hands out product identifiers.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from storefront.domain.exceptions import InvalidInput
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


class Catalog:
    """Ordered set of products keyed by id."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[int, Product] = {}
        for product in products:
            if product.id in self._products:
                raise InvalidInput(f"Duplicate product ID {product.id} in catalog")
            self._products[product.id] = product

        # Generated ids start above every seeded one so they can't collide.
        self._next_id = max(self._products, default=0) + 1

    def __len__(self) -> int:
        return len(self._products)

    def register(self, name: str, price: str | float | int | Decimal | Money) -> Product:
        """Add a new product to the catalog.

        Validation runs before an id is drawn, so a rejected product
        does not burn an identifier.
        """
        product = Product.create(self._next_id, name, price)
        self._products[product.id] = product
        self._next_id += 1
        return product

    def list(self) -> tuple[Product, ...]:
        return tuple(self._products.values())

    def get(self, product_id: int) -> Product | None:
        return self._products.get(product_id)
