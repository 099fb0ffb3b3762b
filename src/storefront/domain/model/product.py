"""Product entity.

Products are owned by the catalog. Once registered they never change:
a new price means a new product, and cart lines keep their own copy
of the name and price anyway.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import InvalidInput
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A purchasable item in the catalog.

    Use ``Product.create()`` for anything coming from user input. The
    ``__init__`` stays plain so already-validated products can be
    rebuilt without going through the checks again.
    """

    id: int
    name: str
    price: Money

    @staticmethod
    def create(
        product_id: int,
        name: str,
        price: str | float | int | Decimal | Money,
    ) -> Product:
        """Build a product, enforcing name and price rules."""
        if not isinstance(name, str) or not name.strip():
            raise InvalidInput("Product name is required")

        money = price if isinstance(price, Money) else Money.of(price)
        if money.is_zero:
            raise InvalidInput(f"Product price must be greater than zero, got {price!r}")

        return Product(id=product_id, name=name.strip(), price=money)
