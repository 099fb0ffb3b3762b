"""Cart aggregate.

The cart is an immutable value: ``add`` and ``remove`` return a new
Cart and leave the receiver untouched. That is what lets the store
publish before/after snapshots without copying anything.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """One aggregated entry in the cart.

    ``name`` and ``price`` are copied from the product when the line is
    first added; later catalog changes never reach an existing line.
    """

    product_id: int
    name: str
    price: Money  # snapshot taken at add time
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass(frozen=True)
class Cart:
    """Ordered, quantity-aggregated selection of products.

    Holds at most one line per product id. Line order is the order in
    which products were first added.
    """

    lines: tuple[CartLine, ...] = ()

    # --- Commands (return a new Cart) -----------------------------------------

    def add(self, product: Product) -> Cart:
        """Merge one unit of *product* into the cart.

        An existing line is incremented where it stands; otherwise a new
        line with quantity 1 goes to the end.
        """
        if self.find(product.id) is None:
            line = CartLine(
                product_id=product.id,
                name=product.name,
                price=product.price,
                quantity=Quantity(1),
            )
            return Cart(self.lines + (line,))

        return Cart(tuple(
            replace(line, quantity=line.quantity.increment())
            if line.product_id == product.id
            else line
            for line in self.lines
        ))

    def remove(self, product_id: int) -> Cart:
        """Drop the line for *product_id*. Unknown ids are a no-op."""
        if self.find(product_id) is None:
            return self
        return Cart(tuple(line for line in self.lines if line.product_id != product_id))

    # --- Queries --------------------------------------------------------------

    def find(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def count(self) -> int:
        """Number of distinct lines, not units."""
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines
