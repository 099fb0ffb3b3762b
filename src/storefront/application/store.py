"""Application service: the Store, owner of catalog and cart state.

Every command goes through here. The store is the only thing that
mutates the catalog or replaces the cart, and it applies each command
as one transition: read the current state, derive the next one,
install it, then tell the subscribers.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from decimal import Decimal

from storefront.application.events import StateChanged, StateListener
from storefront.application.snapshot import Snapshot
from storefront.domain.exceptions import UnknownProduct
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


class Store:
    """Sequences commands against a Catalog and a Cart.

    Build one per session and pass it to whatever issues commands;
    instances share nothing. Commands are serialized through a single
    lock, and listeners are called after it is released, so a listener
    may safely issue further commands.
    """

    def __init__(self, catalog: Catalog, cart: Cart | None = None) -> None:
        self._catalog = catalog
        self._cart = cart if cart is not None else Cart()
        self._version = 0
        self._listeners: list[StateListener] = []
        self._lock = threading.Lock()

    # --- Subscriptions --------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Queries --------------------------------------------------------------

    def get_snapshot(self) -> Snapshot:
        with self._lock:
            return self._snapshot()

    # --- Commands -------------------------------------------------------------

    def add_product(self, name: str, price: str | float | int | Decimal | Money) -> Product:
        """Register a new product.

        Raises InvalidInput for a blank name or a non-positive price;
        in that case nothing changes and nothing is published.
        """
        with self._lock:
            before = self._snapshot()
            product = self._catalog.register(name, price)
            after = self._install(self._cart)
        self._publish(StateChanged("add_product", before, after))
        return product

    def add_to_cart(self, product_id: int) -> Snapshot:
        with self._lock:
            product = self._catalog.get(product_id)
            if product is None:
                raise UnknownProduct(f"Product #{product_id} not found")
            before = self._snapshot()
            after = self._install(self._cart.add(product))
        self._publish(StateChanged("add_to_cart", before, after))
        return after

    def remove_from_cart(self, product_id: int) -> Snapshot:
        """Remove the cart line for *product_id*, if there is one."""
        with self._lock:
            before = self._snapshot()
            after = self._install(self._cart.remove(product_id))
        self._publish(StateChanged("remove_from_cart", before, after))
        return after

    # --- Internal helpers -----------------------------------------------------

    def _snapshot(self) -> Snapshot:
        return Snapshot(
            version=self._version,
            products=self._catalog.list(),
            cart=self._cart,
        )

    def _install(self, cart: Cart) -> Snapshot:
        # Caller holds the lock.
        self._cart = cart
        self._version += 1
        return self._snapshot()

    def _publish(self, event: StateChanged) -> None:
        for listener in list(self._listeners):
            listener(event)
