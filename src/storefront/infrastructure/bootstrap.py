"""Composition root — builds a ready-to-use Store.

This is the only place in the codebase that knows about seed data and
which listeners get attached. Everything else receives a Store.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from storefront.application.events import StateListener
from storefront.application.store import Store
from storefront.domain.exceptions import InvalidInput
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.product import Product
from storefront.infrastructure.logging import log_state_change

SEED_PRODUCTS: tuple[tuple[int, str, str], ...] = (
    (1, "SkyBag", "999"),
    (2, "Washing Machine", "499"),
    (3, "Water Bottle", "199"),
)


def seed_catalog() -> Catalog:
    return Catalog(
        Product.create(product_id, name, price)
        for product_id, name, price in SEED_PRODUCTS
    )


def _product_from_entry(item: dict) -> Product:
    product_id = item["id"]
    if not isinstance(product_id, int) or isinstance(product_id, bool):
        raise InvalidInput(f"Product ID must be an integer, got {product_id!r}")
    return Product.create(product_id, item["name"], item["price"])


def load_catalog(file_path: Path) -> Catalog:
    """Read a seed catalog from a JSON list of {id, name, price} objects."""
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        # ValueError covers both JSONDecodeError and UnicodeDecodeError.
        raise InvalidInput(f"Cannot read seed file {file_path}: {exc}") from exc

    if not isinstance(raw, list):
        raise InvalidInput(f"Seed file {file_path} must contain a JSON list")

    try:
        products = [_product_from_entry(item) for item in raw]
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInput(f"Malformed product entry in {file_path}: {exc}") from exc

    return Catalog(products)


def build_store(
    seed_path: Path | None = None,
    listeners: Iterable[StateListener] = (log_state_change,),
) -> Store:
    catalog = load_catalog(seed_path) if seed_path is not None else seed_catalog()
    store = Store(catalog)
    for listener in listeners:
        store.subscribe(listener)
    return store
