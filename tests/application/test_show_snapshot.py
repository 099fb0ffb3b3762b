"""Tests for the Show Snapshot query and its DTO mapping."""

from decimal import Decimal

from storefront.application.show_snapshot import ShowSnapshotHandler
from storefront.application.store import Store
from storefront.domain.model.catalog import Catalog
from tests.fakes import make_product


def _store() -> Store:
    return Store(Catalog([
        make_product(1, "SkyBag", "999"),
        make_product(2, "Mug", "2.505"),
    ]))


class TestShowSnapshot:

    def test_empty_store(self):
        dto = ShowSnapshotHandler(_store()).handle()
        assert dto.version == 0
        assert dto.items == []
        assert dto.count == 0
        assert dto.total == "$0.00"
        assert [p.name for p in dto.products] == ["SkyBag", "Mug"]
        assert dto.products[0].price == "$999.00"

    def test_cart_lines_are_formatted(self):
        store = _store()
        store.add_to_cart(1)
        store.add_to_cart(1)
        store.add_to_cart(2)
        dto = ShowSnapshotHandler(store).handle()

        assert dto.count == 2
        assert dto.items[0].name == "SkyBag"
        assert dto.items[0].quantity == 2
        assert dto.items[0].line_total == "$1998.00"
        assert dto.items[1].product_id == 2

    def test_rounding_happens_only_when_formatting(self):
        store = _store()
        store.add_to_cart(2)
        store.add_to_cart(2)
        # 2 x 2.505 is exactly 5.010
        assert store.get_snapshot().total.amount == Decimal("5.010")
        assert ShowSnapshotHandler(store).handle().total == "$5.01"
