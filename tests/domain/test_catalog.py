"""Unit tests for the Catalog aggregate."""

import pytest

from storefront.domain.exceptions import InvalidInput
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.value_objects import Money
from tests.fakes import make_product


def _seeded() -> Catalog:
    return Catalog([
        make_product(1, "SkyBag", "999"),
        make_product(2, "Washing Machine", "499"),
        make_product(3, "Water Bottle", "199"),
    ])


class TestCatalogSeeding:

    def test_empty_catalog(self):
        catalog = Catalog()
        assert catalog.list() == ()
        assert len(catalog) == 0

    def test_list_preserves_insertion_order(self):
        assert [p.name for p in _seeded().list()] == [
            "SkyBag", "Washing Machine", "Water Bottle",
        ]

    def test_duplicate_ids_rejected(self):
        with pytest.raises(InvalidInput, match="Duplicate product ID 1"):
            Catalog([make_product(1, "A"), make_product(1, "B")])


class TestCatalogRegister:

    def test_register_appends_and_returns_product(self):
        catalog = _seeded()
        mug = catalog.register("Mug", "10")
        assert mug.name == "Mug"
        assert mug.price == Money.of("10")
        assert catalog.list()[-1] == mug
        assert catalog.get(mug.id) == mug

    def test_generated_id_never_collides_with_seed(self):
        catalog = Catalog([make_product(7, "Seven"), make_product(2, "Two")])
        assert catalog.register("New", "1").id == 8

    def test_ids_are_unique_across_many_registrations(self):
        catalog = _seeded()
        for i in range(25):
            catalog.register(f"Item {i}", i + 1)
        ids = [p.id for p in catalog.list()]
        assert len(ids) == len(set(ids)) == 28

    def test_register_does_not_touch_existing_products(self):
        catalog = _seeded()
        before = catalog.list()
        catalog.register("Mug", "10")
        assert catalog.list()[: len(before)] == before

    def test_list_is_a_snapshot(self):
        catalog = _seeded()
        listed = catalog.list()
        catalog.register("Mug", "10")
        assert len(listed) == 3
        assert len(catalog.list()) == 4

    def test_empty_name_rejected(self):
        catalog = _seeded()
        with pytest.raises(InvalidInput):
            catalog.register("", 5)
        assert len(catalog) == 3

    @pytest.mark.parametrize("price", [0, "-1", "abc", "NaN", "inf"])
    def test_bad_price_rejected(self, price):
        catalog = _seeded()
        with pytest.raises(InvalidInput):
            catalog.register("Mug", price)
        assert len(catalog) == 3

    def test_rejected_register_consumes_no_id(self):
        catalog = _seeded()
        with pytest.raises(InvalidInput):
            catalog.register("", 5)
        assert catalog.register("Mug", 10).id == 4


class TestCatalogGet:

    def test_get_existing(self):
        assert _seeded().get(2).name == "Washing Machine"

    def test_get_missing_returns_none(self):
        assert _seeded().get(99) is None
