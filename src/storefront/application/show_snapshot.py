"""Application service: Show Snapshot use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartLineDTO, ProductDTO, SnapshotDTO
from storefront.application.snapshot import Snapshot
from storefront.application.store import Store


class ShowSnapshotHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self) -> SnapshotDTO:
        return self._to_dto(self._store.get_snapshot())

    @staticmethod
    def _to_dto(snapshot: Snapshot) -> SnapshotDTO:
        return SnapshotDTO(
            version=snapshot.version,
            products=[
                ProductDTO(id=p.id, name=p.name, price=str(p.price))
                for p in snapshot.products
            ],
            items=[
                CartLineDTO(
                    product_id=line.product_id,
                    name=line.name,
                    quantity=line.quantity.value,
                    price=str(line.price),
                    line_total=str(line.line_total),
                )
                for line in snapshot.lines
            ],
            count=snapshot.count,
            total=str(snapshot.total),
        )
