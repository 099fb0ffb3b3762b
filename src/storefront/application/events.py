"""State-change notifications published by the store."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from storefront.application.snapshot import Snapshot


@dataclass(frozen=True)
class StateChanged:
    """Emitted once per successfully applied command."""

    command: str
    before: Snapshot
    after: Snapshot

    @property
    def cart_changed(self) -> bool:
        return self.before.cart != self.after.cart

    @property
    def catalog_changed(self) -> bool:
        return len(self.before.products) != len(self.after.products)


StateListener = Callable[[StateChanged], None]
