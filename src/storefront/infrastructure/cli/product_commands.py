"""CLI commands for the catalog."""

from __future__ import annotations

import click

from storefront.application.show_snapshot import ShowSnapshotHandler
from storefront.infrastructure.cli.context import pass_store
from storefront.infrastructure.cli.render import display_products


@click.command("products")
@pass_store
def product_list(store) -> None:
    """List all products in the catalog."""
    dto = ShowSnapshotHandler(store).handle()
    display_products(dto.products)
