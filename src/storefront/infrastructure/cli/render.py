"""Text rendering of snapshot DTOs."""

from __future__ import annotations

import click

from storefront.application.dto import ProductDTO, SnapshotDTO


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10}")


def display_cart(dto: SnapshotDTO) -> None:
    click.echo(f"Cart ({dto.count} items)")

    if not dto.items:
        click.echo("  Cart is empty")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.name:<20} {item.quantity:>5} "
            f"{item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Total':<34} {dto.total:>20}")


def display_snapshot(dto: SnapshotDTO) -> None:
    display_products(dto.products)
    click.echo()
    display_cart(dto)
