"""CLI command that plays a shopping session against one Store.

A session script holds one command per line::

    add-product "Coffee Mug" 10
    add-to-cart 4
    remove-from-cart 1
    show

Arguments are shell-quoted. Blank lines and ``#`` comments are ignored.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable
from typing import TextIO

import click

from storefront.application.show_snapshot import ShowSnapshotHandler
from storefront.application.store import Store
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import pass_store
from storefront.infrastructure.cli.render import display_snapshot


def _parse_id(raw: str, lineno: int) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(
            f"Line {lineno}: invalid product ID '{raw}'."
        )


def _add_product(store: Store, args: list[str], lineno: int) -> None:
    if len(args) != 2:
        raise click.BadParameter(
            f"Line {lineno}: expected 'add-product NAME PRICE'."
        )
    product = store.add_product(name=args[0], price=args[1])
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


def _add_to_cart(store: Store, args: list[str], lineno: int) -> None:
    if len(args) != 1:
        raise click.BadParameter(f"Line {lineno}: expected 'add-to-cart ID'.")
    snapshot = store.add_to_cart(_parse_id(args[0], lineno))
    click.echo(f"Added to cart  ({snapshot.count} items, total {snapshot.total})")


def _remove_from_cart(store: Store, args: list[str], lineno: int) -> None:
    if len(args) != 1:
        raise click.BadParameter(f"Line {lineno}: expected 'remove-from-cart ID'.")
    snapshot = store.remove_from_cart(_parse_id(args[0], lineno))
    click.echo(f"Removed from cart  ({snapshot.count} items, total {snapshot.total})")


def _show(store: Store, args: list[str], lineno: int) -> None:
    if args:
        raise click.BadParameter(f"Line {lineno}: 'show' takes no arguments.")
    display_snapshot(ShowSnapshotHandler(store).handle())


_COMMANDS: dict[str, Callable[[Store, list[str], int], None]] = {
    "add-product": _add_product,
    "add-to-cart": _add_to_cart,
    "remove-from-cart": _remove_from_cart,
    "show": _show,
}


def _tokenize(line: str, lineno: int) -> list[str]:
    try:
        return shlex.split(line, comments=True)
    except ValueError as exc:
        raise click.BadParameter(f"Line {lineno}: {exc}.")


@click.command("run")
@click.argument("script", type=click.File("r"), default="-")
@pass_store
def session_run(store: Store, script: TextIO) -> None:
    """Run a session script (default: stdin) against one store.

    Rejected commands are reported and skipped; the state they would
    have changed stays as it was. The final state is printed at the end.
    """
    for lineno, line in enumerate(script, start=1):
        tokens = _tokenize(line, lineno)
        if not tokens:
            continue

        name, args = tokens[0], tokens[1:]
        command = _COMMANDS.get(name)
        if command is None:
            raise click.BadParameter(
                f"Line {lineno}: unknown command '{name}'. "
                f"Expected one of: {', '.join(_COMMANDS)}."
            )

        try:
            command(store, args, lineno)
        except DomainException as exc:
            click.echo(f"Line {lineno}: rejected: {exc}", err=True)

    click.echo()
    display_snapshot(ShowSnapshotHandler(store).handle())
