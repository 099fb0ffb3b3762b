from pathlib import Path

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import build_store
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.cli.session_commands import session_run
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--seed",
    "seed_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="STOREFRONT_SEED_FILE",
    default=None,
    help="JSON file of products to start with instead of the built-in catalog.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, seed_path: Path | None, verbose: bool) -> None:
    """Storefront — catalog and cart engine"""
    configure_logging(verbose)

    try:
        ctx.obj = build_store(seed_path)
    except DomainException as exc:
        raise click.ClickException(str(exc))


# Register subcommands
cli.add_command(product_list)
cli.add_command(session_run)
