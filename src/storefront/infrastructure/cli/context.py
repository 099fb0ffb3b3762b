"""Shared click plumbing: the per-invocation Store lives on ctx.obj."""

import click

from storefront.application.store import Store

pass_store = click.make_pass_decorator(Store)
