"""Logging configuration and the state-change logging listener."""

from __future__ import annotations

import logging
import sys

import structlog

from storefront.application.events import StateChanged

logger = structlog.get_logger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Route structlog output to stderr so it never mixes with CLI output."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def log_state_change(event: StateChanged) -> None:
    """Store listener: record each applied command."""
    logger.debug(
        "command_applied",
        command=event.command,
        version=event.after.version,
    )
    if event.catalog_changed:
        product = event.after.products[-1]
        logger.info(
            "product_registered",
            product_id=product.id,
            name=product.name,
            price=str(product.price.amount),
        )
    if event.before.count != event.after.count:
        logger.info(
            "cart_updated",
            lines=event.after.count,
            total=str(event.after.total.amount),
        )
