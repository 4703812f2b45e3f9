from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from pos.application.list_products import ListProductsHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure import bootstrap
from pos.infrastructure.cli.display import display_products
from pos.infrastructure.cli.shop_commands import run_menu
from pos.infrastructure.config import PosSettings
from pos.infrastructure.logging_config import configure_logging


def _settings(**overrides) -> PosSettings:
    """Environment settings with any explicitly given CLI options applied."""
    try:
        settings = PosSettings.from_env()
        given = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(settings, **given)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.group()
def cli() -> None:
    """POS: point-of-sale checkout"""


@cli.command("products")
@click.option("--catalog", "catalog_path", type=click.Path(path_type=Path),
              default=None, help="JSON catalog file (default: built-in catalog).")
def products(catalog_path: Path | None) -> None:
    """List the product catalog."""
    settings = _settings(catalog_path=catalog_path)
    try:
        catalog = bootstrap.product_catalog(settings.catalog_path)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_products(ListProductsHandler(catalog).handle())


@cli.command("shop")
@click.option("--audit-log", "audit_log_path", type=click.Path(path_type=Path),
              default=None, help="Audit log file (default: orders.log).")
@click.option("--catalog", "catalog_path", type=click.Path(path_type=Path),
              default=None, help="JSON catalog file (default: built-in catalog).")
@click.option("--cart-capacity", type=int, default=None, help="Distinct products per cart.")
@click.option("--history-capacity", type=int, default=None, help="Orders kept per session.")
@click.option("--log-level", default=None, help="Diagnostic log level (e.g. INFO).")
def shop(
    audit_log_path: Path | None,
    catalog_path: Path | None,
    cart_capacity: int | None,
    history_capacity: int | None,
    log_level: str | None,
) -> None:
    """Start an interactive shopping session."""
    settings = _settings(
        audit_log_path=audit_log_path,
        catalog_path=catalog_path,
        cart_capacity=cart_capacity,
        history_capacity=history_capacity,
        log_level=log_level,
    )
    configure_logging(settings.log_level)

    try:
        session = bootstrap.pos_session(settings, click.echo)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    with session:
        run_menu(session)
