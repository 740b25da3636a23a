import click

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_browse,
    product_check_unique,
    product_delete,
    product_featured,
    product_list,
    product_search,
    product_show,
    product_update,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override CATALOG_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Catalog — storefront product catalog"""
    configure_logging(log_level or get_settings().log_level)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_browse)
product.add_command(product_check_unique)
product.add_command(product_delete)
product.add_command(product_featured)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
