"""CLI commands for the product catalog."""

from __future__ import annotations

from collections.abc import Iterable

import click

from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, Uniqueness
from catalog.infrastructure.bootstrap import catalog_service


def _display_products(products: Iterable[Product]) -> None:
    click.echo(f"{'ID':<6} {'Title':<24} {'Alias':<24} {'Price':>10}  Categories")
    click.echo("-" * 80)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.title:<24} {p.alias:<24} {p.formatted_price:>10}  {p.category_path}"
        )


def _display_page(page: Page[Product]) -> None:
    if not page.items:
        click.echo("No products found.")
        return
    _display_products(page)
    click.echo()
    click.echo(f"Page {page.number} of {page.total_pages}  ({page.total} products)")


@click.command("list")
@click.option("--page", "page_num", default=1, show_default=True, type=int)
@click.option("--sort", "sort_field", default="id", show_default=True, help="id, title, alias or price.")
@click.option("--dir", "sort_dir", default="asc", show_default=True, help="'asc' or 'desc'.")
@click.option("--keyword", default=None, help="Match id, title or alias.")
@click.option("--category", "category_id", default=None, type=int, help="Category ID.")
def product_list(
    page_num: int,
    sort_field: str,
    sort_dir: str,
    keyword: str | None,
    category_id: int | None,
) -> None:
    """List products (admin view)."""
    try:
        page = catalog_service().list_by_page(
            page_num, sort_field, sort_dir, keyword=keyword, category_id=category_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(page)


@click.command("browse")
@click.option("--category", "category_id", required=True, type=int, help="Category ID.")
@click.option("--page", "page_num", default=1, show_default=True, type=int)
def product_browse(category_id: int, page_num: int) -> None:
    """Browse a category the way the storefront shows it."""
    try:
        page = catalog_service().list_by_category(page_num, category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(page)


@click.command("search")
@click.argument("keyword")
@click.option("--page", "page_num", default=1, show_default=True, type=int)
def product_search(keyword: str, page_num: int) -> None:
    """Search product titles."""
    try:
        page = catalog_service().search(keyword, page_num)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(page)


@click.command("show")
@click.option("--id", "product_id", type=int, default=None, help="Product ID.")
@click.option("--alias", default=None, help="Product alias.")
def product_show(product_id: int | None, alias: str | None) -> None:
    """Show a single product by ID or alias."""
    if product_id is not None and alias is not None:
        raise click.UsageError("Pass exactly one of --id or --alias.")

    service = catalog_service()
    try:
        if product_id is not None:
            product = service.get_product(product_id)
        elif alias is not None:
            product = service.get_product_by_alias(alias)
        else:
            raise click.UsageError("Pass exactly one of --id or --alias.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}  {product.title}")
    click.echo(f"Alias:      {product.alias}")
    click.echo(f"Price:      {product.formatted_price}")
    click.echo(f"Category:   {product.category_id if product.category_id else '-'}")
    click.echo(f"Categories: {product.category_path or '-'}")


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, type=int, help="Price in minor units.")
@click.option("--alias", default="", help="Alias; derived from the title when omitted.")
@click.option("--category", "category_id", default=None, type=int, help="Direct category ID.")
@click.option("--category-path", default="", help="Category tokens, e.g. '-1-4-'.")
def product_add(
    title: str,
    price: int,
    alias: str,
    category_id: int | None,
    category_path: str,
) -> None:
    """Add a new product to the catalog."""
    service = catalog_service()

    if service.check_unique(None, title) is Uniqueness.DUPLICATE:
        raise click.ClickException(f"Product '{title}' already exists")

    product = Product(
        id=None,
        title=title,
        price=price,
        alias=alias,
        category_id=category_id,
        category_path=category_path,
    )
    try:
        service.save_product(product)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.title}' added as '{product.alias}' "
        f"at {product.formatted_price}"
    )


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--title", default=None, help="New title.")
@click.option("--price", default=None, type=int, help="New price in minor units.")
@click.option("--alias", default=None, help="New alias.")
def product_update(
    product_id: int,
    title: str | None,
    price: int | None,
    alias: str | None,
) -> None:
    """Update an existing product."""
    service = catalog_service()

    try:
        product = service.get_product(product_id)
        if title is not None:
            if service.check_unique(product_id, title) is Uniqueness.DUPLICATE:
                raise click.ClickException(f"Product '{title}' already exists")
            product.title = title
        if price is not None:
            product.price = price
        if alias is not None:
            product.alias = alias
        service.save_product(product)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated ({product.alias}, {product.formatted_price})")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Delete a product."""
    try:
        catalog_service().delete_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")


@click.command("featured")
def product_featured() -> None:
    """Pick a random product from the featured category."""
    try:
        products = catalog_service().get_random_amount_of_products()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(products)


@click.command("check-unique")
@click.option("--id", "product_id", type=int, default=None, help="ID of the product being edited.")
@click.option("--title", required=True, help="Title to check.")
def product_check_unique(product_id: int | None, title: str) -> None:
    """Print OK or Duplicate for a title."""
    click.echo(str(catalog_service().check_unique(product_id, title)))
