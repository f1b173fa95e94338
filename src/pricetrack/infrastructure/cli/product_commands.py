"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pricetrack.application.add_product import AddProductHandler
from pricetrack.application.delete_product import DeleteProductHandler
from pricetrack.application.list_products import (
    SORT_KEYS,
    ListCategoriesHandler,
    ListProductsHandler,
)
from pricetrack.application.update_product import UpdateProductHandler
from pricetrack.domain.exceptions import DomainException
from pricetrack.infrastructure.bootstrap import price_entry_repository, product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Category (free text, e.g. Grains).")
@click.option("--unit", required=True, help="Unit of measure (kg, l, pcs, ...).")
@click.option("--description", default="", help="Description.")
def product_add(name: str, category: str, unit: str, description: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name, category=category, unit=unit, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--category", default=None, help="New category.")
@click.option("--unit", default=None, help="New unit of measure.")
@click.option("--description", default=None, help="New description.")
def product_update(product_id: str, **changes: str | None) -> None:
    """Update some fields of a product."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id, **changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Delete this product and all of its prices?")
def product_delete(product_id: str) -> None:
    """Delete a product together with its price entries."""
    handler = DeleteProductHandler(
        product_repo=product_repository(),
        price_entry_repo=price_entry_repository(),
    )

    try:
        removed = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted ({removed} price entries removed)")


@click.command("list")
@click.option("--search", default="", help="Filter by name or description.")
@click.option("--category", default="", help="Only products in this category.")
@click.option("--sort", "sort_key", type=click.Choice(list(SORT_KEYS)), default="name")
@click.option("--desc", is_flag=True, help="Sort descending.")
def product_list(search: str, category: str, sort_key: str, desc: bool) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        products = handler.handle(
            search=search,
            category=category,
            sort_key=sort_key,
            direction="desc" if desc else "asc",
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<22} {'Name':<20} {'Category':<16} {'Unit':<8} {'Added':>12}")
    click.echo("-" * 82)
    for p in products:
        click.echo(
            f"{p.id:<22} {p.name:<20} {p.category:<16} {p.unit:<8} {p.created_at:>12}"
        )


@click.command("categories")
def product_categories() -> None:
    """List the categories currently in use."""
    try:
        categories = ListCategoriesHandler(product_repo=product_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not categories:
        click.echo("No categories found.")
        return
    for category in categories:
        click.echo(category)
