"""CLI commands for price entries and price comparison."""

from __future__ import annotations

from datetime import date

import click

from pricetrack.application.add_price_entry import AddPriceEntryHandler
from pricetrack.application.compare_prices import ComparePricesHandler
from pricetrack.application.delete_price_entry import DeletePriceEntryHandler
from pricetrack.application.dto import PriceComparisonDTO
from pricetrack.application.show_price_history import ShowPriceHistoryHandler
from pricetrack.application.update_price_entry import UpdatePriceEntryHandler
from pricetrack.domain.exceptions import DomainException
from pricetrack.infrastructure.bootstrap import (
    price_entry_repository,
    product_repository,
    supplier_repository,
)


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--supplier", "supplier_id", required=True, help="Supplier ID.")
@click.option("--price", required=True, help="Price (e.g. 12.50).")
@click.option("--date", "effective_date", default=None, help="Effective date, ISO format. Defaults to today.")
@click.option("--notes", default="", help="Free-text notes.")
def price_add(
    product_id: str, supplier_id: str, price: str, effective_date: str | None, notes: str
) -> None:
    """Record a supplier's price for a product."""
    handler = AddPriceEntryHandler(
        price_entry_repo=price_entry_repository(),
        product_repo=product_repository(),
        supplier_repo=supplier_repository(),
    )

    try:
        entry = handler.handle(
            product_id=product_id,
            supplier_id=supplier_id,
            price=price,
            date=effective_date or date.today().isoformat(),
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price entry {entry.id} recorded at {entry.price}")


@click.command("update")
@click.option("--id", "entry_id", required=True, help="Price entry ID.")
@click.option("--product", "product_id", default=None, help="New product ID.")
@click.option("--supplier", "supplier_id", default=None, help="New supplier ID.")
@click.option("--price", default=None, help="New price.")
@click.option("--date", "effective_date", default=None, help="New effective date.")
@click.option("--notes", default=None, help="New notes.")
def price_update(
    entry_id: str,
    product_id: str | None,
    supplier_id: str | None,
    price: str | None,
    effective_date: str | None,
    notes: str | None,
) -> None:
    """Correct a recorded price entry."""
    handler = UpdatePriceEntryHandler(
        price_entry_repo=price_entry_repository(),
        product_repo=product_repository(),
        supplier_repo=supplier_repository(),
    )

    try:
        entry = handler.handle(
            entry_id,
            product_id=product_id,
            supplier_id=supplier_id,
            price=price,
            date=effective_date,
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price entry {entry.id} updated ({entry.price})")


@click.command("delete")
@click.option("--id", "entry_id", required=True, help="Price entry ID.")
def price_delete(entry_id: str) -> None:
    """Delete a single price entry."""
    try:
        DeletePriceEntryHandler(price_entry_repo=price_entry_repository()).handle(entry_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price entry {entry_id} deleted")


@click.command("history")
@click.option("--product", "product_id", required=True, help="Product ID.")
def price_history(product_id: str) -> None:
    """Show every recorded price of a product, per supplier."""
    handler = ShowPriceHistoryHandler(
        product_repo=product_repository(),
        supplier_repo=supplier_repository(),
        price_entry_repo=price_entry_repository(),
    )

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price history: {dto.product_name} (per {dto.unit})")
    if not dto.suppliers:
        click.echo("No price data available for this product.")
        return

    for supplier in dto.suppliers:
        click.echo()
        click.echo(f"  {supplier.supplier_name}")
        click.echo(f"  {'Date':<14} {'Price':>12}  {'Entry':<22} Notes")
        click.echo(f"  {'-'*64}")
        for point in supplier.points:
            click.echo(
                f"  {point.date:<14} {point.price:>12}  {point.entry_id:<22} {point.notes}"
            )


def display_comparison(dto: PriceComparisonDTO) -> None:
    """Shared formatting for one product's comparison table."""
    best = f"best: {dto.best_supplier} at {dto.best_price}" if dto.best_supplier else "no prices yet"
    click.echo(f"{dto.product_name}  ({best})")
    click.echo(
        f"  {'':<2}{'Supplier':<20} {'Current':>12} {'Previous':>12} {'Change':>10} {'Updated':>14}"
    )
    click.echo(f"  {'-'*72}")
    for row in dto.rows:
        marker = "* " if row.is_best else "  "
        click.echo(
            f"  {marker}{row.supplier_name:<20} {row.current_price:>12} "
            f"{row.previous_price:>12} {row.change:>10} {row.last_updated:>14}"
        )


@click.command("compare")
@click.option("--search", default="", help="Filter by product or supplier name.")
@click.option("--category", default="", help="Only products in this category.")
def price_compare(search: str, category: str) -> None:
    """Compare current prices across suppliers for every product."""
    handler = ComparePricesHandler(
        product_repo=product_repository(),
        supplier_repo=supplier_repository(),
        price_entry_repo=price_entry_repository(),
    )

    try:
        comparisons = handler.handle(search=search, category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not comparisons:
        click.echo("No price comparisons found.")
        return

    for i, dto in enumerate(comparisons):
        if i:
            click.echo()
        display_comparison(dto)
