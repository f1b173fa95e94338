"""CLI commands for the Supplier aggregate."""

from __future__ import annotations

import click

from pricetrack.application.add_supplier import AddSupplierHandler
from pricetrack.application.delete_supplier import DeleteSupplierHandler
from pricetrack.application.list_suppliers import SORT_KEYS, ListSuppliersHandler
from pricetrack.application.update_supplier import UpdateSupplierHandler
from pricetrack.domain.exceptions import DomainException
from pricetrack.infrastructure.bootstrap import (
    price_entry_repository,
    supplier_repository,
)


@click.command("add")
@click.option("--name", required=True, help="Supplier name.")
@click.option("--phone", required=True, help="Phone number.")
@click.option("--contact", default="", help="Contact person.")
@click.option("--address", default="", help="Postal address.")
@click.option("--notes", default="", help="Free-text notes.")
def supplier_add(name: str, phone: str, contact: str, address: str, notes: str) -> None:
    """Register a new supplier."""
    handler = AddSupplierHandler(supplier_repo=supplier_repository())

    try:
        supplier = handler.handle(
            name=name, phone=phone, contact=contact, address=address, notes=notes
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier {supplier.id} '{supplier.name}' added")


@click.command("update")
@click.option("--id", "supplier_id", required=True, help="Supplier ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--phone", default=None, help="New phone number.")
@click.option("--contact", default=None, help="New contact person.")
@click.option("--address", default=None, help="New address.")
@click.option("--notes", default=None, help="New notes.")
def supplier_update(supplier_id: str, **changes: str | None) -> None:
    """Update some fields of a supplier."""
    handler = UpdateSupplierHandler(supplier_repo=supplier_repository())

    try:
        supplier = handler.handle(supplier_id, **changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier {supplier.id} '{supplier.name}' updated")


@click.command("delete")
@click.option("--id", "supplier_id", required=True, help="Supplier ID.")
@click.confirmation_option(prompt="Delete this supplier and all of its prices?")
def supplier_delete(supplier_id: str) -> None:
    """Delete a supplier together with its price entries."""
    handler = DeleteSupplierHandler(
        supplier_repo=supplier_repository(),
        price_entry_repo=price_entry_repository(),
    )

    try:
        removed = handler.handle(supplier_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier {supplier_id} deleted ({removed} price entries removed)")


@click.command("list")
@click.option("--search", default="", help="Filter by name, contact, phone, address or notes.")
@click.option("--sort", "sort_key", type=click.Choice(list(SORT_KEYS)), default="name")
@click.option("--desc", is_flag=True, help="Sort descending.")
def supplier_list(search: str, sort_key: str, desc: bool) -> None:
    """List suppliers."""
    handler = ListSuppliersHandler(supplier_repo=supplier_repository())

    try:
        suppliers = handler.handle(
            search=search, sort_key=sort_key, direction="desc" if desc else "asc"
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo(f"{'ID':<22} {'Name':<20} {'Phone':<16} {'Contact':<18} {'Added':>12}")
    click.echo("-" * 92)
    for s in suppliers:
        click.echo(
            f"{s.id:<22} {s.name:<20} {s.phone:<16} {s.contact:<18} {s.created_at:>12}"
        )
