"""CLI commands for the dashboard and for export, import and reset."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import click

from pricetrack.application.show_dashboard import ShowDashboardHandler
from pricetrack.application.transfer_data import (
    ExportDataHandler,
    ImportDataHandler,
    ResetDataHandler,
)
from pricetrack.domain.exceptions import DomainException
from pricetrack.infrastructure.bootstrap import (
    price_entry_repository,
    product_repository,
    snapshot_repository,
    supplier_repository,
)
from pricetrack.infrastructure.cli.price_commands import display_comparison
from pricetrack.infrastructure.settings import Settings


@click.command("dashboard")
def dashboard() -> None:
    """Show totals, the biggest recent price moves and the best deals."""
    handler = ShowDashboardHandler(
        product_repo=product_repository(),
        supplier_repo=supplier_repository(),
        price_entry_repo=price_entry_repository(),
        recent_limit=Settings.RECENT_CHANGES_LIMIT,
        deals_limit=Settings.BEST_DEALS_LIMIT,
    )

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Products: {dto.product_count}   Suppliers: {dto.supplier_count}   "
        f"Price entries: {dto.price_entry_count}"
    )

    click.echo()
    click.echo("Recent price changes")
    click.echo("=" * 20)
    if not dto.recent_changes:
        click.echo("No price changes recorded yet.")
    for comparison in dto.recent_changes:
        display_comparison(comparison)

    click.echo()
    click.echo("Best deals")
    click.echo("=" * 10)
    if not dto.best_deals:
        click.echo("No prices recorded yet.")
    for comparison in dto.best_deals:
        click.echo(f"  {comparison.product_name:<24} {comparison.best_supplier:<20} {comparison.best_price:>12}")


@click.command("export")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Target file. Defaults to pricetrack-export-<date>.json.",
)
def export_data(output: Path | None) -> None:
    """Export all data to a single JSON document."""
    target = output or Path(f"pricetrack-export-{date.today().isoformat()}.json")

    try:
        counts = ExportDataHandler(snapshot_repo=snapshot_repository()).handle(target)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    summary = ", ".join(f"{n} {name}" for name, n in counts.items())
    click.echo(f"Exported {summary} to {target}")


@click.command("import")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def import_data(source: Path) -> None:
    """Import a previously exported JSON document, replacing existing data."""
    try:
        counts = ImportDataHandler(snapshot_repo=snapshot_repository()).handle(source)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    summary = ", ".join(f"{n} {name}" for name, n in counts.items())
    click.echo(f"Imported {summary}")


@click.command("reset")
@click.confirmation_option(prompt="This removes every supplier, product and price. Continue?")
def reset_data() -> None:
    """Remove all data."""
    ResetDataHandler(snapshot_repo=snapshot_repository()).handle()
    click.echo("All data removed.")
