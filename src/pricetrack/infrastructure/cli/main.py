import click

from pricetrack.infrastructure.cli.data_commands import (
    dashboard,
    export_data,
    import_data,
    reset_data,
)
from pricetrack.infrastructure.cli.price_commands import (
    price_add,
    price_compare,
    price_delete,
    price_history,
    price_update,
)
from pricetrack.infrastructure.cli.product_commands import (
    product_add,
    product_categories,
    product_delete,
    product_list,
    product_update,
)
from pricetrack.infrastructure.cli.supplier_commands import (
    supplier_add,
    supplier_delete,
    supplier_list,
    supplier_update,
)
from pricetrack.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """PriceTrack — supplier price tracking for small shops"""
    setup_logging()


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def price() -> None:
    """Record and compare prices."""


# Register subcommands
supplier.add_command(supplier_add)
supplier.add_command(supplier_delete)
supplier.add_command(supplier_list)
supplier.add_command(supplier_update)
product.add_command(product_add)
product.add_command(product_categories)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
price.add_command(price_add)
price.add_command(price_compare)
price.add_command(price_delete)
price.add_command(price_history)
price.add_command(price_update)
cli.add_command(dashboard)
cli.add_command(export_data)
cli.add_command(import_data)
cli.add_command(reset_data)
