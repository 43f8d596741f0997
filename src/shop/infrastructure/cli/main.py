from __future__ import annotations

from pathlib import Path

import click

from shop.infrastructure.bootstrap import (
    DATA_DIR_ENV_VAR,
    DEFAULT_DATA_DIR,
    configure_logging,
)
from shop.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_purchase,
    product_update,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar=DATA_DIR_ENV_VAR,
    show_default=True,
    help="Directory holding products.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """Shop: product catalog and purchases"""
    configure_logging(verbose)
    ctx.obj = data_dir


@cli.group()
def product() -> None:
    """Manage and purchase products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_purchase)
product.add_command(product_update)
