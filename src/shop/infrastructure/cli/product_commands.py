"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from shop.application.add_product import AddProductHandler
from shop.application.list_products import ListProductsHandler
from shop.application.product_service import ProductService
from shop.application.update_product import UpdateProductHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import product_repository, purchase_notifier


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 999.99).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_add(data_dir: Path, name: str, price: str, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(data_dir))

    try:
        product = handler.handle(name=name, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock} in stock)"
    )


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository(data_dir))
    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7} {'Status':>10}")
    click.echo("-" * 57)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.stock:>7} {p.status:>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.pass_obj
def product_update(
    data_dir: Path, product_id: int, price: str | None, stock: int | None
) -> None:
    """Update a product's price and/or stock."""
    handler = UpdateProductHandler(product_repo=product_repository(data_dir))

    try:
        product = handler.handle(product_id=product_id, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} updated: price {product.price}, stock {product.stock}"
    )


@click.command("purchase")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to buy.")
@click.pass_obj
def product_purchase(data_dir: Path, product_id: int, quantity: int) -> None:
    """Compute the total price of buying a product."""
    service = ProductService(
        repository=product_repository(data_dir),
        notifier=purchase_notifier(),
    )

    try:
        total = service.purchase_product(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total price: {total}")
