"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from marketplace.application.create_order import CreateOrderHandler
from marketplace.application.list_orders import ListOrdersHandler
from marketplace.application.schemas import (
    CreateOrderRequest,
    UpdateOrderStatusRequest,
    parse_request,
)
from marketplace.application.show_order import ShowOrderHandler
from marketplace.application.update_order_status import UpdateOrderStatusHandler
from marketplace.domain.exceptions import DomainException
from marketplace.infrastructure.bootstrap import Container
from marketplace.infrastructure.cli.options import (
    authenticate,
    display_order,
    pass_container,
    token_option,
)


@click.command("create")
@click.option("--manufacturer-id", required=True, help="Manufacturer to order from.")
@click.option("--product", "product_name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 100.00).")
@click.option("--quantity", required=True, type=int, help="Number of units.")
@click.option("--total", default=None, help="Order total; computed when omitted.")
@click.option("--category", default="", help="Product category.")
@click.option("--department", default="", help="Product department.")
@click.option("--district", default="", help="Product district.")
@click.option("--state", default="", help="Product state.")
@click.option("--manufacture-date", default=None, help="YYYY-MM-DD.")
@click.option("--image", default=None, help="Product image reference.")
@token_option
@pass_container
def order_create(
    container: Container,
    manufacturer_id: str,
    product_name: str,
    price: str,
    quantity: int,
    total: str | None,
    category: str,
    department: str,
    district: str,
    state: str,
    manufacture_date: str | None,
    image: str | None,
    token: str,
) -> None:
    """Place an order with a manufacturer (buyers)."""
    actor = authenticate(container, token)
    handler = CreateOrderHandler(
        order_repo=container.order_repository(),
        manufacturer_repo=container.manufacturer_repository(),
        buyer_repo=container.buyer_repository(),
        verify_catalog=container.settings.verify_catalog,
    )

    try:
        request = parse_request(
            CreateOrderRequest,
            {
                "manufacturer_id": manufacturer_id,
                "product_name": product_name,
                "price": price,
                "quantity": quantity,
                "total": total,
                "category": category,
                "department": department,
                "district": district,
                "state": state,
                "manufacture_date": manufacture_date,
                "image": image,
            },
        )
        dto = handler.handle(actor, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created  (status={dto.status})")
    click.echo(f"  {dto.product_name} x {dto.quantity} @ {dto.price} = {dto.total}")


@click.command("list")
@token_option
@pass_container
def order_list(container: Container, token: str) -> None:
    """List your orders (placed as a buyer, received as a manufacturer)."""
    actor = authenticate(container, token)
    handler = ListOrdersHandler(container.order_repository())

    try:
        orders = handler.handle(actor)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<30} {'Product':<20} {'Qty':>5} {'Total':>12} {'Status':<10}")
    click.echo("-" * 81)
    for o in orders:
        click.echo(
            f"{o.id:<30} {o.product_name:<20} {o.quantity:>5} {o.total:>12} {o.status:<10}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@token_option
@pass_container
def order_show(container: Container, order_id: str, token: str) -> None:
    """Show details of one of your orders."""
    actor = authenticate(container, token)
    handler = ShowOrderHandler(container.order_repository())

    try:
        dto = handler.handle(actor, order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option(
    "--to",
    "status",
    required=True,
    help="New status: Allowed, Approved, Delivered or Cancelled.",
)
@token_option
@pass_container
def order_status(container: Container, order_id: str, status: str, token: str) -> None:
    """Move one of your received orders to its next status (manufacturers)."""
    actor = authenticate(container, token)
    handler = UpdateOrderStatusHandler(container.order_repository())

    try:
        request = parse_request(UpdateOrderStatusRequest, {"status": status})
        dto = handler.handle(actor, order_id, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} is now {dto.status}.")
