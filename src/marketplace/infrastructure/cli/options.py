"""Shared options and helpers for the CLI commands."""

from __future__ import annotations

import click

from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.actor import Actor
from marketplace.infrastructure.bootstrap import Container

pass_container = click.make_pass_decorator(Container)

token_option = click.option(
    "--token",
    envvar="MARKETPLACE_TOKEN",
    required=True,
    help="Bearer token from 'login' (or set MARKETPLACE_TOKEN).",
)


def authenticate(container: Container, token: str) -> Actor:
    try:
        return container.guard.authenticate(token)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def display_order(dto) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Buyer:        {dto.buyer_name or dto.buyer_id}")
    click.echo(f"Manufacturer: {dto.manufacturer_name or dto.manufacturer_id}")
    click.echo(f"Ordered:      {dto.order_date}")
    click.echo(f"Status since: {dto.status_updated_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*50}")
    click.echo(
        f"  {dto.product_name:<20} {dto.quantity:>5} {dto.price:>10} {dto.total:>12}"
    )
    if dto.allowed_next:
        click.echo(f"\nNext: {', '.join(dto.allowed_next)}")
    else:
        click.echo("\nNext: (final)")
