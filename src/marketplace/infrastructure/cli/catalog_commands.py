"""CLI commands for a manufacturer's own product catalog."""

from __future__ import annotations

import json

import click

from marketplace.application.replace_catalog import ReplaceCatalogHandler
from marketplace.application.schemas import ReplaceCatalogRequest, parse_request
from marketplace.application.show_manufacturer import ShowManufacturerHandler
from marketplace.domain.exceptions import DomainException
from marketplace.infrastructure.bootstrap import Container
from marketplace.infrastructure.cli.options import authenticate, pass_container, token_option


@click.command("replace")
@click.option(
    "--file",
    "products_file",
    type=click.File("r"),
    required=True,
    help="JSON array of products; replaces the whole catalog.",
)
@token_option
@pass_container
def catalog_replace(container: Container, products_file, token: str) -> None:
    """Replace your catalog with the products in a JSON file."""
    actor = authenticate(container, token)
    try:
        products = json.load(products_file)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Not valid JSON: {exc}", param_hint="--file")

    handler = ReplaceCatalogHandler(container.manufacturer_repository())

    try:
        request = parse_request(ReplaceCatalogRequest, {"products": products})
        dto = handler.handle(actor, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Catalog updated: {len(dto.products)} product(s)")


@click.command("show")
@token_option
@pass_container
def catalog_show(container: Container, token: str) -> None:
    """List the products in your catalog."""
    actor = authenticate(container, token)
    handler = ShowManufacturerHandler(container.manufacturer_repository())

    try:
        dto = handler.handle(actor)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<24} {'Category':<16} {'District':<14} {'Price':>10}")
    click.echo("-" * 67)
    for p in dto.products:
        click.echo(f"{p.name:<24} {p.category:<16} {p.district:<14} {p.price:>10}")
