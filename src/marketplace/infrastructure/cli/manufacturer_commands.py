"""CLI commands for manufacturer accounts."""

from __future__ import annotations

import json

import click

from marketplace.application.list_manufacturers import ListManufacturersHandler
from marketplace.application.login import LoginHandler
from marketplace.application.register_manufacturer import RegisterManufacturerHandler
from marketplace.application.schemas import (
    LoginRequest,
    RegisterManufacturerRequest,
    parse_request,
)
from marketplace.application.show_manufacturer import ShowManufacturerHandler
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.actor import ActorKind
from marketplace.infrastructure.bootstrap import Container
from marketplace.infrastructure.cli.options import authenticate, pass_container, token_option


def _load_products(products_file) -> list:
    if products_file is None:
        return []
    try:
        products = json.load(products_file)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Not valid JSON: {exc}", param_hint="--products-file")
    if not isinstance(products, list):
        raise click.BadParameter("Expected a JSON array of products.", param_hint="--products-file")
    return products


@click.command("register")
@click.option("--company-name", required=True, help="Company name.")
@click.option("--owner-name", required=True, help="Owner's full name.")
@click.option("--email", required=True, help="Contact email (unique).")
@click.option("--username", default=None, help="Login name (unique, optional).")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--mobile", default="", help="Mobile number.")
@click.option("--city", default="", help="City.")
@click.option("--state", default="", help="State.")
@click.option(
    "--products-file",
    type=click.File("r"),
    default=None,
    help="JSON array with the initial catalog.",
)
@pass_container
def manufacturer_register(
    container: Container,
    company_name: str,
    owner_name: str,
    email: str,
    username: str | None,
    password: str,
    mobile: str,
    city: str,
    state: str,
    products_file,
) -> None:
    """Register a new manufacturer account."""
    handler = RegisterManufacturerHandler(
        manufacturer_repo=container.manufacturer_repository(),
        hasher=container.hasher,
    )

    try:
        request = parse_request(
            RegisterManufacturerRequest,
            {
                "company_name": company_name,
                "owner_name": owner_name,
                "email": email,
                "username": username,
                "password": password,
                "mobile": mobile,
                "city": city,
                "state": state,
                "products": _load_products(products_file),
            },
        )
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Manufacturer registered: {dto.company_name}")
    click.echo(f"ID: {dto.id}")


@click.command("login")
@click.option("--username", required=True, help="Username or email.")
@click.option("--password", prompt=True, hide_input=True)
@pass_container
def manufacturer_login(container: Container, username: str, password: str) -> None:
    """Log in and print a bearer token."""
    handler = LoginHandler(
        manufacturer_repo=container.manufacturer_repository(),
        buyer_repo=container.buyer_repository(),
        hasher=container.hasher,
        token_service=container.token_service,
    )

    try:
        request = parse_request(LoginRequest, {"username": username, "password": password})
        result = handler.handle(ActorKind.MANUFACTURER, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.token)


@click.command("list")
@pass_container
def manufacturer_list(container: Container) -> None:
    """List all manufacturers and their product counts."""
    handler = ListManufacturersHandler(container.manufacturer_repository())

    try:
        manufacturers = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not manufacturers:
        click.echo("No manufacturers found.")
        return

    click.echo(f"{'ID':<34} {'Company':<24} {'City':<14} {'Products':>8}")
    click.echo("-" * 83)
    for m in manufacturers:
        click.echo(f"{m.id:<34} {m.company_name:<24} {m.city:<14} {len(m.products):>8}")


@click.command("show")
@token_option
@pass_container
def manufacturer_show(container: Container, token: str) -> None:
    """Show your own manufacturer profile."""
    actor = authenticate(container, token)
    handler = ShowManufacturerHandler(container.manufacturer_repository())

    try:
        dto = handler.handle(actor)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.company_name}  (owner: {dto.owner_name})")
    click.echo(f"ID:       {dto.id}")
    click.echo(f"Email:    {dto.email}")
    click.echo(f"Username: {dto.username or '-'}")
    click.echo(f"Mobile:   {dto.mobile or '-'}")
    click.echo(f"Location: {', '.join(p for p in (dto.city, dto.state) if p) or '-'}")
    click.echo(f"Products: {len(dto.products)}")
