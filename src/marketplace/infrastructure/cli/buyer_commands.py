"""CLI commands for buyer accounts."""

from __future__ import annotations

import click

from marketplace.application.login import LoginHandler
from marketplace.application.register_buyer import RegisterBuyerHandler
from marketplace.application.schemas import LoginRequest, RegisterBuyerRequest, parse_request
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.actor import ActorKind
from marketplace.infrastructure.bootstrap import Container
from marketplace.infrastructure.cli.options import pass_container


@click.command("register")
@click.option("--username", required=True, help="Login name (unique).")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--name", default="", help="Full name.")
@click.option("--email", default="", help="Contact email.")
@click.option("--mobile", default="", help="Mobile number.")
@pass_container
def buyer_register(
    container: Container,
    username: str,
    password: str,
    name: str,
    email: str,
    mobile: str,
) -> None:
    """Register a new buyer account."""
    handler = RegisterBuyerHandler(
        buyer_repo=container.buyer_repository(),
        hasher=container.hasher,
    )

    try:
        request = parse_request(
            RegisterBuyerRequest,
            {
                "username": username,
                "password": password,
                "name": name,
                "email": email,
                "mobile": mobile,
            },
        )
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Buyer registered: {dto.username}")
    click.echo(f"ID: {dto.id}")


@click.command("login")
@click.option("--username", required=True, help="Username.")
@click.option("--password", prompt=True, hide_input=True)
@pass_container
def buyer_login(container: Container, username: str, password: str) -> None:
    """Log in and print a bearer token."""
    handler = LoginHandler(
        manufacturer_repo=container.manufacturer_repository(),
        buyer_repo=container.buyer_repository(),
        hasher=container.hasher,
        token_service=container.token_service,
    )

    try:
        request = parse_request(LoginRequest, {"username": username, "password": password})
        result = handler.handle(ActorKind.BUYER, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.token)
