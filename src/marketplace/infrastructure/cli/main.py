import click

from marketplace.domain.exceptions import DomainException
from marketplace.infrastructure.bootstrap import Container
from marketplace.infrastructure.cli.buyer_commands import buyer_login, buyer_register
from marketplace.infrastructure.cli.catalog_commands import catalog_replace, catalog_show
from marketplace.infrastructure.cli.manufacturer_commands import (
    manufacturer_list,
    manufacturer_login,
    manufacturer_register,
    manufacturer_show,
)
from marketplace.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_show,
    order_status,
)
from marketplace.infrastructure.config import Settings
from marketplace.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Marketplace — manufacturers, buyers and their orders"""
    try:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
    except ValueError as exc:
        raise click.ClickException(str(exc))

    container = Container(settings)
    try:
        container.open()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    ctx.obj = container
    ctx.call_on_close(container.close)


@cli.group()
def manufacturer() -> None:
    """Manufacturer accounts."""


@cli.group()
def buyer() -> None:
    """Buyer accounts."""


@cli.group()
def catalog() -> None:
    """Manage your product catalog (manufacturers)."""


@cli.group()
def order() -> None:
    """Place and track orders."""


# Register subcommands
manufacturer.add_command(manufacturer_list)
manufacturer.add_command(manufacturer_login)
manufacturer.add_command(manufacturer_register)
manufacturer.add_command(manufacturer_show)
buyer.add_command(buyer_login)
buyer.add_command(buyer_register)
catalog.add_command(catalog_replace)
catalog.add_command(catalog_show)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
