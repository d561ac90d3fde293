"""Read models returned by the use-case handlers.

Handlers hand these frozen views to the CLI instead of domain objects;
account views never include a password hash.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from marketplace.domain.model.buyer import Buyer
from marketplace.domain.model.manufacturer import Manufacturer
from marketplace.domain.model.order import Order
from marketplace.domain.model.product import Product


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class ProductDTO:
    name: str
    price: str
    description: str
    category: str
    department: str
    district: str
    state: str
    manufacture_date: str | None
    image: str | None
    updated_at: str


@dataclass(frozen=True)
class ManufacturerDTO:
    """Public view of a manufacturer. Never carries the password hash."""

    id: str
    company_name: str
    owner_name: str
    email: str
    username: str | None
    mobile: str
    city: str
    state: str
    products: list[ProductDTO]
    updated_at: str


@dataclass(frozen=True)
class BuyerDTO:
    id: str
    username: str
    name: str
    email: str
    mobile: str


@dataclass(frozen=True)
class LoginResultDTO:
    token: str
    actor_id: str
    kind: str
    name: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    status: str
    allowed_next: list[str]
    buyer_id: str
    buyer_name: str
    buyer_email: str
    buyer_mobile: str
    manufacturer_id: str
    manufacturer_name: str
    manufacturer_email: str
    manufacturer_mobile: str
    manufacturer_city: str
    manufacturer_state: str
    product_name: str
    price: str
    quantity: int
    total: str
    category: str
    department: str
    district: str
    product_state: str
    manufacture_date: str | None
    image: str | None
    order_date: str
    created_at: str
    status_updated_at: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        name=product.name,
        price=str(product.price),
        description=product.description,
        category=product.category,
        department=product.department,
        district=product.district,
        state=product.state,
        manufacture_date=_iso(product.manufacture_date),
        image=product.image,
        updated_at=product.updated_at.isoformat(),
    )


def manufacturer_to_dto(manufacturer: Manufacturer) -> ManufacturerDTO:
    return ManufacturerDTO(
        id=manufacturer.id,
        company_name=manufacturer.company_name,
        owner_name=manufacturer.owner_name,
        email=manufacturer.email,
        username=manufacturer.username,
        mobile=manufacturer.mobile,
        city=manufacturer.city,
        state=manufacturer.state,
        products=[product_to_dto(p) for p in manufacturer.products],
        updated_at=manufacturer.updated_at.isoformat(),
    )


def buyer_to_dto(buyer: Buyer) -> BuyerDTO:
    return BuyerDTO(
        id=buyer.id,
        username=buyer.username,
        name=buyer.name,
        email=buyer.email,
        mobile=buyer.mobile,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        status=order.status.value,
        allowed_next=[s.value for s in order.allowed_next],
        buyer_id=order.buyer_id,
        buyer_name=order.buyer_name,
        buyer_email=order.buyer_email,
        buyer_mobile=order.buyer_mobile,
        manufacturer_id=order.manufacturer_id,
        manufacturer_name=order.manufacturer_name,
        manufacturer_email=order.manufacturer_email,
        manufacturer_mobile=order.manufacturer_mobile,
        manufacturer_city=order.manufacturer_city,
        manufacturer_state=order.manufacturer_state,
        product_name=order.product_name,
        price=str(order.price),
        quantity=order.quantity.value,
        total=str(order.total),
        category=order.category,
        department=order.department,
        district=order.district,
        product_state=order.product_state,
        manufacture_date=_iso(order.manufacture_date),
        image=order.image,
        order_date=order.order_date.isoformat(),
        created_at=order.created_at.isoformat(),
        status_updated_at=order.status_updated_at.isoformat(),
    )
