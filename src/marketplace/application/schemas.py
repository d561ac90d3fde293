"""Pydantic request schemas for the marketplace use cases.

These are the external contracts: every handler receives one of these
already validated. Field aliases follow the camelCase bodies the web
clients send (``companyName``, ``manufacturerId``...), while Python code
may populate them by their snake_case names.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from marketplace.domain.exceptions import ValidationError


class RequestSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
class ProductSchema(RequestSchema):
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0, allow_inf_nan=False)
    description: str = ""
    category: str = ""
    department: str = ""
    district: str = ""
    state: str = ""
    manufacture_date: date | None = None
    image: str | None = None


class RegisterManufacturerRequest(RequestSchema):
    company_name: str = Field(min_length=1)
    owner_name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1)
    username: str | None = None
    mobile: str = ""
    city: str = ""
    state: str = ""
    products: list[ProductSchema] = Field(default_factory=list)


class RegisterBuyerRequest(RequestSchema):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str = ""
    email: str = ""
    mobile: str = ""


class LoginRequest(RequestSchema):
    # Manufacturers may log in with either their username or their email.
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ReplaceCatalogRequest(RequestSchema):
    products: list[ProductSchema]


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class CreateOrderRequest(RequestSchema):
    manufacturer_id: str = Field(min_length=1)
    product_name: str = Field(min_length=1)
    price: Decimal = Field(ge=0, allow_inf_nan=False)
    quantity: int = Field(ge=1)
    total: Decimal | None = Field(default=None, ge=0, allow_inf_nan=False)
    category: str = ""
    department: str = ""
    district: str = ""
    state: str = ""
    manufacture_date: date | None = None
    image: str | None = None


class UpdateOrderStatusRequest(RequestSchema):
    status: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
SchemaT = TypeVar("SchemaT", bound=RequestSchema)


def parse_request(schema: type[SchemaT], data: Mapping[str, Any]) -> SchemaT:
    """Validate raw input into ``schema``, raising the domain ValidationError."""
    try:
        return schema.model_validate(dict(data))
    except pydantic.ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ValidationError(f"Invalid request: {problems}") from exc
