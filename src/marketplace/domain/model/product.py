"""Catalog product.

Products have no identity of their own: they live inside a
manufacturer's catalog and the whole list is replaced on update.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.value_objects import Money


@dataclass
class Product:
    """A single catalog entry owned by one manufacturer."""

    name: str
    price: Money
    description: str = ""
    category: str = ""
    department: str = ""
    district: str = ""
    state: str = ""
    manufacture_date: date | None = None
    image: str | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        self.name = self.name.strip()

    def matches_name(self, name: str) -> bool:
        return self.name.lower() == name.strip().lower()
