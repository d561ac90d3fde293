"""Manufacturer aggregate — a seller account and its catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.product import Product


@dataclass
class Manufacturer:
    """Aggregate root for a seller account.

    The catalog is exclusively owned by the manufacturer; it is only ever
    replaced as a whole via ``replace_products()``.
    """

    id: str
    company_name: str
    owner_name: str
    email: str
    password_hash: str
    username: str | None = None
    mobile: str = ""
    city: str = ""
    state: str = ""
    products: list[Product] = field(default_factory=list)
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def register(
        id: str,
        company_name: str,
        owner_name: str,
        email: str,
        password_hash: str,
        username: str | None = None,
        mobile: str = "",
        city: str = "",
        state: str = "",
        products: list[Product] | None = None,
    ) -> Manufacturer:
        """Create a new account, enforcing the required identity fields."""
        for label, value in (
            ("Company name", company_name),
            ("Owner name", owner_name),
            ("Email", email),
        ):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")

        return Manufacturer(
            id=id,
            company_name=company_name.strip(),
            owner_name=owner_name.strip(),
            email=email.strip().lower(),
            password_hash=password_hash,
            username=username.strip() if username and username.strip() else None,
            mobile=mobile,
            city=city,
            state=state,
            products=list(products or []),
        )

    def replace_products(self, products: list[Product], at: datetime) -> None:
        """Swap the whole catalog, stamping every entry with ``at``."""
        for product in products:
            product.updated_at = at
        self.products = list(products)
        self.updated_at = at

    def find_product(self, name: str) -> Product | None:
        for product in self.products:
            if product.matches_name(name):
                return product
        return None

    def login_keys(self) -> set[str]:
        """Every string that identifies this account at login."""
        keys = {self.email}
        if self.username:
            keys.update((self.username, self.username.lower()))
        return keys

    def login_clashes_with(self, other: Manufacturer) -> bool:
        """True if a login for one account could resolve to the other."""
        return bool(self.login_keys() & other.login_keys())
