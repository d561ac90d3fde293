"""Order aggregate — the core of the domain.

An order is a snapshot taken when the buyer places it (parties, product,
price) plus a status the manufacturer moves through a fixed workflow.
Snapshot fields never change after creation.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from marketplace.domain.exceptions import InvalidTransitionError, ValidationError
from marketplace.domain.model.buyer import Buyer
from marketplace.domain.model.manufacturer import Manufacturer
from marketplace.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "Pending"
    ALLOWED = "Allowed"
    APPROVED = "Approved"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @staticmethod
    def parse(raw: str) -> OrderStatus | None:
        """Case-insensitive lookup by value; None for unknown names."""
        wanted = (raw or "").strip().lower()
        for status in OrderStatus:
            if status.value.lower() == wanted:
                return status
        return None


# Ordered: the allowed set is reported to callers in this order.
TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING: (OrderStatus.ALLOWED, OrderStatus.CANCELLED),
    OrderStatus.ALLOWED: (OrderStatus.APPROVED, OrderStatus.CANCELLED),
    OrderStatus.APPROVED: (OrderStatus.DELIVERED, OrderStatus.CANCELLED),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}

TERMINAL_STATUSES = frozenset(s for s, nxt in TRANSITIONS.items() if not nxt)


def new_order_id(now: datetime) -> str:
    """Human-readable, time-derived id, e.g. ``ORD-20261017093015123-3FA9C1``."""
    stamp = now.strftime("%Y%m%d%H%M%S") + f"{now.microsecond // 1000:03d}"
    return f"ORD-{stamp}-{secrets.token_hex(3).upper()}"


@dataclass
class Order:
    """Aggregate root for buyer/manufacturer orders.

    Use the ``Order.create()`` factory for new orders — it captures the
    snapshot and enforces ``total == price * quantity``.  The ``__init__``
    is intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: str
    buyer_id: str
    manufacturer_id: str
    product_name: str
    price: Money
    quantity: Quantity
    total: Money
    buyer_name: str = ""
    buyer_email: str = ""
    buyer_mobile: str = ""
    manufacturer_name: str = ""
    manufacturer_email: str = ""
    manufacturer_mobile: str = ""
    manufacturer_city: str = ""
    manufacturer_state: str = ""
    category: str = ""
    department: str = ""
    district: str = ""
    product_state: str = ""
    manufacture_date: date | None = None
    image: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status_updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        buyer: Buyer,
        manufacturer: Manufacturer,
        product_name: str,
        price: Money,
        quantity: Quantity,
        now: datetime,
        total: Money | None = None,
        category: str = "",
        department: str = "",
        district: str = "",
        product_state: str = "",
        manufacture_date: date | None = None,
        image: str | None = None,
    ) -> Order:
        """Snapshot a new order in ``Pending`` status."""
        if not product_name or not product_name.strip():
            raise ValidationError("Product name is required")

        expected_total = price * quantity.value
        if total is None:
            total = expected_total
        elif total != expected_total:
            raise ValidationError(
                f"Order total {total} does not match {price} x {quantity} = {expected_total}"
            )

        return Order(
            id=new_order_id(now),
            buyer_id=buyer.id,
            buyer_name=buyer.name,
            buyer_email=buyer.email,
            buyer_mobile=buyer.mobile,
            manufacturer_id=manufacturer.id,
            manufacturer_name=manufacturer.company_name,
            manufacturer_email=manufacturer.email,
            manufacturer_mobile=manufacturer.mobile,
            manufacturer_city=manufacturer.city,
            manufacturer_state=manufacturer.state,
            product_name=product_name.strip(),
            price=price,
            quantity=quantity,
            total=total,
            category=category,
            department=department,
            district=district,
            product_state=product_state,
            manufacture_date=manufacture_date,
            image=image,
            status=OrderStatus.PENDING,
            order_date=now,
            created_at=now,
            status_updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    @property
    def allowed_next(self) -> list[OrderStatus]:
        return list(TRANSITIONS[self.status])

    @property
    def is_final(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def check_transition(self, requested: str) -> OrderStatus:
        """Resolve ``requested`` to a status legal from the current one.

        Raises InvalidTransitionError (with the legal next statuses) for
        unknown names as well as for edges missing from ``TRANSITIONS``.
        """
        target = OrderStatus.parse(requested)
        if target is None or target not in TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                order_id=self.id,
                current=self.status.value,
                requested=target.value if target else requested,
                allowed=[s.value for s in self.allowed_next],
            )
        return target

    def transition_to(self, requested: str, at: datetime) -> OrderStatus:
        """Move to ``requested``; returns the status the order left."""
        target = self.check_transition(requested)
        previous = self.status
        self.status = target
        self.status_updated_at = at
        return previous

