"""Abstract repository for Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in
the infrastructure layer and the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from marketplace.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def insert(self, order: Order) -> None:
        """Persist a brand-new order. Raises PersistenceError on id clash."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_manufacturer(self, manufacturer_id: str) -> list[Order]:
        """Return every order placed with a manufacturer."""

    @abstractmethod
    def list_by_buyer(self, buyer_id: str) -> list[Order]:
        """Return every order placed by a buyer."""

    @abstractmethod
    def update_status_if(
        self,
        order_id: str,
        expected: OrderStatus,
        new: OrderStatus,
        at: datetime,
    ) -> Order | None:
        """Compare-and-swap the order status.

        Writes ``new`` (and ``at`` as the status timestamp) only if the
        stored order is still in ``expected``. Returns the updated order,
        or None when the order is missing or its status has moved on.
        """
