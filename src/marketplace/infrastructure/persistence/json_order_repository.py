"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from marketplace.domain.exceptions import PersistenceError
from marketplace.domain.model.order import Order, OrderStatus
from marketplace.domain.model.value_objects import Money, Quantity
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.infrastructure.persistence.json_store import JsonDocumentStore

_COLLECTION = "orders"


class JsonOrderRepository(OrderRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def insert(self, order: Order) -> None:
        with self._store.locked(_COLLECTION):
            orders = self._store.load(_COLLECTION)
            if any(raw["id"] == order.id for raw in orders):
                raise PersistenceError(f"Order id {order.id} already exists")
            orders.append(self._to_raw(order))
            self._store.persist(_COLLECTION, orders)

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._store.load(_COLLECTION):
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_manufacturer(self, manufacturer_id: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._store.load(_COLLECTION)
            if raw["manufacturer_id"] == manufacturer_id
        ]

    def list_by_buyer(self, buyer_id: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._store.load(_COLLECTION)
            if raw["buyer_id"] == buyer_id
        ]

    def update_status_if(
        self,
        order_id: str,
        expected: OrderStatus,
        new: OrderStatus,
        at: datetime,
    ) -> Order | None:
        with self._store.locked(_COLLECTION):
            orders = self._store.load(_COLLECTION)
            for raw in orders:
                if raw["id"] != order_id:
                    continue
                if raw["status"] != expected.value:
                    return None
                raw["status"] = new.value
                raw["status_updated_at"] = at.isoformat()
                self._store.persist(_COLLECTION, orders)
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "status": order.status.value,
            "buyer_id": order.buyer_id,
            "buyer_name": order.buyer_name,
            "buyer_email": order.buyer_email,
            "buyer_mobile": order.buyer_mobile,
            "manufacturer_id": order.manufacturer_id,
            "manufacturer_name": order.manufacturer_name,
            "manufacturer_email": order.manufacturer_email,
            "manufacturer_mobile": order.manufacturer_mobile,
            "manufacturer_city": order.manufacturer_city,
            "manufacturer_state": order.manufacturer_state,
            "product_name": order.product_name,
            "price": str(order.price.amount),
            "quantity": order.quantity.value,
            "total": str(order.total.amount),
            "category": order.category,
            "department": order.department,
            "district": order.district,
            "product_state": order.product_state,
            "manufacture_date": (
                order.manufacture_date.isoformat() if order.manufacture_date else None
            ),
            "image": order.image,
            "order_date": order.order_date.isoformat(),
            "created_at": order.created_at.isoformat(),
            "status_updated_at": order.status_updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        manufacture_date = raw.get("manufacture_date")
        return Order(
            id=raw["id"],
            status=OrderStatus(raw["status"]),
            buyer_id=raw["buyer_id"],
            buyer_name=raw.get("buyer_name", ""),
            buyer_email=raw.get("buyer_email", ""),
            buyer_mobile=raw.get("buyer_mobile", ""),
            manufacturer_id=raw["manufacturer_id"],
            manufacturer_name=raw.get("manufacturer_name", ""),
            manufacturer_email=raw.get("manufacturer_email", ""),
            manufacturer_mobile=raw.get("manufacturer_mobile", ""),
            manufacturer_city=raw.get("manufacturer_city", ""),
            manufacturer_state=raw.get("manufacturer_state", ""),
            product_name=raw["product_name"],
            price=Money(Decimal(raw["price"])),
            quantity=Quantity(raw["quantity"]),
            total=Money(Decimal(raw["total"])),
            category=raw.get("category", ""),
            department=raw.get("department", ""),
            district=raw.get("district", ""),
            product_state=raw.get("product_state", ""),
            manufacture_date=date.fromisoformat(manufacture_date) if manufacture_date else None,
            image=raw.get("image"),
            order_date=datetime.fromisoformat(raw["order_date"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            status_updated_at=datetime.fromisoformat(raw["status_updated_at"]),
        )
