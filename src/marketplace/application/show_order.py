"""Application service: Show Order use case (query)."""

from __future__ import annotations

from marketplace.application.dto import OrderDTO, order_to_dto
from marketplace.domain.exceptions import NotFoundError
from marketplace.domain.model.actor import Actor
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.service.access_guard import AccessGuard


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, actor: Actor, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        AccessGuard.require_order_reader(actor, order)
        return order_to_dto(order)
