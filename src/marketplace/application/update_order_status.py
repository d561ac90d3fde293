"""Application service: Update Order Status use case.

Thin wrapper around the OrderLifecycleService domain service, which
owns the workflow rules and the conditional write.
"""

from __future__ import annotations

from marketplace.application.dto import OrderDTO, order_to_dto
from marketplace.application.schemas import UpdateOrderStatusRequest
from marketplace.domain.model.actor import Actor
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.service.order_lifecycle import OrderLifecycleService


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self, actor: Actor, order_id: str, request: UpdateOrderStatusRequest
    ) -> OrderDTO:
        svc = OrderLifecycleService(self._order_repo)
        order = svc.transition(order_id, request.status, actor)
        return order_to_dto(order)
