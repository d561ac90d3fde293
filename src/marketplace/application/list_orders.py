"""Application service: List own Orders use case (query)."""

from __future__ import annotations

from marketplace.application.dto import OrderDTO, order_to_dto
from marketplace.domain.model.actor import Actor, ActorKind
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.service.access_guard import AccessGuard


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, actor: Actor, owner_id: str | None = None) -> list[OrderDTO]:
        """Orders placed by a buyer, or received by a manufacturer.

        ``owner_id`` defaults to the actor; naming anybody else is refused.
        Newest first.
        """
        owner_id = owner_id or actor.id
        AccessGuard.require_owner(actor, owner_id, resource="order list")

        if actor.kind is ActorKind.MANUFACTURER:
            orders = self._order_repo.list_by_manufacturer(owner_id)
        else:
            orders = self._order_repo.list_by_buyer(owner_id)

        orders.sort(key=lambda o: o.created_at, reverse=True)
        return [order_to_dto(o) for o in orders]
