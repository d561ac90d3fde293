"""Domain service: Access Guard.

Derives the acting identity from a bearer token and decides whether
that actor may touch a given resource. Every mutation and every
actor-scoped read goes through here before any use case logic runs;
public reads (the manufacturer directory) do not.
"""

from __future__ import annotations

import structlog

from marketplace.domain.exceptions import AuthenticationError, AuthorizationError
from marketplace.domain.model.actor import Actor, ActorKind
from marketplace.domain.model.order import Order
from marketplace.domain.security import TokenService

logger = structlog.get_logger(__name__)


class AccessGuard:

    def __init__(self, token_service: TokenService) -> None:
        self._token_service = token_service

    def authenticate(self, token: str | None) -> Actor:
        """Verify a bearer token and return the actor it names."""
        if not token or not token.strip():
            raise AuthenticationError("Authentication token is required")
        return self._token_service.verify(token.strip()).to_actor()

    @staticmethod
    def require_kind(actor: Actor, kind: ActorKind) -> None:
        if actor.kind is not kind:
            logger.warning(
                "Actor kind rejected",
                actor_id=actor.id,
                actor_kind=actor.kind.value,
                required=kind.value,
            )
            raise AuthorizationError(
                f"Only a {kind.value} may perform this action"
            )

    @staticmethod
    def require_owner(actor: Actor, owner_id: str, resource: str = "resource") -> None:
        if actor.id != owner_id:
            logger.warning(
                "Ownership check failed",
                actor_id=actor.id,
                owner_id=owner_id,
                resource=resource,
            )
            raise AuthorizationError(f"You do not own this {resource}")

    @classmethod
    def require_order_owner(cls, actor: Actor, order: Order) -> None:
        """Only the order's manufacturer may change it."""
        cls.require_kind(actor, ActorKind.MANUFACTURER)
        cls.require_owner(actor, order.manufacturer_id, resource=f"order {order.id}")

    @classmethod
    def require_order_reader(cls, actor: Actor, order: Order) -> None:
        """The buyer and the manufacturer of an order may read it."""
        if actor.kind is ActorKind.BUYER:
            owner_id = order.buyer_id
        else:
            owner_id = order.manufacturer_id
        cls.require_owner(actor, owner_id, resource=f"order {order.id}")
