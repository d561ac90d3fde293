"""Domain service: Order Lifecycle.

Validates a manufacturer's requested status change and applies it with
a single conditional write. The write only lands if the order is still
in the status that was validated, so two racing transitions on the same
order can never both succeed.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import structlog

from marketplace.domain.exceptions import InvalidTransitionError, NotFoundError
from marketplace.domain.model.actor import Actor, ActorKind
from marketplace.domain.model.order import Order
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.service.access_guard import AccessGuard

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderLifecycleService:

    def __init__(
        self,
        order_repo: OrderRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def transition(self, order_id: str, requested_status: str, actor: Actor) -> Order:
        """Move an order to ``requested_status`` on behalf of ``actor``.

        Checks run in a fixed order so each failure is reported with its
        own exception: actor kind, existence, ownership, then workflow
        legality.
        """
        AccessGuard.require_kind(actor, ActorKind.MANUFACTURER)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")

        AccessGuard.require_order_owner(actor, order)

        now = self._clock()
        try:
            previous = order.transition_to(requested_status, now)
        except InvalidTransitionError as exc:
            logger.info(
                "Order transition rejected",
                order_id=order_id,
                current=exc.current,
                requested=exc.requested,
                allowed=exc.allowed,
            )
            raise

        updated = self._order_repo.update_status_if(
            order_id, expected=previous, new=order.status, at=now
        )
        if updated is None:
            # Someone else moved the order after we read it.
            raise self._lost_race(order_id, previous.value, order.status.value)

        logger.info(
            "Order status changed",
            order_id=order_id,
            manufacturer_id=actor.id,
            previous=previous.value,
            status=updated.status.value,
        )
        return updated

    def _lost_race(
        self, order_id: str, expected: str, requested: str
    ) -> InvalidTransitionError:
        current = self._order_repo.get_by_id(order_id)
        if current is None:
            raise NotFoundError(f"Order {order_id} not found")
        logger.warning(
            "Concurrent order transition lost",
            order_id=order_id,
            expected=expected,
            observed=current.status.value,
            requested=requested,
        )
        return InvalidTransitionError(
            order_id=order_id,
            current=current.status.value,
            requested=requested,
            allowed=[s.value for s in current.allowed_next],
        )
