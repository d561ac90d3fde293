"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates several aggregates (Buyer and
Manufacturer lookup + Order snapshot creation).
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from marketplace.application.dto import OrderDTO, order_to_dto
from marketplace.application.schemas import CreateOrderRequest
from marketplace.domain.exceptions import NotFoundError
from marketplace.domain.model.actor import Actor, ActorKind
from marketplace.domain.model.order import Order
from marketplace.domain.model.value_objects import Money, Quantity
from marketplace.domain.repository.buyer_repository import BuyerRepository
from marketplace.domain.repository.manufacturer_repository import ManufacturerRepository
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.service.access_guard import AccessGuard

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        manufacturer_repo: ManufacturerRepository,
        buyer_repo: BuyerRepository,
        verify_catalog: bool = False,
    ) -> None:
        self._order_repo = order_repo
        self._manufacturer_repo = manufacturer_repo
        self._buyer_repo = buyer_repo
        self._verify_catalog = verify_catalog

    def handle(self, actor: Actor, request: CreateOrderRequest) -> OrderDTO:
        """Place an order on behalf of the authenticated buyer.

        Steps:
        1. Only buyers may order; both parties must exist.
        2. Take the product price and metadata from the request, or from
           the manufacturer's live catalog when ``verify_catalog`` is on.
        3. Let the Order aggregate snapshot everything and check the total.
        4. Persist and return a DTO.
        """
        AccessGuard.require_kind(actor, ActorKind.BUYER)

        buyer = self._buyer_repo.get_by_id(actor.id)
        if buyer is None:
            raise NotFoundError(f"Buyer {actor.id} not found")

        manufacturer = self._manufacturer_repo.get_by_id(request.manufacturer_id)
        if manufacturer is None:
            raise NotFoundError(f"Manufacturer {request.manufacturer_id} not found")

        details = {
            "product_name": request.product_name,
            "price": Money(request.price),
            "category": request.category,
            "department": request.department,
            "district": request.district,
            "product_state": request.state,
            "manufacture_date": request.manufacture_date,
            "image": request.image,
        }
        total = Money(request.total) if request.total is not None else None

        if self._verify_catalog:
            product = manufacturer.find_product(request.product_name)
            if product is None:
                raise NotFoundError(
                    f"Product '{request.product_name}' not found in "
                    f"{manufacturer.company_name}'s catalog"
                )
            details.update(
                product_name=product.name,
                price=product.price,
                category=product.category,
                department=product.department,
                district=product.district,
                product_state=product.state,
                manufacture_date=product.manufacture_date,
                image=product.image,
            )
            # A client-supplied total was computed from a price we no
            # longer trust.
            total = None

        order = Order.create(
            buyer=buyer,
            manufacturer=manufacturer,
            quantity=Quantity(request.quantity),
            now=datetime.now(timezone.utc),
            total=total,
            **details,
        )
        self._order_repo.insert(order)

        logger.info(
            "Order created",
            order_id=order.id,
            buyer_id=buyer.id,
            manufacturer_id=manufacturer.id,
            total=str(order.total),
        )
        return order_to_dto(order)
