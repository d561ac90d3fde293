"""Application service: Replace Catalog use case.

The catalog is swapped as a whole; individual products are never
patched. Existing orders are unaffected because they captured their
own snapshot of the product at creation time.
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from marketplace.application.dto import ManufacturerDTO, manufacturer_to_dto
from marketplace.application.schemas import ProductSchema, ReplaceCatalogRequest
from marketplace.domain.exceptions import NotFoundError
from marketplace.domain.model.actor import Actor, ActorKind
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.manufacturer_repository import ManufacturerRepository
from marketplace.domain.service.access_guard import AccessGuard

logger = structlog.get_logger(__name__)


def build_products(schemas: list[ProductSchema], at: datetime) -> list[Product]:
    return [
        Product(
            name=s.name,
            price=Money(s.price),
            description=s.description,
            category=s.category,
            department=s.department,
            district=s.district,
            state=s.state,
            manufacture_date=s.manufacture_date,
            image=s.image,
            updated_at=at,
        )
        for s in schemas
    ]


class ReplaceCatalogHandler:

    def __init__(self, manufacturer_repo: ManufacturerRepository) -> None:
        self._manufacturer_repo = manufacturer_repo

    def handle(
        self,
        actor: Actor,
        request: ReplaceCatalogRequest,
        manufacturer_id: str | None = None,
    ) -> ManufacturerDTO:
        manufacturer_id = manufacturer_id or actor.id
        AccessGuard.require_kind(actor, ActorKind.MANUFACTURER)
        AccessGuard.require_owner(actor, manufacturer_id, resource="catalog")

        now = datetime.now(timezone.utc)
        products = build_products(request.products, now)

        manufacturer = self._manufacturer_repo.update_products(manufacturer_id, products, now)
        if manufacturer is None:
            raise NotFoundError(f"Manufacturer {manufacturer_id} not found")

        logger.info(
            "Catalog replaced",
            manufacturer_id=manufacturer_id,
            products=len(products),
        )
        return manufacturer_to_dto(manufacturer)
