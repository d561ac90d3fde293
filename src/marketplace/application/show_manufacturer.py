"""Application service: Show own Manufacturer profile (query)."""

from __future__ import annotations

from marketplace.application.dto import ManufacturerDTO, manufacturer_to_dto
from marketplace.domain.exceptions import NotFoundError
from marketplace.domain.model.actor import Actor, ActorKind
from marketplace.domain.repository.manufacturer_repository import ManufacturerRepository
from marketplace.domain.service.access_guard import AccessGuard


class ShowManufacturerHandler:

    def __init__(self, manufacturer_repo: ManufacturerRepository) -> None:
        self._manufacturer_repo = manufacturer_repo

    def handle(self, actor: Actor, manufacturer_id: str | None = None) -> ManufacturerDTO:
        manufacturer_id = manufacturer_id or actor.id
        AccessGuard.require_kind(actor, ActorKind.MANUFACTURER)
        AccessGuard.require_owner(actor, manufacturer_id, resource="profile")

        manufacturer = self._manufacturer_repo.get_by_id(manufacturer_id)
        if manufacturer is None:
            raise NotFoundError(f"Manufacturer {manufacturer_id} not found")
        return manufacturer_to_dto(manufacturer)
