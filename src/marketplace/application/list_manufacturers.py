"""Application service: List Manufacturers use case (public query)."""

from __future__ import annotations

from marketplace.application.dto import ManufacturerDTO, manufacturer_to_dto
from marketplace.domain.repository.manufacturer_repository import ManufacturerRepository


class ListManufacturersHandler:

    def __init__(self, manufacturer_repo: ManufacturerRepository) -> None:
        self._manufacturer_repo = manufacturer_repo

    def handle(self) -> list[ManufacturerDTO]:
        """Every manufacturer with its catalog. No access check: this is the
        public directory buyers browse before ordering."""
        return [manufacturer_to_dto(m) for m in self._manufacturer_repo.list_all()]
