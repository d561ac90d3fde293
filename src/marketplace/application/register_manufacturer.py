"""Application service: Register Manufacturer use case."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

import structlog

from marketplace.application.dto import ManufacturerDTO, manufacturer_to_dto
from marketplace.application.replace_catalog import build_products
from marketplace.application.schemas import RegisterManufacturerRequest
from marketplace.domain.model.manufacturer import Manufacturer
from marketplace.domain.repository.manufacturer_repository import ManufacturerRepository
from marketplace.domain.security import PasswordHasher

logger = structlog.get_logger(__name__)


class RegisterManufacturerHandler:

    def __init__(
        self,
        manufacturer_repo: ManufacturerRepository,
        hasher: PasswordHasher,
    ) -> None:
        self._manufacturer_repo = manufacturer_repo
        self._hasher = hasher

    def handle(self, request: RegisterManufacturerRequest) -> ManufacturerDTO:
        """Create a seller account, optionally with an initial catalog.

        Email and username uniqueness is enforced by the repository at
        insert time (ConflictError).
        """
        now = datetime.now(timezone.utc)
        manufacturer = Manufacturer.register(
            id=uuid.uuid4().hex,
            company_name=request.company_name,
            owner_name=request.owner_name,
            email=request.email,
            password_hash=self._hasher.hash(request.password),
            username=request.username,
            mobile=request.mobile,
            city=request.city,
            state=request.state,
            products=build_products(request.products, now),
        )
        self._manufacturer_repo.add(manufacturer)

        logger.info(
            "Manufacturer registered",
            manufacturer_id=manufacturer.id,
            company_name=manufacturer.company_name,
            products=len(manufacturer.products),
        )
        return manufacturer_to_dto(manufacturer)
