"""Composition root: builds the concrete store, security services and
repositories behind the domain interfaces.

Every other module depends only on abstractions.

A single ``Container`` owns the process-wide document store handle; it
is opened once at startup and closed at shutdown, and every repository
it hands out shares that handle.
"""

from __future__ import annotations

import structlog

from marketplace.domain.service.access_guard import AccessGuard
from marketplace.infrastructure.config import Settings
from marketplace.infrastructure.persistence.json_buyer_repository import (
    JsonBuyerRepository,
)
from marketplace.infrastructure.persistence.json_manufacturer_repository import (
    JsonManufacturerRepository,
)
from marketplace.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from marketplace.infrastructure.persistence.json_store import JsonDocumentStore
from marketplace.infrastructure.security.bcrypt_hasher import BcryptPasswordHasher
from marketplace.infrastructure.security.jwt_tokens import JwtTokenService

logger = structlog.get_logger(__name__)


class Container:

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.store = JsonDocumentStore(settings.data_dir)
        self.hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
        self.token_service = JwtTokenService(
            settings.secret_key, default_ttl_seconds=settings.token_ttl_seconds
        )
        self.guard = AccessGuard(self.token_service)

    # --- Lifecycle ------------------------------------------------------------

    def open(self) -> Container:
        if self.settings.uses_dev_secret:
            logger.warning(
                "Using the development token secret; set MARKETPLACE_SECRET_KEY"
            )
        self.store.open()
        return self

    def close(self) -> None:
        self.store.close()

    def __enter__(self) -> Container:
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Repositories ---------------------------------------------------------

    def order_repository(self) -> JsonOrderRepository:
        return JsonOrderRepository(self.store)

    def manufacturer_repository(self) -> JsonManufacturerRepository:
        return JsonManufacturerRepository(self.store)

    def buyer_repository(self) -> JsonBuyerRepository:
        return JsonBuyerRepository(self.store)
