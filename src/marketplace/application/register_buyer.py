"""Application service: Register Buyer use case."""

from __future__ import annotations

import uuid

import structlog

from marketplace.application.dto import BuyerDTO, buyer_to_dto
from marketplace.application.schemas import RegisterBuyerRequest
from marketplace.domain.model.buyer import Buyer
from marketplace.domain.repository.buyer_repository import BuyerRepository
from marketplace.domain.security import PasswordHasher

logger = structlog.get_logger(__name__)


class RegisterBuyerHandler:

    def __init__(self, buyer_repo: BuyerRepository, hasher: PasswordHasher) -> None:
        self._buyer_repo = buyer_repo
        self._hasher = hasher

    def handle(self, request: RegisterBuyerRequest) -> BuyerDTO:
        buyer = Buyer.register(
            id=uuid.uuid4().hex,
            username=request.username,
            password_hash=self._hasher.hash(request.password),
            name=request.name,
            email=request.email,
            mobile=request.mobile,
        )
        self._buyer_repo.add(buyer)

        logger.info("Buyer registered", buyer_id=buyer.id, username=buyer.username)
        return buyer_to_dto(buyer)
