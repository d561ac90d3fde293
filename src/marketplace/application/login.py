"""Application service: Login use case (both actor kinds).

A successful login returns a signed token whose claims identify the
actor and its kind; every later request presents that token to the
AccessGuard.
"""

from __future__ import annotations

import structlog

from marketplace.application.dto import LoginResultDTO
from marketplace.application.schemas import LoginRequest
from marketplace.domain.exceptions import AuthenticationError
from marketplace.domain.model.actor import ActorKind
from marketplace.domain.repository.buyer_repository import BuyerRepository
from marketplace.domain.repository.manufacturer_repository import ManufacturerRepository
from marketplace.domain.security import Claims, PasswordHasher, TokenService

logger = structlog.get_logger(__name__)


class LoginHandler:

    def __init__(
        self,
        manufacturer_repo: ManufacturerRepository,
        buyer_repo: BuyerRepository,
        hasher: PasswordHasher,
        token_service: TokenService,
        token_ttl_seconds: int | None = None,
    ) -> None:
        self._manufacturer_repo = manufacturer_repo
        self._buyer_repo = buyer_repo
        self._hasher = hasher
        self._token_service = token_service
        self._token_ttl_seconds = token_ttl_seconds

    def handle(self, kind: ActorKind, request: LoginRequest) -> LoginResultDTO:
        """Check credentials for ``kind`` and issue a token.

        Unknown accounts and wrong passwords fail with the same message so
        the response does not reveal which usernames exist.
        """
        claims, password_hash = self._lookup(kind, request.username)
        if claims is None or not self._hasher.matches(request.password, password_hash):
            logger.warning("Login failed", kind=kind.value, login=request.username)
            raise AuthenticationError("Invalid credentials")

        token = self._token_service.issue(claims, self._token_ttl_seconds)
        logger.info("Login succeeded", kind=kind.value, actor_id=claims.subject)
        return LoginResultDTO(
            token=token,
            actor_id=claims.subject,
            kind=kind.value,
            name=claims.name,
        )

    def _lookup(self, kind: ActorKind, login: str) -> tuple[Claims | None, str]:
        if kind is ActorKind.MANUFACTURER:
            manufacturer = self._manufacturer_repo.get_by_username_or_email(login)
            if manufacturer is None:
                return None, ""
            return (
                Claims(
                    subject=manufacturer.id,
                    kind=kind,
                    name=manufacturer.company_name,
                    email=manufacturer.email,
                ),
                manufacturer.password_hash,
            )

        buyer = self._buyer_repo.get_by_username(login)
        if buyer is None:
            return None, ""
        return (
            Claims(subject=buyer.id, kind=kind, name=buyer.name, email=buyer.email),
            buyer.password_hash,
        )
