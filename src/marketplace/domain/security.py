"""Abstract credential and token collaborators.

Defined in the domain layer so the use cases never depend on a specific
hashing scheme or token format. Concrete implementations live in
``marketplace.infrastructure.security``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from marketplace.domain.model.actor import Actor, ActorKind


@dataclass(frozen=True)
class Claims:
    """What a verified token says about its bearer."""

    subject: str
    kind: ActorKind
    name: str = ""
    email: str = ""

    def to_actor(self) -> Actor:
        return Actor(id=self.subject, kind=self.kind, name=self.name)


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, secret: str) -> str:
        """Return a one-way hash of ``secret``."""

    @abstractmethod
    def matches(self, secret: str, hashed: str) -> bool:
        """True if ``secret`` produced ``hashed``."""


class TokenService(ABC):

    @abstractmethod
    def issue(self, claims: Claims, ttl_seconds: int | None = None) -> str:
        """Return an opaque signed token carrying ``claims``."""

    @abstractmethod
    def verify(self, token: str) -> Claims:
        """Return the claims of a valid token.

        Raises AuthenticationError for malformed, tampered or expired tokens.
        """
