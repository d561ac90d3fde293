"""JWT bearer tokens (HS256, via PyJWT).

The claims carry the actor id (``sub``), its kind, display attributes,
and the issue and expiry times (``iat``/``exp``, epoch seconds).
"""

from __future__ import annotations

import time
from typing import Callable

import jwt

from marketplace.domain.exceptions import AuthenticationError
from marketplace.domain.model.actor import ActorKind
from marketplace.domain.security import Claims, TokenService

ALGORITHM = "HS256"


class JwtTokenService(TokenService):

    def __init__(
        self,
        secret_key: str,
        default_ttl_seconds: int = 86400,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._key = secret_key
        self._default_ttl_seconds = default_ttl_seconds
        self._clock = clock

    def issue(self, claims: Claims, ttl_seconds: int | None = None) -> str:
        now = int(self._clock())
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl_seconds
        payload = {
            "sub": claims.subject,
            "kind": claims.kind.value,
            "name": claims.name,
            "email": claims.email,
            "iat": now,
            "exp": now + ttl,
        }
        return jwt.encode(payload, self._key, algorithm=ALGORITHM)

    def verify(self, token: str) -> Claims:
        try:
            payload = jwt.decode(
                token,
                self._key,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Token has expired") from exc
        except jwt.InvalidSignatureError as exc:
            raise AuthenticationError("Invalid token signature") from exc
        except jwt.DecodeError as exc:
            raise AuthenticationError("Malformed token") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError(f"Invalid token: {exc}") from exc

        try:
            kind = ActorKind(payload["kind"])
        except (KeyError, ValueError) as exc:
            raise AuthenticationError("Malformed token") from exc

        return Claims(
            subject=payload["sub"],
            kind=kind,
            name=payload.get("name", ""),
            email=payload.get("email", ""),
        )
