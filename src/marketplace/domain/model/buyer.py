"""Buyer aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from marketplace.domain.exceptions import ValidationError


@dataclass
class Buyer:

    id: str
    username: str
    password_hash: str
    name: str = ""
    email: str = ""
    mobile: str = ""

    @staticmethod
    def register(
        id: str,
        username: str,
        password_hash: str,
        name: str = "",
        email: str = "",
        mobile: str = "",
    ) -> Buyer:
        if not username or not username.strip():
            raise ValidationError("Username is required")
        return Buyer(
            id=id,
            username=username.strip(),
            password_hash=password_hash,
            name=name.strip(),
            email=email.strip().lower(),
            mobile=mobile,
        )
