"""The authenticated identity behind a request."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActorKind(Enum):
    MANUFACTURER = "manufacturer"
    BUYER = "buyer"


@dataclass(frozen=True)
class Actor:
    id: str
    kind: ActorKind
    name: str = ""
