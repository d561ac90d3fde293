"""Abstract repository for Buyer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from marketplace.domain.model.buyer import Buyer


class BuyerRepository(ABC):

    @abstractmethod
    def get_by_id(self, buyer_id: str) -> Buyer | None:
        """Return a buyer by its ID, or None if not found."""

    @abstractmethod
    def get_by_username(self, username: str) -> Buyer | None:
        """Return a buyer by username, or None if not found."""

    @abstractmethod
    def add(self, buyer: Buyer) -> None:
        """Persist a new buyer. Raises ConflictError on a taken username."""
