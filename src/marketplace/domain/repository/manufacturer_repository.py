"""Abstract repository for Manufacturer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from marketplace.domain.model.manufacturer import Manufacturer
from marketplace.domain.model.product import Product


class ManufacturerRepository(ABC):

    @abstractmethod
    def get_by_id(self, manufacturer_id: str) -> Manufacturer | None:
        """Return a manufacturer by its ID, or None if not found."""

    @abstractmethod
    def get_by_username_or_email(self, login: str) -> Manufacturer | None:
        """Return the manufacturer whose username or email equals ``login``."""

    @abstractmethod
    def list_all(self) -> list[Manufacturer]:
        """Return every manufacturer."""

    @abstractmethod
    def add(self, manufacturer: Manufacturer) -> None:
        """Persist a new manufacturer.

        Raises ConflictError if the email or username is already taken.
        """

    @abstractmethod
    def update_products(
        self, manufacturer_id: str, products: list[Product], at: datetime
    ) -> Manufacturer | None:
        """Replace the whole catalog. Returns None if the id is unknown."""
