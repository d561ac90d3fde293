"""JSON-file-backed implementation of ManufacturerRepository."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from marketplace.domain.exceptions import ConflictError
from marketplace.domain.model.manufacturer import Manufacturer
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.manufacturer_repository import ManufacturerRepository
from marketplace.infrastructure.persistence.json_store import JsonDocumentStore

_COLLECTION = "manufacturers"


class JsonManufacturerRepository(ManufacturerRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- ManufacturerRepository interface -------------------------------------

    def get_by_id(self, manufacturer_id: str) -> Manufacturer | None:
        for raw in self._store.load(_COLLECTION):
            if raw["id"] == manufacturer_id:
                return self._to_domain(raw)
        return None

    def get_by_username_or_email(self, login: str) -> Manufacturer | None:
        login = login.strip()
        for raw in self._store.load(_COLLECTION):
            if raw.get("username") == login or raw["email"] == login.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Manufacturer]:
        return [self._to_domain(raw) for raw in self._store.load(_COLLECTION)]

    def add(self, manufacturer: Manufacturer) -> None:
        with self._store.locked(_COLLECTION):
            records = self._store.load(_COLLECTION)
            for raw in records:
                if manufacturer.login_clashes_with(self._to_domain(raw)):
                    raise ConflictError("Email or username already exists")
            records.append(self._to_raw(manufacturer))
            self._store.persist(_COLLECTION, records)

    def update_products(
        self, manufacturer_id: str, products: list[Product], at: datetime
    ) -> Manufacturer | None:
        with self._store.locked(_COLLECTION):
            records = self._store.load(_COLLECTION)
            for i, raw in enumerate(records):
                if raw["id"] == manufacturer_id:
                    manufacturer = self._to_domain(raw)
                    manufacturer.replace_products(products, at)
                    records[i] = self._to_raw(manufacturer)
                    self._store.persist(_COLLECTION, records)
                    return manufacturer
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _product_to_raw(product: Product) -> dict:
        return {
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "category": product.category,
            "department": product.department,
            "district": product.district,
            "state": product.state,
            "manufacture_date": (
                product.manufacture_date.isoformat() if product.manufacture_date else None
            ),
            "image": product.image,
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _product_to_domain(raw: dict) -> Product:
        manufacture_date = raw.get("manufacture_date")
        return Product(
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            description=raw.get("description", ""),
            category=raw.get("category", ""),
            department=raw.get("department", ""),
            district=raw.get("district", ""),
            state=raw.get("state", ""),
            manufacture_date=date.fromisoformat(manufacture_date) if manufacture_date else None,
            image=raw.get("image"),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    @classmethod
    def _to_raw(cls, manufacturer: Manufacturer) -> dict:
        return {
            "id": manufacturer.id,
            "company_name": manufacturer.company_name,
            "owner_name": manufacturer.owner_name,
            "email": manufacturer.email,
            "username": manufacturer.username,
            "password_hash": manufacturer.password_hash,
            "mobile": manufacturer.mobile,
            "city": manufacturer.city,
            "state": manufacturer.state,
            "products": [cls._product_to_raw(p) for p in manufacturer.products],
            "updated_at": manufacturer.updated_at.isoformat(),
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> Manufacturer:
        return Manufacturer(
            id=raw["id"],
            company_name=raw["company_name"],
            owner_name=raw["owner_name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            username=raw.get("username"),
            mobile=raw.get("mobile", ""),
            city=raw.get("city", ""),
            state=raw.get("state", ""),
            products=[cls._product_to_domain(p) for p in raw.get("products", [])],
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
