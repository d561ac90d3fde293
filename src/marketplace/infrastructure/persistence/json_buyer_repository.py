"""JSON-file-backed implementation of BuyerRepository."""

from __future__ import annotations

from marketplace.domain.exceptions import ConflictError
from marketplace.domain.model.buyer import Buyer
from marketplace.domain.repository.buyer_repository import BuyerRepository
from marketplace.infrastructure.persistence.json_store import JsonDocumentStore

_COLLECTION = "buyers"


class JsonBuyerRepository(BuyerRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def get_by_id(self, buyer_id: str) -> Buyer | None:
        for raw in self._store.load(_COLLECTION):
            if raw["id"] == buyer_id:
                return self._to_domain(raw)
        return None

    def get_by_username(self, username: str) -> Buyer | None:
        for raw in self._store.load(_COLLECTION):
            if raw["username"] == username.strip():
                return self._to_domain(raw)
        return None

    def add(self, buyer: Buyer) -> None:
        with self._store.locked(_COLLECTION):
            records = self._store.load(_COLLECTION)
            if any(raw["username"] == buyer.username for raw in records):
                raise ConflictError(f"Username '{buyer.username}' already exists")
            records.append(self._to_raw(buyer))
            self._store.persist(_COLLECTION, records)

    @staticmethod
    def _to_raw(buyer: Buyer) -> dict:
        return {
            "id": buyer.id,
            "username": buyer.username,
            "password_hash": buyer.password_hash,
            "name": buyer.name,
            "email": buyer.email,
            "mobile": buyer.mobile,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Buyer:
        return Buyer(
            id=raw["id"],
            username=raw["username"],
            password_hash=raw["password_hash"],
            name=raw.get("name", ""),
            email=raw.get("email", ""),
            mobile=raw.get("mobile", ""),
        )
