"""Integration tests for catalog replacement and the manufacturer directory."""

from decimal import Decimal

import pytest

from marketplace.application.list_manufacturers import ListManufacturersHandler
from marketplace.application.replace_catalog import ReplaceCatalogHandler
from marketplace.application.schemas import ProductSchema, ReplaceCatalogRequest
from marketplace.application.show_manufacturer import ShowManufacturerHandler
from marketplace.domain.exceptions import AuthorizationError, NotFoundError
from marketplace.domain.model.actor import Actor, ActorKind
from marketplace.domain.model.manufacturer import Manufacturer
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money
from tests.fakes import FakeManufacturerRepository

OWNER = Actor(id="m1", kind=ActorKind.MANUFACTURER)


def _setup() -> FakeManufacturerRepository:
    return FakeManufacturerRepository([
        Manufacturer(
            id="m1",
            company_name="Loom Works",
            owner_name="Ravi",
            email="loom@example.com",
            password_hash="secret-hash",
            products=[Product(name="Old Saree", price=Money.of("90"))],
        ),
        Manufacturer(
            id="m2",
            company_name="Clay Co",
            owner_name="Mina",
            email="clay@example.com",
            password_hash="secret-hash",
        ),
    ])


def _catalog(*names: str) -> ReplaceCatalogRequest:
    return ReplaceCatalogRequest(
        products=[ProductSchema(name=n, price=Decimal("10"), category="Textiles") for n in names]
    )


class TestReplaceCatalog:

    def test_owner_replaces_whole_catalog(self):
        repo = _setup()
        dto = ReplaceCatalogHandler(repo).handle(OWNER, _catalog("Silk Saree", "Shawl"))

        assert [p.name for p in dto.products] == ["Silk Saree", "Shawl"]
        stored = repo.get_by_id("m1")
        assert [p.name for p in stored.products] == ["Silk Saree", "Shawl"]
        assert stored.products[0].category == "Textiles"
        assert stored.products[0].updated_at == stored.updated_at

    def test_empty_catalog_allowed(self):
        repo = _setup()
        dto = ReplaceCatalogHandler(repo).handle(OWNER, ReplaceCatalogRequest(products=[]))
        assert dto.products == []

    def test_other_manufacturer_rejected(self):
        repo = _setup()
        intruder = Actor(id="m2", kind=ActorKind.MANUFACTURER)
        with pytest.raises(AuthorizationError):
            ReplaceCatalogHandler(repo).handle(intruder, _catalog("Fake"), manufacturer_id="m1")
        assert [p.name for p in repo.get_by_id("m1").products] == ["Old Saree"]

    def test_buyer_rejected(self):
        repo = _setup()
        buyer = Actor(id="m1", kind=ActorKind.BUYER)
        with pytest.raises(AuthorizationError):
            ReplaceCatalogHandler(repo).handle(buyer, _catalog("Fake"))

    def test_unknown_manufacturer(self):
        repo = _setup()
        ghost = Actor(id="m9", kind=ActorKind.MANUFACTURER)
        with pytest.raises(NotFoundError):
            ReplaceCatalogHandler(repo).handle(ghost, _catalog("X"))


class TestManufacturerQueries:

    def test_public_listing_needs_no_actor(self):
        dtos = ListManufacturersHandler(_setup()).handle()
        assert {d.company_name for d in dtos} == {"Loom Works", "Clay Co"}
        assert all(not hasattr(d, "password_hash") for d in dtos)

    def test_show_own_profile(self):
        dto = ShowManufacturerHandler(_setup()).handle(OWNER)
        assert dto.id == "m1"
        assert dto.products[0].name == "Old Saree"

    def test_show_someone_elses_profile_rejected(self):
        with pytest.raises(AuthorizationError):
            ShowManufacturerHandler(_setup()).handle(OWNER, manufacturer_id="m2")
