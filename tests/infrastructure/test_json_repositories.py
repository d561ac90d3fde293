"""Tests for the JSON document store and its repositories (on tmp_path)."""

import threading
import time
from datetime import date, datetime, timezone

import pytest

from marketplace.domain.exceptions import ConflictError, PersistenceError
from marketplace.domain.model.buyer import Buyer
from marketplace.domain.model.manufacturer import Manufacturer
from marketplace.domain.model.order import Order, OrderStatus
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money, Quantity
from marketplace.infrastructure.persistence.json_buyer_repository import JsonBuyerRepository
from marketplace.infrastructure.persistence.json_manufacturer_repository import (
    JsonManufacturerRepository,
)
from marketplace.infrastructure.persistence.json_order_repository import JsonOrderRepository
from marketplace.infrastructure.persistence.json_store import JsonDocumentStore

NOW = datetime(2026, 10, 17, 9, 0, tzinfo=timezone.utc)
LATER = datetime(2026, 10, 17, 11, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(tmp_path):
    with JsonDocumentStore(tmp_path / "data") as opened:
        yield opened


def _manufacturer(**overrides) -> Manufacturer:
    fields = dict(
        id="m1",
        company_name="Loom Works",
        owner_name="Ravi",
        email="loom@example.com",
        password_hash="hash",
        username="loom",
        products=[
            Product(
                name="Saree",
                price=Money.of("99.50"),
                manufacture_date=date(2026, 9, 1),
                image="saree.png",
                updated_at=NOW,
            )
        ],
        updated_at=NOW,
    )
    fields.update(overrides)
    return Manufacturer(**fields)


def _order(order_id: str = "ORD-1", **overrides) -> Order:
    fields = dict(
        id=order_id,
        buyer_id="b1",
        buyer_name="Asha",
        manufacturer_id="m1",
        manufacturer_name="Loom Works",
        product_name="Saree",
        price=Money.of("100"),
        quantity=Quantity(3),
        total=Money.of("300"),
        manufacture_date=date(2026, 9, 1),
        order_date=NOW,
        created_at=NOW,
        status_updated_at=NOW,
    )
    fields.update(overrides)
    return Order(**fields)


class TestDocumentStore:

    def test_closed_store_refuses_access(self, tmp_path):
        store = JsonDocumentStore(tmp_path)
        with pytest.raises(PersistenceError, match="not open"):
            store.load("orders")

    def test_missing_collection_is_empty(self, store):
        assert store.load("orders") == []

    def test_corrupt_collection_is_persistence_error(self, store, tmp_path):
        (tmp_path / "data" / "orders.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(PersistenceError, match="Cannot read orders"):
            store.load("orders")

    def test_persist_leaves_no_temp_file(self, store, tmp_path):
        store.persist("orders", [{"id": "x"}])
        assert sorted(p.name for p in (tmp_path / "data").iterdir()) == ["orders.json"]


class TestJsonOrderRepository:

    def test_round_trip(self, store):
        repo = JsonOrderRepository(store)
        repo.insert(_order())

        loaded = repo.get_by_id("ORD-1")
        assert loaded == _order()

    def test_insert_duplicate_id(self, store):
        repo = JsonOrderRepository(store)
        repo.insert(_order())
        with pytest.raises(PersistenceError, match="already exists"):
            repo.insert(_order())

    def test_list_by_party(self, store):
        repo = JsonOrderRepository(store)
        repo.insert(_order("ORD-1"))
        repo.insert(_order("ORD-2", buyer_id="b2", manufacturer_id="m2"))

        assert [o.id for o in repo.list_by_buyer("b1")] == ["ORD-1"]
        assert [o.id for o in repo.list_by_manufacturer("m2")] == ["ORD-2"]

    def test_conditional_update_applies_when_expected(self, store):
        repo = JsonOrderRepository(store)
        repo.insert(_order())

        updated = repo.update_status_if("ORD-1", OrderStatus.PENDING, OrderStatus.ALLOWED, LATER)

        assert updated.status == OrderStatus.ALLOWED
        assert updated.status_updated_at == LATER
        assert repo.get_by_id("ORD-1").status == OrderStatus.ALLOWED

    def test_conditional_update_refused_when_moved_on(self, store):
        repo = JsonOrderRepository(store)
        repo.insert(_order(status=OrderStatus.CANCELLED))

        result = repo.update_status_if("ORD-1", OrderStatus.PENDING, OrderStatus.ALLOWED, LATER)

        assert result is None
        stored = repo.get_by_id("ORD-1")
        assert stored.status == OrderStatus.CANCELLED
        assert stored.status_updated_at == NOW

    def test_conditional_update_missing_order(self, store):
        repo = JsonOrderRepository(store)
        assert repo.update_status_if("nope", OrderStatus.PENDING, OrderStatus.ALLOWED, LATER) is None


class TestJsonManufacturerRepository:

    def test_round_trip(self, store):
        repo = JsonManufacturerRepository(store)
        repo.add(_manufacturer())
        assert repo.get_by_id("m1") == _manufacturer()

    def test_lookup_by_username_or_email(self, store):
        repo = JsonManufacturerRepository(store)
        repo.add(_manufacturer())
        assert repo.get_by_username_or_email("loom").id == "m1"
        assert repo.get_by_username_or_email("Loom@Example.com").id == "m1"
        assert repo.get_by_username_or_email("nobody") is None

    def test_duplicate_email_conflicts(self, store):
        repo = JsonManufacturerRepository(store)
        repo.add(_manufacturer())
        with pytest.raises(ConflictError):
            repo.add(_manufacturer(id="m2", username="other"))

    @pytest.mark.parametrize(
        "first, second",
        [
            ({"username": "loom"}, {"id": "m2", "email": "clay@example.com", "username": "Loom"}),
            ({"username": "loom"}, {"id": "m2", "email": "clay@example.com", "username": "loom@example.com"}),
            ({"username": "clay@example.com"}, {"id": "m2", "email": "clay@example.com", "username": None}),
        ],
    )
    def test_login_names_must_not_overlap(self, store, first, second):
        repo = JsonManufacturerRepository(store)
        repo.add(_manufacturer(**first))
        with pytest.raises(ConflictError):
            repo.add(_manufacturer(**second))
        assert [m.id for m in repo.list_all()] == ["m1"]

    def test_update_products(self, store):
        repo = JsonManufacturerRepository(store)
        repo.add(_manufacturer())

        updated = repo.update_products("m1", [Product(name="Shawl", price=Money.of("40"))], LATER)

        assert [p.name for p in updated.products] == ["Shawl"]
        stored = repo.get_by_id("m1")
        assert [p.name for p in stored.products] == ["Shawl"]
        assert stored.products[0].updated_at == LATER
        assert stored.updated_at == LATER

    def test_update_products_unknown(self, store):
        repo = JsonManufacturerRepository(store)
        assert repo.update_products("m9", [], LATER) is None

    def test_list_all(self, store):
        repo = JsonManufacturerRepository(store)
        repo.add(_manufacturer())
        repo.add(_manufacturer(id="m2", email="clay@example.com", username=None))
        assert [m.id for m in repo.list_all()] == ["m1", "m2"]


class TestJsonBuyerRepository:

    def test_round_trip_and_conflict(self, store):
        repo = JsonBuyerRepository(store)
        buyer = Buyer(id="b1", username="asha", password_hash="hash", name="Asha")
        repo.add(buyer)

        assert repo.get_by_id("b1") == buyer
        assert repo.get_by_username("asha") == buyer
        with pytest.raises(ConflictError):
            repo.add(Buyer(id="b2", username="asha", password_hash="hash"))


class _SlowLoadStore(JsonDocumentStore):
    """Pauses after every read so racing writers overlap."""

    def load(self, collection: str) -> list[dict]:
        records = super().load(collection)
        time.sleep(0.2)
        return records


class TestSeparateStoreHandles:
    """Each CLI invocation opens its own store on the shared data dir."""

    def test_only_one_conditional_update_wins(self, tmp_path):
        data_dir = tmp_path / "data"
        with JsonDocumentStore(data_dir) as setup:
            JsonOrderRepository(setup).insert(_order())

        barrier = threading.Barrier(2)
        results: dict[OrderStatus, Order | None] = {}

        def attempt(target: OrderStatus) -> None:
            with _SlowLoadStore(data_dir) as store:
                repo = JsonOrderRepository(store)
                barrier.wait()
                results[target] = repo.update_status_if("ORD-1", OrderStatus.PENDING, target, LATER)

        threads = [
            threading.Thread(target=attempt, args=(status,))
            for status in (OrderStatus.ALLOWED, OrderStatus.CANCELLED)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        winners = [status for status, updated in results.items() if updated is not None]
        assert len(results) == 2
        assert len(winners) == 1
        with JsonDocumentStore(data_dir) as check:
            assert JsonOrderRepository(check).get_by_id("ORD-1").status == winners[0]

    def test_concurrent_inserts_are_all_kept(self, tmp_path):
        data_dir = tmp_path / "data"

        def place(order_id: str) -> None:
            with _SlowLoadStore(data_dir) as store:
                JsonOrderRepository(store).insert(_order(order_id))

        threads = [threading.Thread(target=place, args=(f"ORD-{i}",)) for i in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        with JsonDocumentStore(data_dir) as check:
            stored = JsonOrderRepository(check).list_by_buyer("b1")
        assert sorted(o.id for o in stored) == ["ORD-0", "ORD-1", "ORD-2"]
        assert not list(data_dir.glob("*.tmp"))

    def test_locked_is_reentrant(self, store):
        with store.locked("orders"):
            with store.locked("orders"):
                store.persist("orders", [])
        assert store.load("orders") == []
