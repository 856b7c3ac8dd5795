"""
Adapter contract for ReservationStore.

Any implementation (in-memory, SQLite, SQLAlchemy, ...) must pass these tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone

from hotel_reservations.domain.reservation import Priority, ReservationRecord, Standard
from hotel_reservations.domain.store import ReservationStore


def _record(name="Alice", room=101, contact="555-0101", variant=None) -> ReservationRecord:
    return ReservationRecord(name, room, contact, variant or Standard())


class ReservationStoreContract(ABC):

    @abstractmethod
    def create_store(self) -> ReservationStore:
        """Return a fresh, empty store."""
        ...

    # -- insert / scan -------------------------------------------------------

    def test_empty_store_scans_empty(self):
        store = self.create_store()
        assert store.scan() == []

    def test_insert_returns_positive_id(self):
        store = self.create_store()
        assert store.insert(_record()) > 0

    def test_insert_generates_distinct_ids(self):
        store = self.create_store()
        ids = {store.insert(_record(name=f"Guest {i}")) for i in range(5)}
        assert len(ids) == 5

    def test_scan_returns_inserted_fields(self):
        store = self.create_store()
        created = datetime(2026, 3, 1, 14, 30, tzinfo=timezone.utc)
        record = ReservationRecord("Alice", 101, "555-0101", created_at=created)
        rid = store.insert(record)

        [row] = store.scan()
        assert row.reservation_id == rid
        assert row.guest_name == "Alice"
        assert row.room_number == 101
        assert row.contact_number == "555-0101"
        assert row.created_at == created

    def test_scan_is_ordered_by_id(self):
        store = self.create_store()
        ids = [store.insert(_record(name=n)) for n in ("Carol", "Alice", "Bob")]
        assert [r.reservation_id for r in store.scan()] == sorted(ids)

    def test_priority_tier_survives_round_trip(self):
        store = self.create_store()
        store.insert(_record(variant=Priority("gold")))
        [row] = store.scan()
        assert row.rate_variant == Priority("gold")
        assert row.rate() == 80.0

    def test_insert_does_not_require_unique_room(self):
        store = self.create_store()
        store.insert(_record(name="Alice", room=7))
        store.insert(_record(name="Bob", room=7))
        assert len(store.scan()) == 2

    # -- find_room -----------------------------------------------------------

    def test_find_room_matches_id_and_name(self):
        store = self.create_store()
        rid = store.insert(_record(name="Alice", room=204))
        assert store.find_room(rid, "Alice") == 204

    def test_find_room_wrong_name_returns_none(self):
        store = self.create_store()
        rid = store.insert(_record(name="Alice"))
        assert store.find_room(rid, "alice") is None

    def test_find_room_unknown_id_returns_none(self):
        store = self.create_store()
        assert store.find_room(99999, "Alice") is None

    # -- update --------------------------------------------------------------

    def test_update_existing_returns_one(self):
        store = self.create_store()
        rid = store.insert(_record())
        assert store.update(rid, _record(name="Bob", room=300, contact="555-0300")) == 1
        [row] = store.scan()
        assert (row.guest_name, row.room_number, row.contact_number) == ("Bob", 300, "555-0300")

    def test_update_keeps_creation_date(self):
        store = self.create_store()
        created = datetime(2026, 1, 1, tzinfo=timezone.utc)
        rid = store.insert(ReservationRecord("Alice", 1, "", created_at=created))
        store.update(rid, _record(name="Bob"))
        [row] = store.scan()
        assert row.created_at == created

    def test_update_replaces_rate_variant(self):
        store = self.create_store()
        rid = store.insert(_record(variant=Priority("PLATINUM")))
        store.update(rid, _record())
        [row] = store.scan()
        assert row.rate_variant == Standard()

    def test_update_unknown_returns_zero(self):
        store = self.create_store()
        assert store.update(99999, _record()) == 0

    # -- delete --------------------------------------------------------------

    def test_delete_existing_returns_one(self):
        store = self.create_store()
        rid = store.insert(_record())
        assert store.delete(rid) == 1
        assert store.scan() == []

    def test_delete_unknown_returns_zero(self):
        store = self.create_store()
        assert store.delete(99999) == 0

    def test_delete_twice_second_returns_zero(self):
        store = self.create_store()
        rid = store.insert(_record())
        store.delete(rid)
        assert store.delete(rid) == 0

    def test_ids_not_reused_after_delete(self):
        store = self.create_store()
        first = store.insert(_record(name="Alice"))
        store.delete(first)
        second = store.insert(_record(name="Bob"))
        assert second != first

    # -- close ---------------------------------------------------------------

    def test_close_does_not_raise(self):
        store = self.create_store()
        store.insert(_record())
        store.close()
