"""
Reservation manager — the only gateway between callers, the cache and the store.

Consistency rules:
  - every public operation runs under one manager-wide lock, store
    round-trip included, so the auto-sync thread and the front end never
    interleave inside the manager
  - view_all() is the only operation that replaces the cache wholesale;
    the others adjust a single key, and only after the store succeeded
  - the cache may be stale between refreshes; the store is the source of
    truth

A stale refresh can overwrite a mutation that landed after its scan began
elsewhere (another process, a direct SQL edit).  The next refresh repairs
it; nothing here tries to.
"""

import logging
import threading

from hotel_reservations.domain.cache import ReservationCache
from hotel_reservations.domain.errors import NotFoundError, PersistenceError
from hotel_reservations.domain.reservation import ReservationRecord
from hotel_reservations.domain.store import ReservationStore

log = logging.getLogger(__name__)


class ReservationManager:
    """
    Thread-safe facade over a ReservationStore with a write-through cache.

    Safe to call from any thread.  Each call may block for the duration of
    a store round-trip, including one started by another thread.
    """

    def __init__(self, store: ReservationStore):
        self._store = store
        self._cache = ReservationCache()
        self._lock = threading.RLock()

    def reserve(self, record: ReservationRecord) -> int:
        """Persist a new reservation, cache it, and return its id."""
        if record.is_persisted:
            raise ValueError(f"Reservation {record.reservation_id} is already persisted")
        with self._lock:
            reservation_id = self._store.insert(record)
            if not reservation_id:
                raise PersistenceError("Creating reservation failed, no ID obtained.")
            record.assign_id(reservation_id)
            self._cache.put(record)
            log.info("res=%d reserved room=%d guest=%r", reservation_id, record.room_number, record.guest_name)
            return reservation_id

    def view_all(self) -> list[ReservationRecord]:
        """Fetch every reservation from the store and make it the new cache content."""
        with self._lock:
            records = self._store.scan()
            self._cache.replace_all(records)
            log.debug("Cache refreshed: %d reservation(s)", len(records))
            return records

    def get_room(self, reservation_id: int, guest_name: str) -> int | None:
        """
        Room number for a reservation, or None.

        A cached record with the same id and exactly the same guest name
        answers without a store call, even if the store changed since the
        last refresh.
        """
        with self._lock:
            cached = self._cache.get(reservation_id)
            if cached is not None and cached.guest_name == guest_name:
                return cached.room_number
            return self._store.find_room(reservation_id, guest_name)

    def update(self, reservation_id: int, new_data: ReservationRecord) -> bool:
        """Replace a reservation in the store and the cache. Raises NotFoundError."""
        if new_data.reservation_id not in (0, reservation_id):
            raise ValueError(
                f"Replacement data belongs to reservation {new_data.reservation_id}, not {reservation_id}"
            )
        with self._lock:
            affected = self._store.update(reservation_id, new_data)
            if affected == 0:
                raise NotFoundError(reservation_id)
            new_data.assign_id(reservation_id)
            self._cache.put(new_data)
            log.info("res=%d updated room=%d guest=%r", reservation_id, new_data.room_number, new_data.guest_name)
            return True

    def delete(self, reservation_id: int) -> bool:
        """Remove a reservation from the store and the cache. Raises NotFoundError."""
        with self._lock:
            affected = self._store.delete(reservation_id)
            if affected == 0:
                raise NotFoundError(reservation_id)
            self._cache.remove(reservation_id)
            log.info("res=%d deleted", reservation_id)
            return True

    def cache_snapshot(self) -> list[ReservationRecord]:
        """Copy of the cache as of now. Never touches the store."""
        return self._cache.snapshot()
