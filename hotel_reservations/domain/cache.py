"""
ReservationCache — in-memory, possibly stale mirror of the store.

Keys are reservation ids; iteration follows insertion order.  The cache has
its own lock so that readers never see a half-replaced mapping while
replace_all() swaps in a fresh scan.

Records are copied on the way in and on the way out, so nothing a caller
holds can change a cached entry behind the manager.
"""

import threading
from dataclasses import replace
from typing import Iterable

from hotel_reservations.domain.reservation import ReservationRecord


class ReservationCache:

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: dict[int, ReservationRecord] = {}

    def get(self, reservation_id: int) -> ReservationRecord | None:
        with self._lock:
            record = self._entries.get(reservation_id)
        return replace(record) if record is not None else None

    def put(self, record: ReservationRecord) -> None:
        """Insert or replace the entry for record.reservation_id."""
        if not record.is_persisted:
            raise ValueError("Cannot cache a reservation without an id")
        with self._lock:
            self._entries[record.reservation_id] = replace(record)

    def remove(self, reservation_id: int) -> None:
        with self._lock:
            self._entries.pop(reservation_id, None)

    def replace_all(self, records: Iterable[ReservationRecord]) -> None:
        """Drop every entry and install records, keeping their order."""
        fresh = {r.reservation_id: replace(r) for r in records}
        with self._lock:
            self._entries = fresh

    def snapshot(self) -> list[ReservationRecord]:
        with self._lock:
            records = list(self._entries.values())
        return [replace(r) for r in records]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, reservation_id: object) -> bool:
        with self._lock:
            return reservation_id in self._entries
