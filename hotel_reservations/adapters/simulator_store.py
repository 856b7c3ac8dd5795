"""
In-memory ReservationStore for testing — no database required.
"""

import threading
from dataclasses import replace

from hotel_reservations.domain.errors import PersistenceError
from hotel_reservations.domain.reservation import ReservationRecord
from hotel_reservations.domain.store import ReservationStore


class InMemoryReservationStore(ReservationStore):
    """
    In-memory fake for testing. No mocking framework needed.

    Test helpers:
        calls                 — list of operation names, in call order
        fail_next(op, exc)    — make the next call to `op` raise exc
        edit_directly(id, …)  — change a row behind the manager's back
        on_scan               — optional callable run inside scan(), before
                                it returns (lets tests widen race windows)
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._rows: dict[int, ReservationRecord] = {}
        self._next_id = 1
        self._failures: dict[str, Exception] = {}
        self.calls: list[str] = []
        self.on_scan = None

    # -- test helpers --------------------------------------------------------

    def fail_next(self, op: str, exc: Exception | None = None) -> None:
        """Test helper: the next call to `op` raises exc (PersistenceError by default)."""
        self._failures[op] = exc or PersistenceError(f"Simulated {op} failure")

    def edit_directly(self, reservation_id: int, **changes) -> None:
        """Test helper: modify a stored row without going through the manager."""
        with self._lock:
            self._rows[reservation_id] = replace(self._rows[reservation_id], **changes)

    # -- ReservationStore ----------------------------------------------------

    def insert(self, record: ReservationRecord) -> int:
        with self._lock:
            self._enter("insert")
            reservation_id = self._next_id
            self._next_id += 1
            self._rows[reservation_id] = replace(record, reservation_id=reservation_id)
            return reservation_id

    def scan(self) -> list[ReservationRecord]:
        with self._lock:
            self._enter("scan")
            records = [replace(r) for _, r in sorted(self._rows.items())]
        if self.on_scan is not None:
            self.on_scan()
        return records

    def find_room(self, reservation_id: int, guest_name: str) -> int | None:
        with self._lock:
            self._enter("find_room")
            row = self._rows.get(reservation_id)
            if row is None or row.guest_name != guest_name:
                return None
            return row.room_number

    def update(self, reservation_id: int, record: ReservationRecord) -> int:
        with self._lock:
            self._enter("update")
            row = self._rows.get(reservation_id)
            if row is None:
                return 0
            self._rows[reservation_id] = replace(
                row,
                guest_name=record.guest_name,
                room_number=record.room_number,
                contact_number=record.contact_number,
                rate_variant=record.rate_variant,
            )
            return 1

    def delete(self, reservation_id: int) -> int:
        with self._lock:
            self._enter("delete")
            return 1 if self._rows.pop(reservation_id, None) is not None else 0

    def _enter(self, op: str) -> None:
        self.calls.append(op)
        exc = self._failures.pop(op, None)
        if exc is not None:
            raise exc
