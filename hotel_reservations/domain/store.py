"""
ReservationStore port — the durable system of record for reservations.
"""

from abc import ABC, abstractmethod

from hotel_reservations.domain.reservation import ReservationRecord


class ReservationStore(ABC):
    """
    Port: how reservations are persisted.

    The manager depends ONLY on this interface.  It doesn't know whether
    rows live in SQLite, MySQL behind SQLAlchemy, or a dict in a test.

    Every operation is treated as atomic on its own.  Driver failures are
    raised as PersistenceError; "no such row" is reported through return
    values (None, or an affected count of 0), never as an exception.
    """

    @abstractmethod
    def insert(self, record: ReservationRecord) -> int:
        """Persist a new reservation. Returns the generated reservation_id."""
        ...

    @abstractmethod
    def scan(self) -> list[ReservationRecord]:
        """Return every reservation, ordered by reservation_id."""
        ...

    @abstractmethod
    def find_room(self, reservation_id: int, guest_name: str) -> int | None:
        """Room number for (reservation_id, guest_name), or None if no row matches."""
        ...

    @abstractmethod
    def update(self, reservation_id: int, record: ReservationRecord) -> int:
        """
        Overwrite guest name, room, contact and rate variant of a reservation.

        The creation timestamp is never changed.  Returns the number of rows
        affected (0 when the id does not exist).
        """
        ...

    @abstractmethod
    def delete(self, reservation_id: int) -> int:
        """Remove a reservation. Returns the number of rows affected."""
        ...

    def close(self) -> None:
        """Release connections. Stores without any keep this no-op."""
