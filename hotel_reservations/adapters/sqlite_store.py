"""
SQLite adapter for ReservationStore.

Use ":memory:" for tests, a file path for production.
"""

import sqlite3
import threading

from hotel_reservations.adapters.columns import decode_dt, decode_variant, encode_dt, encode_variant
from hotel_reservations.domain.errors import PersistenceError
from hotel_reservations.domain.reservation import ReservationRecord
from hotel_reservations.domain.store import ReservationStore

_SCHEMA = """
CREATE TABLE IF NOT EXISTS reservations (
    reservation_id   INTEGER PRIMARY KEY AUTOINCREMENT,
    guest_name       TEXT NOT NULL,
    room_number      INTEGER NOT NULL,
    contact_number   TEXT NOT NULL DEFAULT '',
    reservation_date TEXT NOT NULL,
    rate_variant     TEXT NOT NULL DEFAULT 'standard',
    priority_tier    TEXT
);
"""


class SqliteReservationStore(ReservationStore):
    """
    One connection shared by every thread, serialized by a lock.

    sqlite3 errors surface as PersistenceError with the driver error chained.
    """

    def __init__(self, db_path: str = "hotel.db"):
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot open reservation database {db_path!r}: {exc}") from exc

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def insert(self, record: ReservationRecord) -> int:
        kind, tier = encode_variant(record.rate_variant)
        cur = self._execute(
            "INSERT INTO reservations"
            " (guest_name, room_number, contact_number, reservation_date, rate_variant, priority_tier)"
            " VALUES (?, ?, ?, ?, ?, ?)",
            (record.guest_name, record.room_number, record.contact_number,
             encode_dt(record.created_at), kind, tier),
        )
        if cur.rowcount == 0:
            raise PersistenceError("Creating reservation failed, no rows affected.")
        if not cur.lastrowid:
            raise PersistenceError("Creating reservation failed, no ID obtained.")
        return cur.lastrowid

    def scan(self) -> list[ReservationRecord]:
        rows = self._fetchall("SELECT * FROM reservations ORDER BY reservation_id")
        return [self._row_to_record(r) for r in rows]

    def find_room(self, reservation_id: int, guest_name: str) -> int | None:
        rows = self._fetchall(
            "SELECT room_number FROM reservations WHERE reservation_id = ? AND guest_name = ?",
            (reservation_id, guest_name),
        )
        if not rows:
            return None
        return rows[0]["room_number"]

    def update(self, reservation_id: int, record: ReservationRecord) -> int:
        kind, tier = encode_variant(record.rate_variant)
        cur = self._execute(
            "UPDATE reservations SET guest_name = ?, room_number = ?, contact_number = ?,"
            " rate_variant = ?, priority_tier = ? WHERE reservation_id = ?",
            (record.guest_name, record.room_number, record.contact_number, kind, tier, reservation_id),
        )
        return cur.rowcount

    def delete(self, reservation_id: int) -> int:
        cur = self._execute(
            "DELETE FROM reservations WHERE reservation_id = ?", (reservation_id,)
        )
        return cur.rowcount

    # -- helpers -------------------------------------------------------------

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        with self._lock:
            try:
                cur = self._conn.execute(sql, params)
                self._conn.commit()
                return cur
            except sqlite3.Error as exc:
                raise PersistenceError(f"DB error: {exc}") from exc

    def _fetchall(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        with self._lock:
            try:
                return self._conn.execute(sql, params).fetchall()
            except sqlite3.Error as exc:
                raise PersistenceError(f"DB error: {exc}") from exc

    @staticmethod
    def _row_to_record(row) -> ReservationRecord:
        return ReservationRecord(
            reservation_id=row["reservation_id"],
            guest_name=row["guest_name"],
            room_number=row["room_number"],
            contact_number=row["contact_number"],
            rate_variant=decode_variant(row["rate_variant"], row["priority_tier"]),
            created_at=decode_dt(row["reservation_date"]),
        )
