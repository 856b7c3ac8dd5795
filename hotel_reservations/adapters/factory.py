import os

from hotel_reservations.domain.store import ReservationStore


def create_store(backend: str | None = None) -> ReservationStore:
    """
    Factory: create the right store adapter based on config.

    The backend can be passed explicitly or read from the
    RESERVATION_STORE env var. Defaults to "sqlite".
    """
    backend = backend or os.environ.get("RESERVATION_STORE", "sqlite")

    if backend == "sqlite":
        from .sqlite_store import SqliteReservationStore

        db_path = os.environ.get("DB_PATH", "data/hotel.db")
        if db_path != ":memory:" and os.path.dirname(db_path):
            os.makedirs(os.path.dirname(db_path), exist_ok=True)
        return SqliteReservationStore(db_path=db_path)

    if backend == "sqlalchemy":
        from .sqlalchemy_store import SqlAlchemyReservationStore

        url = os.environ.get("DATABASE_URL")
        if not url:
            raise ValueError("DATABASE_URL must be set for the sqlalchemy store")
        return SqlAlchemyReservationStore(url)

    if backend == "memory":
        from .simulator_store import InMemoryReservationStore

        return InMemoryReservationStore()

    raise ValueError(f"Unknown reservation store: {backend!r}")
