"""Error kinds surfaced to callers of the reservation manager."""


class ReservationError(Exception):
    """Base class for every reservation failure."""


class PersistenceError(ReservationError):
    """The store could not complete an operation or returned an unexpected result."""


class NotFoundError(ReservationError):
    """An update or delete matched no persisted reservation."""

    def __init__(self, reservation_id: int):
        super().__init__(f"Reservation with id {reservation_id} not found.")
        self.reservation_id = reservation_id


class ValidationError(ReservationError):
    """User input rejected by the front end before it reaches the manager."""
