"""
Interactive console for front-desk staff.

Input is validated here; the manager only ever sees well-formed values.
"""

import logging
from typing import Callable

from hotel_reservations.domain.errors import NotFoundError, PersistenceError, ValidationError
from hotel_reservations.domain.reservation import Priority, ReservationRecord, Standard
from hotel_reservations.manager import ReservationManager

log = logging.getLogger(__name__)

HELP = """\
Commands:
    reserve   book a room (optionally with a priority tier)
    view      refresh from the database and list every reservation
    room      look up the room number for a reservation id + guest name
    update    replace guest, room and contact of a reservation
    delete    cancel a reservation
    cache     list what the cache currently holds, without a refresh
    help      show this list
    quit      leave"""


def parse_id(text: str) -> int:
    try:
        value = int(text.strip())
    except ValueError:
        raise ValidationError(f"Reservation ID must be a number, got {text.strip()!r}") from None
    if value <= 0:
        raise ValidationError(f"Reservation ID must be positive, got {value}")
    return value


def parse_room(text: str) -> int:
    try:
        value = int(text.strip())
    except ValueError:
        raise ValidationError(f"Room number must be a number, got {text.strip()!r}") from None
    if value <= 0:
        raise ValidationError(f"Room number must be positive, got {value}")
    return value


def require(text: str, label: str) -> str:
    value = text.strip()
    if not value:
        raise ValidationError(f"{label} is required")
    return value


def format_table(records: list[ReservationRecord]) -> str:
    header = f"{'ID':>5}  {'Guest':<20}  {'Room':>5}  {'Contact':<15}  {'Rate':>7}  Date"
    lines = [header, "-" * 80]
    for r in records:
        lines.append(
            f"{r.reservation_id:>5}  {r.guest_name[:20]:<20}  {r.room_number:>5}"
            f"  {r.contact_number[:15]:<15}  {r.rate():>7.2f}  {r.created_at:%Y-%m-%d %H:%M}"
        )
    return "\n".join(lines)


class ReservationConsole:

    def __init__(
        self,
        manager: ReservationManager,
        ask: Callable[[str], str] = input,
        say: Callable[[str], None] = print,
    ):
        self._manager = manager
        self._ask = ask
        self._say = say
        self._commands = {
            "reserve": self.reserve,
            "view": self.view,
            "room": self.get_room,
            "update": self.update,
            "delete": self.delete,
            "cache": self.show_cache,
        }

    def run(self) -> None:
        """Read commands until 'quit' or end of input."""
        self._say("Hotel Reservation System — type 'help' for commands.")
        while True:
            try:
                cmd = self._ask("> ").strip().lower()
            except EOFError:
                break
            if cmd in ("quit", "exit"):
                break
            if not cmd:
                continue
            self.dispatch(cmd)

    def dispatch(self, cmd: str) -> None:
        """Run one command, reporting any failure to the user."""
        if cmd == "help":
            self._say(HELP)
            return
        handler = self._commands.get(cmd)
        if handler is None:
            self._say(f"Unknown command: {cmd!r}. Type 'help'.")
            return
        try:
            handler()
        except ValidationError as exc:
            self._say(f"Invalid input: {exc}")
        except NotFoundError as exc:
            self._say(str(exc))
        except PersistenceError as exc:
            log.error("%s failed: %s", cmd, exc)
            self._say(f"DB Error: {exc}")

    # -- commands ------------------------------------------------------------

    def reserve(self) -> None:
        name = require(self._ask("Guest name: "), "Guest name")
        room = parse_room(self._ask("Room number: "))
        contact = self._ask("Contact: ").strip()
        tier = self._ask("Priority tier (empty for standard): ").strip()
        variant = Priority(tier) if tier else Standard()
        reservation_id = self._manager.reserve(ReservationRecord(name, room, contact, variant))
        self._say(f"Reserved with ID = {reservation_id}")

    def view(self) -> None:
        records = self._manager.view_all()
        if not records:
            self._say("No reservations.")
            return
        self._say(format_table(records))

    def get_room(self) -> None:
        reservation_id = parse_id(self._ask("Reservation ID: "))
        name = require(self._ask("Guest name: "), "Guest name")
        room = self._manager.get_room(reservation_id, name)
        if room is None:
            self._say("Reservation not found.")
        else:
            self._say(f"Room Number: {room}")

    def update(self) -> None:
        reservation_id = parse_id(self._ask("Reservation ID: "))
        name = require(self._ask("New guest name: "), "Guest name")
        room = parse_room(self._ask("New room number: "))
        contact = self._ask("New contact: ").strip()
        self._manager.update(reservation_id, ReservationRecord(name, room, contact))
        self._say("Updated successfully.")

    def delete(self) -> None:
        reservation_id = parse_id(self._ask("Reservation ID: "))
        self._manager.delete(reservation_id)
        self._say("Deleted.")

    def show_cache(self) -> None:
        records = self._manager.cache_snapshot()
        if not records:
            self._say("Cache is empty.")
            return
        self._say(format_table(records))
