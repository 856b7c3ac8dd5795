"""
Background auto-sync for the reservation cache.

A daemon thread calls manager.view_all() every `interval` seconds so the
cache follows the store even when nobody presses "refresh".  A failed tick
is logged and the loop waits for the next one; only stop() ends it.
"""

import logging
import threading

from hotel_reservations.domain.errors import PersistenceError
from hotel_reservations.manager import ReservationManager

log = logging.getLogger(__name__)


class AutoSyncTask:
    """
    Periodic full refresh, started on construction.

    stop() takes effect at the next tick boundary: a refresh already in
    flight runs to completion, none starts afterwards, and the wait
    between ticks is cut short.
    """

    def __init__(self, manager: ReservationManager, interval: float = 30.0, *, name: str = "autosync"):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self._manager = manager
        self._interval = interval
        self._stop_event = threading.Event()
        self._ticks = 0
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()
        log.info("Auto-sync started — interval=%.1fs", interval)

    @property
    def state(self) -> str:
        return "stopped" if self._stop_event.is_set() else "running"

    @property
    def ticks(self) -> int:
        """Number of refresh attempts made so far, failed ones included."""
        return self._ticks

    def stop(self) -> None:
        """Ask the loop to end. Safe to call any number of times, from any thread."""
        if self._stop_event.is_set():
            return
        self._stop_event.set()
        log.info("Auto-sync stop requested")

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the loop thread to exit. Returns True if it has."""
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _run(self) -> None:
        while not self._stop_event.is_set():
            self._tick()
            if self._stop_event.wait(self._interval):
                break
        log.info("Auto-sync stopped after %d tick(s)", self._ticks)

    def _tick(self) -> None:
        try:
            records = self._manager.view_all()
            log.debug("Auto-sync tick: %d reservation(s) cached", len(records))
        except PersistenceError as exc:
            log.error("Auto-sync error: %s", exc)
        except Exception:
            log.exception("Auto-sync tick failed unexpectedly")
        finally:
            self._ticks += 1
