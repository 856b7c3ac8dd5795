"""
Reservation model and rate variants.

A reservation is either Standard or Priority(tier).  The variant set is
closed: rate() dispatches on it and rejects anything else.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

STANDARD_RATE = 100.0

DEFAULT_TIER = "SILVER"
PRIORITY_RATES = {
    "SILVER": 90.0,
    "GOLD": 80.0,
    "PLATINUM": 70.0,
}


@dataclass(frozen=True)
class Standard:
    """Plain reservation at the base rate."""


@dataclass(frozen=True)
class Priority:
    """Priority guest; tier text is free-form, unknown tiers get the default rate."""

    tier: str | None = DEFAULT_TIER


RateVariant = Standard | Priority


def normalize_tier(tier: str | None) -> str:
    """Map raw tier text onto one of the known tiers."""
    key = (tier or "").strip().upper()
    return key if key in PRIORITY_RATES else DEFAULT_TIER


def rate(variant: RateVariant) -> float:
    if isinstance(variant, Standard):
        return STANDARD_RATE
    if isinstance(variant, Priority):
        return PRIORITY_RATES[normalize_tier(variant.tier)]
    raise TypeError(f"Unknown rate variant: {variant!r}")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ReservationRecord:
    """One hotel room reservation, as held in the cache and the store."""

    guest_name: str
    room_number: int
    contact_number: str
    rate_variant: RateVariant = field(default_factory=Standard)
    reservation_id: int = 0      # 0 until the store assigns one
    created_at: datetime = field(default_factory=_now)

    @property
    def is_persisted(self) -> bool:
        return self.reservation_id != 0

    def assign_id(self, reservation_id: int) -> None:
        """Record the store-generated id. Once set, the id never changes."""
        if self.reservation_id not in (0, reservation_id):
            raise ValueError(
                f"Reservation already has id {self.reservation_id}, cannot reassign to {reservation_id}"
            )
        self.reservation_id = reservation_id

    def rate(self) -> float:
        return rate(self.rate_variant)

    def __str__(self) -> str:
        kind = "Standard"
        if isinstance(self.rate_variant, Priority):
            kind = f"Priority({normalize_tier(self.rate_variant.tier)})"
        return (
            f"Reservation #{self.reservation_id} {self.guest_name!r} room={self.room_number}"
            f" contact={self.contact_number!r} {kind} rate={self.rate():.2f}"
            f" date={self.created_at.isoformat()}"
        )
