"""Column encoding shared by the SQL adapters."""

from datetime import datetime, timezone

from hotel_reservations.domain.reservation import Priority, RateVariant, Standard

STANDARD = "standard"
PRIORITY = "priority"


def encode_variant(variant: RateVariant) -> tuple[str, str | None]:
    """(rate_variant, priority_tier) column values for a variant."""
    if isinstance(variant, Priority):
        return PRIORITY, variant.tier
    if isinstance(variant, Standard):
        return STANDARD, None
    raise TypeError(f"Unknown rate variant: {variant!r}")


def decode_variant(kind: str, tier: str | None) -> RateVariant:
    if kind == PRIORITY:
        return Priority(tier)
    return Standard()


def encode_dt(value: datetime) -> str:
    return value.isoformat()


def decode_dt(value: str) -> datetime:
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
