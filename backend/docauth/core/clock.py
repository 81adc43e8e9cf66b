"""
Conversions between wall-clock timestamps and MongoDB's native datetimes.

BSON datetimes carry millisecond precision and pymongo hands them back as
naive UTC values, so that is the stored form: every value written is
converted to naive UTC truncated to the millisecond, and every value read
is made timezone-aware again.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def truncate_ms(value: datetime) -> datetime:
    """Drop sub-millisecond precision."""
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def utc_now() -> datetime:
    """Current aware UTC time at store precision."""
    return truncate_ms(datetime.now(timezone.utc))


def to_store_time(value: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a timestamp for storage, passing None through.

    Naive inputs are taken to be UTC already.
    """
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return truncate_ms(value)


def from_store_time(value: Optional[datetime]) -> Optional[datetime]:
    """Convert a stored datetime back to an aware UTC timestamp."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_model_time(value: Optional[datetime]) -> Optional[datetime]:
    """Aware UTC timestamp at store precision, as a stored value reads back."""
    return from_store_time(to_store_time(value))


def epoch_ms(value: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return (to_model_time(value) - EPOCH) // timedelta(milliseconds=1)


def from_epoch_ms(ms: int) -> datetime:
    """Aware UTC datetime from epoch milliseconds."""
    return EPOCH + timedelta(milliseconds=ms)
