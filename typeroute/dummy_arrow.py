"""Routes the dummy source's column types to the Arrow and Arrow2 destinations."""

from __future__ import annotations

from datetime import date, datetime, time, timezone

from .typesystem import (
    Arrow2Type,
    ArrowType,
    Conversion,
    DataType,
    Mapping,
    Transport,
    TypeSystemError,
)


class DummyType(DataType):
    """Column types produced by the dummy source."""

    F64 = ("F64", float, None)
    I64 = ("I64", int, None)
    BOOL = ("Bool", bool, None)
    STRING = ("String", str, None)
    DATETIME = ("DateTime", datetime, True)


def _is_aware(val: datetime) -> bool:
    return val.tzinfo is not None and val.utcoffset() is not None


def datetime_to_naive(val: datetime) -> datetime:
    """Turn an aware date-time into the naive date-time of the same instant in UTC."""
    if not _is_aware(val):
        raise TypeSystemError(f"expected a timezone-aware datetime, got {val!r}")
    return val.astimezone(timezone.utc).replace(tzinfo=None)


def naive_to_utc(val: datetime) -> datetime:
    """Read a naive date-time as UTC."""
    if _is_aware(val):
        raise TypeSystemError(f"expected a naive datetime, got {val!r}")
    return val.replace(tzinfo=timezone.utc)


def date_to_utc(val: date) -> datetime:
    """Midnight UTC of the given date."""
    if isinstance(val, datetime):
        raise TypeSystemError(f"expected a date, got datetime {val!r}")
    return datetime.combine(val, time(), tzinfo=timezone.utc)


def _dummy_transport(name: str, system: type[DataType]) -> Transport:
    return Transport(
        name,
        [
            Mapping(DummyType.F64, system.FLOAT64),
            Mapping(DummyType.I64, system.INT64),
            Mapping(DummyType.BOOL, system.BOOLEAN),
            Mapping(DummyType.STRING, system.LARGE_UTF8),
            Mapping(DummyType.DATETIME, system.DATE64, Conversion.OPTION),
        ],
        {DummyType.DATETIME: datetime_to_naive},
    )


DUMMY_ARROW_TRANSPORT = _dummy_transport("DummyArrowTransport", ArrowType)
DUMMY_ARROW2_TRANSPORT = _dummy_transport("DummyArrow2Transport", Arrow2Type)