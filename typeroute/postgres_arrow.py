"""Routes Postgres column types to the Arrow and Arrow2 destinations."""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any
from uuid import UUID

from .typesystem import (
    Arrow2Type,
    ArrowType,
    Conversion,
    DataType,
    Mapping,
    Transport,
    TypeSystemError,
)


class PostgresType(DataType):
    """Column types produced by the Postgres source."""

    FLOAT4 = ("Float4", float, None)
    FLOAT8 = ("Float8", float, None)
    NUMERIC = ("Numeric", Decimal, None)
    INT2 = ("Int2", int, None)
    INT4 = ("Int4", int, None)
    INT8 = ("Int8", int, None)
    BOOL = ("Bool", bool, None)
    TEXT = ("Text", str, None)
    BPCHAR = ("BpChar", str, None)
    VARCHAR = ("VarChar", str, None)
    TIMESTAMP = ("Timestamp", datetime, False)
    DATE = ("Date", date, None)
    TIME = ("Time", time, None)
    TIMESTAMP_TZ = ("TimestampTz", datetime, True)
    UUID = ("UUID", UUID, None)
    CHAR = ("Char", str, None)


class PostgresProtocol(Enum):
    """The ways the Postgres source can fetch rows."""

    BINARY = "BinaryProtocol"
    CSV = "CSVProtocol"
    CURSOR = "CursorProtocol"


_TLS_NAMES = {False: "NoTls", True: "MakeTlsConnector"}


def _uuid_to_str(val: UUID) -> str:
    return str(val)


def _decimal_to_float(val: Decimal) -> float:
    if not val.is_finite():
        raise TypeSystemError(f"cannot convert decimal {val!r} to float64")
    return float(val)


def _mappings(system: type[DataType], with_tz: bool) -> list[Mapping]:
    auto, owned, option, none = (
        Conversion.AUTO,
        Conversion.OWNED,
        Conversion.OPTION,
        Conversion.NONE,
    )
    mappings = [
        Mapping(PostgresType.FLOAT4, system.FLOAT32, auto),
        Mapping(PostgresType.FLOAT8, system.FLOAT64, auto),
        Mapping(PostgresType.NUMERIC, system.FLOAT64, option),
        Mapping(PostgresType.INT2, system.INT32, auto),
        Mapping(PostgresType.INT4, system.INT32, auto),
        Mapping(PostgresType.INT8, system.INT64, auto),
        Mapping(PostgresType.BOOL, system.BOOLEAN, auto),
        Mapping(PostgresType.TEXT, system.LARGE_UTF8, owned),
        Mapping(PostgresType.BPCHAR, system.LARGE_UTF8, none),
        Mapping(PostgresType.VARCHAR, system.LARGE_UTF8, none),
        Mapping(PostgresType.TIMESTAMP, system.DATE64, auto),
        Mapping(PostgresType.DATE, system.DATE32, auto),
        Mapping(PostgresType.TIME, system.TIME64, auto),
    ]
    if with_tz:
        mappings.append(Mapping(PostgresType.TIMESTAMP_TZ, system.DATETIME_TZ, auto))
    mappings += [
        Mapping(PostgresType.UUID, system.LARGE_UTF8, option),
        Mapping(PostgresType.CHAR, system.LARGE_UTF8, none),
    ]
    return mappings


_CONVERTERS = {
    PostgresType.NUMERIC: _decimal_to_float,
    PostgresType.UUID: _uuid_to_str,
}


def _normalise(protocol: Any, tls: Any) -> tuple[PostgresProtocol, bool]:
    try:
        proto = PostgresProtocol(protocol)
    except ValueError:
        raise TypeSystemError(f"unknown Postgres protocol {protocol!r}") from None
    if not isinstance(tls, bool):
        raise TypeSystemError(f"tls must be True or False, got {tls!r}")
    return proto, tls


@lru_cache(maxsize=None)
def _arrow_transport(protocol: PostgresProtocol, tls: bool) -> Transport:
    return Transport(
        f"PostgresArrowTransport<{protocol.value}, {_TLS_NAMES[tls]}>",
        _mappings(ArrowType, with_tz=True),
        _CONVERTERS,
    )


@lru_cache(maxsize=None)
def _arrow2_transport(protocol: PostgresProtocol, tls: bool) -> Transport:
    return Transport(
        f"PostgresArrow2Transport<{protocol.value}, {_TLS_NAMES[tls]}>",
        _mappings(Arrow2Type, with_tz=False),
        _CONVERTERS,
    )


def postgres_arrow_transport(protocol: PostgresProtocol | str, tls: bool) -> Transport:
    """The transport from the Postgres source over ``protocol`` to the Arrow destination."""
    return _arrow_transport(*_normalise(protocol, tls))


def postgres_arrow2_transport(protocol: PostgresProtocol | str, tls: bool) -> Transport:
    """The transport from the Postgres source over ``protocol`` to the Arrow2 destination."""
    return _arrow2_transport(*_normalise(protocol, tls))