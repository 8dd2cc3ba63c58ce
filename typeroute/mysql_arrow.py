"""Routes MySQL column types to the Arrow and Arrow2 destinations."""

from __future__ import annotations

import json
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any

from .mssql_arrow import decimal_to_float
from .typesystem import (
    Arrow2Type,
    ArrowType,
    Conversion,
    DataType,
    Mapping,
    Transport,
    TypeSystemError,
)


class MySQLType(DataType):
    """Column types produced by the MySQL source."""

    FLOAT = ("Float", float, None)
    DOUBLE = ("Double", float, None)
    TINY = ("Tiny", int, None)
    SHORT = ("Short", int, None)
    INT24 = ("Int24", int, None)
    LONG = ("Long", int, None)
    LONG_LONG = ("LongLong", int, None)
    UTINY = ("UTiny", int, None)
    USHORT = ("UShort", int, None)
    ULONG = ("ULong", int, None)
    UINT24 = ("UInt24", int, None)
    ULONG_LONG = ("ULongLong", int, None)
    DATE = ("Date", date, None)
    TIME = ("Time", time, None)
    DATETIME = ("Datetime", datetime, False)
    YEAR = ("Year", int, None)
    TIMESTAMP = ("Timestamp", datetime, False)
    DECIMAL = ("Decimal", Decimal, None)
    VARCHAR = ("VarChar", str, None)
    CHAR = ("Char", str, None)
    ENUM = ("Enum", str, None)
    TINY_BLOB = ("TinyBlob", bytes, None)
    BLOB = ("Blob", bytes, None)
    MEDIUM_BLOB = ("MediumBlob", bytes, None)
    LONG_BLOB = ("LongBlob", bytes, None)
    JSON = ("Json", object, None)


class MySQLProtocol(Enum):
    """The ways the MySQL source can fetch rows."""

    BINARY = "BinaryProtocol"
    TEXT = "TextProtocol"


def json_to_str(val: Any) -> str:
    """Serialise a JSON value compactly, with object keys in sorted order."""
    try:
        return json.dumps(
            val,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise TypeSystemError(f"cannot serialise {val!r} as JSON: {exc}") from None


def _mappings(system: type[DataType], with_blobs: bool) -> list[Mapping]:
    auto, option, none = Conversion.AUTO, Conversion.OPTION, Conversion.NONE
    mappings = [
        Mapping(MySQLType.FLOAT, system.FLOAT64, auto),
        Mapping(MySQLType.DOUBLE, system.FLOAT64, auto),
        Mapping(MySQLType.TINY, system.INT64, auto),
        Mapping(MySQLType.SHORT, system.INT64, auto),
        Mapping(MySQLType.INT24, system.INT64, none),
        Mapping(MySQLType.LONG, system.INT64, auto),
        Mapping(MySQLType.LONG_LONG, system.INT64, auto),
        Mapping(MySQLType.UTINY, system.INT64, auto),
        Mapping(MySQLType.USHORT, system.INT64, auto),
        Mapping(MySQLType.ULONG, system.INT64, auto),
        Mapping(MySQLType.UINT24, system.INT64, none),
        Mapping(MySQLType.ULONG_LONG, system.FLOAT64, auto),
        Mapping(MySQLType.DATE, system.DATE32, auto),
        Mapping(MySQLType.TIME, system.TIME64, auto),
        Mapping(MySQLType.DATETIME, system.DATE64, auto),
        Mapping(MySQLType.YEAR, system.INT64, none),
        Mapping(MySQLType.TIMESTAMP, system.DATE64, none),
        Mapping(MySQLType.DECIMAL, system.FLOAT64, option),
        Mapping(MySQLType.VARCHAR, system.LARGE_UTF8, auto),
        Mapping(MySQLType.CHAR, system.LARGE_UTF8, none),
        Mapping(MySQLType.ENUM, system.LARGE_UTF8, none),
    ]
    if with_blobs:
        mappings += [
            Mapping(MySQLType.TINY_BLOB, system.LARGE_BINARY, auto),
            Mapping(MySQLType.BLOB, system.LARGE_BINARY, none),
            Mapping(MySQLType.MEDIUM_BLOB, system.LARGE_BINARY, none),
            Mapping(MySQLType.LONG_BLOB, system.LARGE_BINARY, none),
        ]
    mappings.append(Mapping(MySQLType.JSON, system.LARGE_UTF8, option))
    return mappings


_CONVERTERS = {
    MySQLType.DECIMAL: decimal_to_float,
    MySQLType.JSON: json_to_str,
}


def _normalise(protocol: Any) -> MySQLProtocol:
    try:
        return MySQLProtocol(protocol)
    except ValueError:
        raise TypeSystemError(f"unknown MySQL protocol {protocol!r}") from None


@lru_cache(maxsize=None)
def _arrow_transport(protocol: MySQLProtocol) -> Transport:
    return Transport(
        f"MySQLArrowTransport<{protocol.value}>",
        _mappings(ArrowType, with_blobs=True),
        _CONVERTERS,
    )


@lru_cache(maxsize=None)
def _arrow2_transport(protocol: MySQLProtocol) -> Transport:
    return Transport(
        f"MySQLArrow2Transport<{protocol.value}>",
        _mappings(Arrow2Type, with_blobs=False),
        _CONVERTERS,
    )


def mysql_arrow_transport(protocol: MySQLProtocol | str) -> Transport:
    """The transport from the MySQL source over ``protocol`` to the Arrow destination."""
    return _arrow_transport(_normalise(protocol))


def mysql_arrow2_transport(protocol: MySQLProtocol | str) -> Transport:
    """The transport from the MySQL source over ``protocol`` to the Arrow2 destination."""
    return _arrow2_transport(_normalise(protocol))