"""Routes SQLite column types to the Arrow and Arrow2 destinations."""

from __future__ import annotations

from datetime import date, datetime, time

from .typesystem import (
    Arrow2Type,
    ArrowType,
    Conversion,
    DataType,
    Mapping,
    Transport,
)


class SQLiteType(DataType):
    """Column types produced by the SQLite source."""

    BOOL = ("Bool", bool, None)
    INT8 = ("Int8", int, None)
    INT4 = ("Int4", int, None)
    INT2 = ("Int2", int, None)
    REAL = ("Real", float, None)
    TEXT = ("Text", str, None)
    BLOB = ("Blob", bytes, None)
    DATE = ("Date", date, None)
    TIME = ("Time", time, None)
    TIMESTAMP = ("Timestamp", datetime, False)


def _sqlite_transport(name: str, system: type[DataType]) -> Transport:
    return Transport(
        name,
        [
            Mapping(SQLiteType.BOOL, system.BOOLEAN),
            Mapping(SQLiteType.INT8, system.INT64),
            Mapping(SQLiteType.INT4, system.INT64),
            Mapping(SQLiteType.INT2, system.INT64),
            Mapping(SQLiteType.REAL, system.FLOAT64),
            Mapping(SQLiteType.TEXT, system.LARGE_UTF8, Conversion.OPTION),
            Mapping(SQLiteType.BLOB, system.LARGE_BINARY),
            Mapping(SQLiteType.DATE, system.DATE32),
            Mapping(SQLiteType.TIME, system.TIME64),
            Mapping(SQLiteType.TIMESTAMP, system.DATE64),
        ],
        {SQLiteType.TEXT: str},
    )


SQLITE_ARROW_TRANSPORT = _sqlite_transport("SQLiteArrowTransport", ArrowType)
SQLITE_ARROW2_TRANSPORT = _sqlite_transport("SQLiteArrow2Transport", Arrow2Type)