"""Routes Oracle column types to the Arrow and Arrow2 destinations."""

from __future__ import annotations

from datetime import date, datetime

from .typesystem import (
    Arrow2Type,
    ArrowType,
    Conversion,
    DataType,
    Mapping,
    Transport,
)


class OracleType(DataType):
    """Column types produced by the Oracle source."""

    NUM_FLOAT = ("NumFloat", float, None)
    FLOAT = ("Float", float, None)
    BINARY_FLOAT = ("BinaryFloat", float, None)
    BINARY_DOUBLE = ("BinaryDouble", float, None)
    NUM_INT = ("NumInt", int, None)
    VARCHAR = ("VarChar", str, None)
    CHAR = ("Char", str, None)
    NVARCHAR = ("NVarChar", str, None)
    NCHAR = ("NChar", str, None)
    DATE = ("Date", date, None)
    TIMESTAMP = ("Timestamp", datetime, False)
    TIMESTAMP_TZ = ("TimestampTz", datetime, True)


_NONE = Conversion.NONE

ORACLE_ARROW_TRANSPORT = Transport(
    "OracleArrowTransport",
    [
        Mapping(OracleType.NUM_FLOAT, ArrowType.FLOAT64),
        Mapping(OracleType.FLOAT, ArrowType.FLOAT64, _NONE),
        Mapping(OracleType.BINARY_FLOAT, ArrowType.FLOAT64, _NONE),
        Mapping(OracleType.BINARY_DOUBLE, ArrowType.FLOAT64, _NONE),
        Mapping(OracleType.NUM_INT, ArrowType.INT64),
        Mapping(OracleType.VARCHAR, ArrowType.LARGE_UTF8),
        Mapping(OracleType.CHAR, ArrowType.LARGE_UTF8, _NONE),
        Mapping(OracleType.NVARCHAR, ArrowType.LARGE_UTF8, _NONE),
        Mapping(OracleType.NCHAR, ArrowType.LARGE_UTF8, _NONE),
        Mapping(OracleType.DATE, ArrowType.DATE32),
        Mapping(OracleType.TIMESTAMP, ArrowType.DATE64),
        Mapping(OracleType.TIMESTAMP_TZ, ArrowType.DATETIME_TZ),
    ],
)

ORACLE_ARROW2_TRANSPORT = Transport(
    "OracleArrow2Transport",
    [
        Mapping(OracleType.NUM_FLOAT, Arrow2Type.FLOAT64),
        Mapping(OracleType.FLOAT, Arrow2Type.FLOAT64, _NONE),
        Mapping(OracleType.NUM_INT, Arrow2Type.INT64),
        Mapping(OracleType.VARCHAR, Arrow2Type.LARGE_UTF8),
        Mapping(OracleType.CHAR, Arrow2Type.LARGE_UTF8, _NONE),
        Mapping(OracleType.NVARCHAR, Arrow2Type.LARGE_UTF8, _NONE),
        Mapping(OracleType.NCHAR, Arrow2Type.LARGE_UTF8, _NONE),
        Mapping(OracleType.DATE, Arrow2Type.DATE32),
        Mapping(OracleType.TIMESTAMP, Arrow2Type.DATE64),
    ],
)