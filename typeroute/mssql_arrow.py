"""Routes MsSQL column types to the Arrow and Arrow2 destinations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
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


@dataclass(frozen=True)
class IntN:
    """A nullable-width integer as the MsSQL source reports it."""

    value: int


@dataclass(frozen=True)
class FloatN:
    """A nullable-width float as the MsSQL source reports it."""

    value: float


class MsSQLType(DataType):
    """Column types produced by the MsSQL source."""

    TINYINT = ("Tinyint", int, None)
    SMALLINT = ("Smallint", int, None)
    INT = ("Int", int, None)
    BIGINT = ("Bigint", int, None)
    INTN = ("Intn", IntN, None)
    FLOAT24 = ("Float24", float, None)
    FLOAT53 = ("Float53", float, None)
    FLOATN = ("Floatn", FloatN, None)
    BIT = ("Bit", bool, None)
    NVARCHAR = ("Nvarchar", str, None)
    VARCHAR = ("Varchar", str, None)
    NCHAR = ("Nchar", str, None)
    CHAR = ("Char", str, None)
    TEXT = ("Text", str, None)
    NTEXT = ("Ntext", str, None)
    BINARY = ("Binary", bytes, None)
    VARBINARY = ("Varbinary", bytes, None)
    IMAGE = ("Image", bytes, None)
    NUMERIC = ("Numeric", Decimal, None)
    DECIMAL = ("Decimal", Decimal, None)
    DATETIME = ("Datetime", datetime, False)
    DATETIME2 = ("Datetime2", datetime, False)
    SMALLDATETIME = ("Smalldatetime", datetime, False)
    DATE = ("Date", date, None)
    DATETIMEOFFSET = ("Datetimeoffset", datetime, True)
    UNIQUEIDENTIFIER = ("Uniqueidentifier", UUID, None)
    TIME = ("Time", time, None)
    SMALL_MONEY = ("SmallMoney", float, None)
    MONEY = ("Money", float, None)


def uuid_to_str(val: UUID) -> str:
    """The canonical hyphenated text of a UUID."""
    return str(val)


def intn_to_int(val: IntN) -> int:
    """The integer held by an IntN."""
    return val.value


def floatn_to_float(val: FloatN) -> float:
    """The float held by a FloatN."""
    return val.value


def decimal_to_float(val: Decimal) -> float:
    """Convert a decimal to a float; non-finite decimals cannot be converted."""
    if not val.is_finite():
        raise TypeSystemError(f"cannot convert decimal {val!r} to float64")
    return float(val)


def _mssql_transport(name: str, system: type[DataType]) -> Transport:
    auto, owned, option, none = (
        Conversion.AUTO,
        Conversion.OWNED,
        Conversion.OPTION,
        Conversion.NONE,
    )
    return Transport(
        name,
        [
            Mapping(MsSQLType.TINYINT, system.INT32, auto),
            Mapping(MsSQLType.SMALLINT, system.INT32, auto),
            Mapping(MsSQLType.INT, system.INT32, auto),
            Mapping(MsSQLType.BIGINT, system.INT64, auto),
            Mapping(MsSQLType.INTN, system.INT64, option),
            Mapping(MsSQLType.FLOAT24, system.FLOAT32, auto),
            Mapping(MsSQLType.FLOAT53, system.FLOAT64, auto),
            Mapping(MsSQLType.FLOATN, system.FLOAT64, option),
            Mapping(MsSQLType.BIT, system.BOOLEAN, auto),
            Mapping(MsSQLType.NVARCHAR, system.LARGE_UTF8, owned),
            Mapping(MsSQLType.VARCHAR, system.LARGE_UTF8, none),
            Mapping(MsSQLType.NCHAR, system.LARGE_UTF8, none),
            Mapping(MsSQLType.CHAR, system.LARGE_UTF8, none),
            Mapping(MsSQLType.TEXT, system.LARGE_UTF8, none),
            Mapping(MsSQLType.NTEXT, system.LARGE_UTF8, none),
            Mapping(MsSQLType.BINARY, system.LARGE_BINARY, owned),
            Mapping(MsSQLType.VARBINARY, system.LARGE_BINARY, none),
            Mapping(MsSQLType.IMAGE, system.LARGE_BINARY, none),
            Mapping(MsSQLType.NUMERIC, system.FLOAT64, option),
            Mapping(MsSQLType.DECIMAL, system.FLOAT64, none),
            Mapping(MsSQLType.DATETIME, system.DATE64, auto),
            Mapping(MsSQLType.DATETIME2, system.DATE64, none),
            Mapping(MsSQLType.SMALLDATETIME, system.DATE64, none),
            Mapping(MsSQLType.DATE, system.DATE32, auto),
            Mapping(MsSQLType.DATETIMEOFFSET, system.DATETIME_TZ, auto),
            Mapping(MsSQLType.UNIQUEIDENTIFIER, system.LARGE_UTF8, option),
            Mapping(MsSQLType.TIME, system.TIME64, auto),
            Mapping(MsSQLType.SMALL_MONEY, system.FLOAT32, none),
            Mapping(MsSQLType.MONEY, system.FLOAT64, none),
        ],
        {
            MsSQLType.INTN: intn_to_int,
            MsSQLType.FLOATN: floatn_to_float,
            MsSQLType.NUMERIC: decimal_to_float,
            MsSQLType.UNIQUEIDENTIFIER: uuid_to_str,
        },
    )


MSSQL_ARROW_TRANSPORT = _mssql_transport("MsSQLArrowTransport", ArrowType)
MSSQL_ARROW2_TRANSPORT = _mssql_transport("MsSQLArrow2Transport", Arrow2Type)