from datetime import date, datetime, timezone

import pytest

from typeroute.oracle_arrow import (
    ORACLE_ARROW2_TRANSPORT,
    ORACLE_ARROW_TRANSPORT,
    OracleType,
)
from typeroute.typesystem import Arrow2Type, ArrowType, TypeSystemError

ROW_SCHEMA = [
    OracleType.NUM_INT,
    OracleType.NUM_INT,
    OracleType.NUM_FLOAT,
    OracleType.FLOAT,
    OracleType.VARCHAR,
    OracleType.CHAR,
    OracleType.NVARCHAR,
    OracleType.NCHAR,
]
ROWS = [
    (1, 1, 1.1, 1.1, "varchar1", "char1", "nvarchar1", "nchar1"),
    (2, 2, 2.2, 2.2, "varchar2", "char2", "nvarchar2", "nchar2"),
    (3, 3, 3.3, 3.3, "varchar3", "char3", "nvarchar3", "nchar3"),
]
DAY = date(2020, 2, 29)
STAMP = datetime(2020, 2, 29, 23, 59)


class ListParser:
    def __init__(self, values):
        self._values = iter(values)

    def produce(self):
        return next(self._values)


class ListWriter:
    def __init__(self):
        self.values = []

    def write(self, value):
        self.values.append(value)


def test_rows_pass_through_arrow():
    result = []
    for row in ROWS:
        parser, writer = ListParser(row), ListWriter()
        for ts in ROW_SCHEMA:
            ORACLE_ARROW_TRANSPORT.process(
                ts, ORACLE_ARROW_TRANSPORT.convert_typesystem(ts), parser, writer
            )
        result.append(tuple(writer.values))
    assert result == ROWS


def test_rows_pass_through_arrow2():
    result = []
    for row in ROWS:
        parser, writer = ListParser(row), ListWriter()
        for ts in ROW_SCHEMA:
            ORACLE_ARROW2_TRANSPORT.process(
                ts, ORACLE_ARROW2_TRANSPORT.convert_typesystem(ts), parser, writer
            )
        result.append(tuple(writer.values))
    assert result == ROWS


def test_arrow_routes_time_zone_types():
    assert ORACLE_ARROW_TRANSPORT.convert_typesystem(OracleType.TIMESTAMP_TZ) is (
        ArrowType.DATETIME_TZ
    )
    assert ORACLE_ARROW_TRANSPORT.convert_typesystem(OracleType.BINARY_DOUBLE) is (
        ArrowType.FLOAT64
    )


@pytest.mark.parametrize(
    "ts", [OracleType.TIMESTAMP_TZ, OracleType.BINARY_FLOAT, OracleType.BINARY_DOUBLE]
)
def test_arrow2_lacks_some_types(ts):
    with pytest.raises(TypeSystemError):
        ORACLE_ARROW2_TRANSPORT.convert_typesystem(ts)


def test_dates_and_timestamps_arrow():
    assert ORACLE_ARROW_TRANSPORT.convert_typesystem(OracleType.DATE) is ArrowType.DATE32
    assert ORACLE_ARROW_TRANSPORT.convert_typesystem(OracleType.TIMESTAMP) is ArrowType.DATE64
    assert ORACLE_ARROW_TRANSPORT.convert_type(OracleType.DATE, DAY) == DAY
    assert ORACLE_ARROW_TRANSPORT.convert_type(OracleType.TIMESTAMP, STAMP) == STAMP


def test_dates_and_timestamps_arrow2():
    assert ORACLE_ARROW2_TRANSPORT.convert_typesystem(OracleType.DATE) is Arrow2Type.DATE32
    assert ORACLE_ARROW2_TRANSPORT.convert_typesystem(OracleType.TIMESTAMP) is (
        Arrow2Type.DATE64
    )
    assert ORACLE_ARROW2_TRANSPORT.convert_type(OracleType.DATE, DAY) == DAY
    assert ORACLE_ARROW2_TRANSPORT.convert_type(OracleType.TIMESTAMP, STAMP) == STAMP


def test_timestamp_rejects_aware_value_arrow():
    with pytest.raises(TypeSystemError):
        ORACLE_ARROW_TRANSPORT.convert_type(
            OracleType.TIMESTAMP, datetime(2020, 1, 1, tzinfo=timezone.utc)
        )


def test_timestamp_rejects_aware_value_arrow2():
    with pytest.raises(TypeSystemError):
        ORACLE_ARROW2_TRANSPORT.convert_type(
            OracleType.TIMESTAMP, datetime(2020, 1, 1, tzinfo=timezone.utc)
        )


def test_date_rejects_datetime_arrow():
    with pytest.raises(TypeSystemError):
        ORACLE_ARROW_TRANSPORT.convert_type(OracleType.DATE, datetime(2020, 1, 1))


def test_date_rejects_datetime_arrow2():
    with pytest.raises(TypeSystemError):
        ORACLE_ARROW2_TRANSPORT.convert_type(OracleType.DATE, datetime(2020, 1, 1))