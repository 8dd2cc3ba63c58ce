from datetime import date, datetime, time, timezone
from decimal import Decimal

import pytest

from typeroute.mysql_arrow import (
    MySQLProtocol,
    MySQLType,
    json_to_str,
    mysql_arrow2_transport,
    mysql_arrow_transport,
)
from typeroute.typesystem import Arrow2Type, ArrowType, TypeSystemError

BLOBS = [MySQLType.TINY_BLOB, MySQLType.BLOB, MySQLType.MEDIUM_BLOB, MySQLType.LONG_BLOB]


class _Parser:
    def __init__(self, values):
        self._values = iter(values)

    def produce(self):
        return next(self._values)


class _Writer:
    def __init__(self):
        self.values = []

    def write(self, value):
        self.values.append(value)


@pytest.mark.parametrize("protocol", list(MySQLProtocol))
def test_arrow_covers_every_type(protocol):
    transport = mysql_arrow_transport(protocol)
    assert {m.source for m in transport.mappings} == set(MySQLType)
    assert transport.destination_system is ArrowType


@pytest.mark.parametrize("protocol", list(MySQLProtocol))
def test_arrow2_has_no_blob_routes(protocol):
    transport = mysql_arrow2_transport(protocol)
    assert {m.source for m in transport.mappings} == set(MySQLType) - set(BLOBS)
    for blob in BLOBS:
        with pytest.raises(TypeSystemError):
            transport.convert_typesystem(blob)


@pytest.mark.parametrize(
    "source, destination",
    [
        (MySQLType.FLOAT, ArrowType.FLOAT64),
        (MySQLType.TINY, ArrowType.INT64),
        (MySQLType.INT24, ArrowType.INT64),
        (MySQLType.UINT24, ArrowType.INT64),
        (MySQLType.ULONG_LONG, ArrowType.FLOAT64),
        (MySQLType.YEAR, ArrowType.INT64),
        (MySQLType.TIMESTAMP, ArrowType.DATE64),
        (MySQLType.DECIMAL, ArrowType.FLOAT64),
        (MySQLType.ENUM, ArrowType.LARGE_UTF8),
        (MySQLType.LONG_BLOB, ArrowType.LARGE_BINARY),
        (MySQLType.JSON, ArrowType.LARGE_UTF8),
    ],
)
def test_convert_typesystem(source, destination):
    assert mysql_arrow_transport(MySQLProtocol.BINARY).convert_typesystem(source) is destination


def test_arrow2_destination_types():
    transport = mysql_arrow2_transport("TextProtocol")
    assert transport.convert_typesystem(MySQLType.ULONG_LONG) is Arrow2Type.FLOAT64
    assert transport.convert_typesystem(MySQLType.DATE) is Arrow2Type.DATE32


def test_numeric_conversions():
    transport = mysql_arrow_transport(MySQLProtocol.TEXT)
    big = 2**63
    result = transport.convert_type(MySQLType.ULONG_LONG, big)
    assert isinstance(result, float) and result == float(big)
    assert transport.convert_type(MySQLType.INT24, 12) == 12
    assert transport.convert_type(MySQLType.DECIMAL, Decimal("2.5")) == 2.5


def test_temporal_and_text_pass_through():
    transport = mysql_arrow_transport(MySQLProtocol.BINARY)
    stamp = datetime(2021, 1, 2, 3, 4, 5)
    assert transport.convert_type(MySQLType.TIMESTAMP, stamp) == stamp
    assert transport.convert_type(MySQLType.DATE, date(2021, 1, 2)) == date(2021, 1, 2)
    assert transport.convert_type(MySQLType.TIME, time(1, 2)) == time(1, 2)
    assert transport.convert_type(MySQLType.CHAR, "odd") == "odd"
    assert transport.convert_type(MySQLType.MEDIUM_BLOB, bytearray(b"ab")) == b"ab"


def test_aware_timestamp_rejected():
    transport = mysql_arrow_transport(MySQLProtocol.BINARY)
    with pytest.raises(TypeSystemError):
        transport.convert_type(
            MySQLType.TIMESTAMP, datetime(2021, 1, 1, tzinfo=timezone.utc)
        )


def test_decimal_infinity_fails():
    with pytest.raises(TypeSystemError):
        mysql_arrow_transport(MySQLProtocol.BINARY).convert_type(
            MySQLType.DECIMAL, Decimal("Infinity")
        )


def test_json_to_str_is_compact_and_sorted():
    assert json_to_str({"b": [1, 2], "a": None}) == '{"a":null,"b":[1,2]}'


def test_json_round_trip():
    import json

    value = {"x": [True, 1.5, "é"], "y": {"z": 0}}
    assert json.loads(json_to_str(value)) == value


def test_json_nan_rejected():
    with pytest.raises(TypeSystemError):
        json_to_str(float("nan"))


def test_json_through_transport():
    transport = mysql_arrow2_transport(MySQLProtocol.TEXT)
    assert transport.convert_type(MySQLType.JSON, [1, "a"]) == '[1,"a"]'


def test_null_passes():
    transport = mysql_arrow_transport(MySQLProtocol.BINARY)
    assert transport.convert_type(MySQLType.JSON, None) is None
    assert transport.convert_type(MySQLType.TINY, None) is None


def test_transports_are_cached_and_named():
    assert mysql_arrow_transport("BinaryProtocol") is mysql_arrow_transport(
        MySQLProtocol.BINARY
    )
    assert mysql_arrow_transport(MySQLProtocol.TEXT).name == "MySQLArrowTransport<TextProtocol>"
    assert (
        mysql_arrow2_transport(MySQLProtocol.BINARY).name
        == "MySQLArrow2Transport<BinaryProtocol>"
    )


def test_unknown_protocol():
    with pytest.raises(TypeSystemError):
        mysql_arrow_transport("CSVProtocol")


def test_processor_moves_values():
    transport = mysql_arrow_transport(MySQLProtocol.BINARY)
    writer = _Writer()
    process = transport.processor(MySQLType.SHORT, ArrowType.INT64)
    parser = _Parser([3, None, 4])
    for _ in range(3):
        process(parser, writer)
    assert writer.values == [3, None, 4]


def test_processor_rejects_wrong_destination():
    with pytest.raises(TypeSystemError):
        mysql_arrow_transport(MySQLProtocol.BINARY).processor(
            MySQLType.SHORT, ArrowType.INT32
        )