# typeroute

`typeroute` describes the column types of several database sources (SQLite,
PostgreSQL, MySQL, MS SQL Server, Oracle and a synthetic "dummy" source) and
the rules that map each of them onto an Arrow column type. It also converts
each value along the way. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install .[test]
```

## Concepts

Everything below lives in `typeroute.typesystem` unless another module is
named.

- **`DataType`** is the base of every type-system enum. A member's value is
  `(label, python_type, tz_aware)`. These are also available as the `label`,
  `python_type` and `tz_aware` properties. `tz_aware` is `True` or `False` for
  date-times that must or must not carry a time zone, and `None` otherwise.
- **`DataType.check(value)`** raises `TypeSystemError` unless the value belongs
  to the type. `None` always passes, because it stands for a null. The check is
  strict:
  - `bool` is not accepted where `int` is expected;
  - a `datetime` is not accepted where a `date` is expected;
  - `bytes` types also accept `bytearray` and `memoryview`.
- **Source type systems**: `DummyType` (`typeroute.dummy_arrow`), `SQLiteType`
  (`typeroute.sqlite_arrow`), `OracleType` (`typeroute.oracle_arrow`),
  `MsSQLType` (`typeroute.mssql_arrow`), `PostgresType`
  (`typeroute.postgres_arrow`) and `MySQLType` (`typeroute.mysql_arrow`).
- **Destination type systems**: `ArrowType` and `Arrow2Type`.
- **`Mapping(source, destination, conversion)`** is one routing rule. Its
  `Conversion` is one of the following:
  - `AUTO` or `OWNED`: the destination's Python type builds the value (for
    example `int`, `float`, `str` or `bytes`); date and time values are passed
    through unchanged;
  - `OPTION`: a converter function supplied to the transport is used;
  - `NONE`: the conversion of another rule with the same value representation
    and destination type is reused.
- **`Transport(name, mappings, converters)`** validates its rules when it is
  built. It raises `TypeSystemError` in any of these cases:
  - no rules are given;
  - the rules mix type systems;
  - a source type is mapped twice;
  - an `OPTION` rule has no converter;
  - a `NONE` rule has nothing to reuse.

## Using a transport

```python
from datetime import datetime, timezone

from typeroute.dummy_arrow import DUMMY_ARROW_TRANSPORT, DummyType
from typeroute.typesystem import ArrowType

DUMMY_ARROW_TRANSPORT.convert_typesystem(DummyType.DATETIME)   # ArrowType.DATE64
DUMMY_ARROW_TRANSPORT.convert_type(
    DummyType.DATETIME, datetime(2021, 1, 1, 12, tzinfo=timezone.utc)
)                                                              # datetime(2021, 1, 1, 12, 0)
```

`convert_type` behaves as follows:

- it checks the value against the source type;
- `None` passes through unchanged;
- it checks the result against the destination type;
- an unmapped source type raises `TypeSystemError`.

`processor(ts1, ts2)` returns a function of `(parser, writer)`. That function
calls `parser.produce()`, converts the value and passes it to
`writer.write(value)`. It raises `TypeSystemError` if `ts1` does not map to
`ts2`. `process(ts1, ts2, parser, writer)` does the same in one call.

### Ready-made transports

These module-level transports are available:

- `DUMMY_ARROW_TRANSPORT` and `DUMMY_ARROW2_TRANSPORT` in `typeroute.dummy_arrow`;
- `SQLITE_ARROW_TRANSPORT` and `SQLITE_ARROW2_TRANSPORT` in `typeroute.sqlite_arrow`;
- `ORACLE_ARROW_TRANSPORT` and `ORACLE_ARROW2_TRANSPORT` in `typeroute.oracle_arrow`;
- `MSSQL_ARROW_TRANSPORT` and `MSSQL_ARROW2_TRANSPORT` in `typeroute.mssql_arrow`.

Routes that are built per wire protocol have factories:

- `postgres_arrow_transport(protocol, tls)` and
  `postgres_arrow2_transport(protocol, tls)` in `typeroute.postgres_arrow`.
  - `protocol` is a `PostgresProtocol` member or its value: `"BinaryProtocol"`,
    `"CSVProtocol"` or `"CursorProtocol"`.
  - `tls` must be `True` or `False`.
- `mysql_arrow_transport(protocol)` and `mysql_arrow2_transport(protocol)` in
  `typeroute.mysql_arrow`.
  - `protocol` is a `MySQLProtocol` member, `"BinaryProtocol"` or
    `"TextProtocol"`.

An unknown protocol raises `TypeSystemError`. The same arguments always return
the same transport object.

### Arrow and Arrow2 differences

The Arrow2 routes are narrower than the Arrow routes:

- the Postgres route has no rule for `TIMESTAMP_TZ`;
- the Oracle route has no rules for `BINARY_FLOAT`, `BINARY_DOUBLE` or
  `TIMESTAMP_TZ`;
- the MySQL route has no rules for the blob types.

## Value converters

- `typeroute.dummy_arrow`:
  - `datetime_to_naive` turns an aware date-time into the naive UTC date-time
    of the same instant;
  - `naive_to_utc` reads a naive date-time as UTC;
  - `date_to_utc` gives midnight UTC of a date.

  Each raises `TypeSystemError` when given the wrong kind of value.
- `typeroute.mssql_arrow`:
  - `uuid_to_str`, `intn_to_int` and `floatn_to_float` extract plain values
    (`IntN` and `FloatN` are small frozen dataclasses with a `value` field);
  - `decimal_to_float` raises `TypeSystemError` for non-finite decimals.
- `typeroute.mysql_arrow`:
  - `json_to_str` serialises a JSON value compactly, with sorted keys;
  - it raises `TypeSystemError` for values that cannot be serialised,
    including NaN and infinities.

## What this package does not do

This package does not do any of the following:

- connect to databases or read files;
- build Arrow arrays or record batches;
- look up transports by source and destination name.

It only describes types, checks values and converts them one at a time. A
caller supplies the parser and writer objects and picks the transport it needs
from the modules above.

## Running the tests

```
pytest
```