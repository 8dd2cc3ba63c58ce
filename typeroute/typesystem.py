"""Type systems and the transports that route values from one to another.

A type system is an enum whose members describe the column types a source
produces or a destination accepts.  Each member carries the Python type of its
values, so a value can be checked against it at run time.  A transport holds
the rules that map every source type to a destination type, together with the
function that turns a produced value into one the destination accepts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Optional, Protocol


class TypeSystemError(Exception):
    """A value, type or rule does not fit a type system or a transport."""


# Python types that also accept related, borrowed representations.
_ACCEPTED: dict[type, tuple[type, ...]] = {bytes: (bytes, bytearray, memoryview)}

# Destination types whose constructor turns a compatible value into an owned one.
_CONSTRUCTED = (bool, int, float, str, bytes)


class DataType(Enum):
    """Base of every type-system enum.

    A member's value is ``(label, python_type, tz_aware)``; ``tz_aware`` is
    True or False for date-times that must or must not carry a time zone, and
    None where it does not apply.
    """

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def python_type(self) -> type:
        return self.value[1]

    @property
    def tz_aware(self) -> bool | None:
        return self.value[2]

    @property
    def physical(self) -> tuple[type, bool | None]:
        """The representation of values of this type."""
        return (self.python_type, self.tz_aware)

    def __str__(self) -> str:
        return f"{type(self).__name__}.{self.label}"

    def check(self, value: Any) -> None:
        """Raise TypeSystemError unless ``value`` belongs to this type; None is a null."""
        if value is not None and not self._accepts(value):
            raise TypeSystemError(
                f"value {value!r} of type {type(value).__name__} does not match {self}"
            )

    def _accepts(self, value: Any) -> bool:
        expected = self.python_type
        if expected is object:
            return True
        if not isinstance(value, _ACCEPTED.get(expected, expected)):
            return False
        if expected is int and isinstance(value, bool):
            return False
        if expected is date and isinstance(value, datetime):
            return False
        if self.tz_aware is not None:
            aware = value.tzinfo is not None and value.utcoffset() is not None
            return aware == self.tz_aware
        return True


class ArrowType(DataType):
    """Column types accepted by the Arrow destination."""

    BOOLEAN = ("Boolean", bool, None)
    INT32 = ("Int32", int, None)
    INT64 = ("Int64", int, None)
    FLOAT32 = ("Float32", float, None)
    FLOAT64 = ("Float64", float, None)
    LARGE_UTF8 = ("LargeUtf8", str, None)
    LARGE_BINARY = ("LargeBinary", bytes, None)
    DATE32 = ("Date32", date, None)
    DATE64 = ("Date64", datetime, False)
    TIME64 = ("Time64", time, None)
    DATETIME_TZ = ("DateTimeTz", datetime, True)


class Arrow2Type(DataType):
    """Column types accepted by the Arrow2 destination."""

    BOOLEAN = ("Boolean", bool, None)
    INT32 = ("Int32", int, None)
    INT64 = ("Int64", int, None)
    FLOAT32 = ("Float32", float, None)
    FLOAT64 = ("Float64", float, None)
    LARGE_UTF8 = ("LargeUtf8", str, None)
    LARGE_BINARY = ("LargeBinary", bytes, None)
    DATE32 = ("Date32", date, None)
    DATE64 = ("Date64", datetime, False)
    TIME64 = ("Time64", time, None)
    DATETIME_TZ = ("DateTimeTz", datetime, True)


class Conversion(Enum):
    """How a mapping turns a source value into a destination value.

    AUTO and OWNED build the destination value directly, OPTION uses a
    converter supplied to the transport, and NONE reuses the conversion of
    another mapping between the same representations.
    """

    AUTO = "auto"
    OWNED = "owned"
    OPTION = "option"
    NONE = "none"


@dataclass(frozen=True)
class Mapping:
    """A rule routing one source type to one destination type."""

    source: DataType
    destination: DataType
    conversion: Conversion = Conversion.AUTO


class _Parser(Protocol):
    def produce(self) -> Any: ...


class _Writer(Protocol):
    def write(self, value: Any) -> None: ...


Converter = Callable[[Any], Any]
Processor = Callable[[_Parser, _Writer], None]


def _direct_conversion(destination: DataType) -> Optional[Converter]:
    """The constructor building an owned destination value, or None to pass it as is."""
    target = destination.python_type
    return target if target in _CONSTRUCTED else None


class Transport:
    """Routes values of a source type system to a destination type system."""

    def __init__(
        self,
        name: str,
        mappings: Iterable[Mapping],
        converters: MappingABC[DataType, Converter] | None = None,
    ) -> None:
        self.name = name
        self.mappings = tuple(mappings)
        if not self.mappings:
            raise TypeSystemError(f"{name}: a transport needs at least one mapping")
        sources = {type(m.source) for m in self.mappings}
        destinations = {type(m.destination) for m in self.mappings}
        if len(sources) > 1 or len(destinations) > 1:
            raise TypeSystemError(f"{name}: mappings mix several type systems")
        self.source_system: type[DataType] = sources.pop()
        self.destination_system: type[DataType] = destinations.pop()
        self._routes = self._resolve(dict(converters or {}))

    def _resolve(
        self, converters: dict[DataType, Converter]
    ) -> dict[DataType, tuple[DataType, Optional[Converter]]]:
        functions: dict[DataType, Optional[Converter]] = {}
        shared: dict[tuple[Any, DataType], Optional[Converter]] = {}
        seen: set[DataType] = set()
        for mapping in self.mappings:
            if mapping.source in seen:
                raise TypeSystemError(f"{self.name}: {mapping.source} is mapped twice")
            seen.add(mapping.source)
            if mapping.conversion is Conversion.NONE:
                continue
            if mapping.conversion is Conversion.OPTION:
                try:
                    function: Optional[Converter] = converters[mapping.source]
                except KeyError:
                    raise TypeSystemError(
                        f"{self.name}: no converter given for {mapping.source}"
                    ) from None
            else:
                function = _direct_conversion(mapping.destination)
            functions[mapping.source] = function
            shared.setdefault((mapping.source.physical, mapping.destination), function)

        for mapping in self.mappings:
            if mapping.conversion is not Conversion.NONE:
                continue
            key = (mapping.source.physical, mapping.destination)
            if key not in shared:
                raise TypeSystemError(
                    f"{self.name}: no conversion to reuse for "
                    f"{mapping.source} => {mapping.destination}"
                )
            functions[mapping.source] = shared[key]

        return {m.source: (m.destination, functions[m.source]) for m in self.mappings}

    def __repr__(self) -> str:
        return (
            f"Transport({self.name!r}, {self.source_system.__name__} => "
            f"{self.destination_system.__name__})"
        )

    def _route(self, ts: DataType) -> tuple[DataType, Optional[Converter]]:
        try:
            return self._routes[ts]
        except KeyError:
            raise TypeSystemError(f"{self.name}: no conversion rule for {ts}") from None

    def convert_typesystem(self, ts: DataType) -> DataType:
        """Return the destination type that source type ``ts`` maps to."""
        return self._route(ts)[0]

    def convert_type(self, ts: DataType, value: Any) -> Any:
        """Convert a value of source type ``ts`` into its destination value."""
        destination, convert = self._route(ts)
        ts.check(value)
        if value is None:
            return None
        result = value if convert is None else convert(value)
        destination.check(result)
        return result

    def processor(self, ts1: DataType, ts2: DataType) -> Processor:
        """Return a function moving one value of ``ts1`` from a parser to a writer as ``ts2``."""
        destination, _ = self._route(ts1)
        if destination is not ts2:
            raise TypeSystemError(
                f"{self.name}: {ts1} maps to {destination}, not to {ts2}"
            )

        def process(parser: _Parser, writer: _Writer) -> None:
            writer.write(self.convert_type(ts1, parser.produce()))

        return process

    def process(self, ts1: DataType, ts2: DataType, parser: _Parser, writer: _Writer) -> None:
        """Take one value from ``parser``, convert it and write it to ``writer``."""
        self.processor(ts1, ts2)(parser, writer)