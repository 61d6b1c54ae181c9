"""Default value conversion service.

Canonical string forms for values that are not rendered by plain
stringification: temporal types as ISO 8601, decimals without
exponent, UUIDs, paths. Collections comma-join their converted
elements. Unknown types fall back to str().
"""

from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING

from fastlinks.domain.model.encoder import is_multi_value
from fastlinks.domain.model.formatting import ISO, DateTimeFormat
from fastlinks.domain.ports.value_converter import ValueConverterPort

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastlinks.domain.model.method import TypeDescriptor


def _format_temporal(value: dt.date | dt.time, iso: ISO) -> str:
    """Render a date, datetime or time in the requested ISO 8601 variant."""
    if isinstance(value, dt.time):
        if iso is ISO.TIME:
            return value.isoformat()
        raise TypeError(f"cannot render time {value!r} as {iso.name}")

    match iso:
        case ISO.DATE:
            day = value.date() if isinstance(value, dt.datetime) else value
            return day.isoformat()
        case ISO.TIME:
            if not isinstance(value, dt.datetime):
                raise TypeError(f"cannot render date {value!r} as TIME")
            return value.timetz().isoformat()
        case _:
            if not isinstance(value, dt.datetime):
                value = dt.datetime.combine(value, dt.time())
            return value.isoformat()


def _default_formatters() -> dict[type, Callable[[object], str]]:
    return {
        dt.datetime: lambda value: value.isoformat(),  # type: ignore[attr-defined]
        dt.date: lambda value: value.isoformat(),  # type: ignore[attr-defined]
        dt.time: lambda value: value.isoformat(),  # type: ignore[attr-defined]
        Decimal: lambda value: format(value, "f"),
        uuid.UUID: str,
        PurePath: lambda value: value.as_posix(),  # type: ignore[attr-defined]
        Enum: lambda value: value.name,  # type: ignore[attr-defined]
        bool: lambda value: "true" if value else "false",
    }


class DefaultValueConverter(ValueConverterPort):
    """Type-keyed formatter table with str() fallback.

    Lookup walks the value's MRO, so a formatter registered for a
    base class serves its subclasses. DateTimeFormat metadata on the
    declared type overrides the table for temporal values.

    Register formatters before the first link is built: the table
    is read without locking.
    """

    def __init__(self) -> None:
        """Initialize with the default formatter table."""
        self._formatters = _default_formatters()

    def register(self, value_type: type, formatter: Callable[[object], str]) -> None:
        """Add or replace the formatter for value_type.

        Raises:
            TypeError: value_type is not a class or formatter is not callable
        """
        if not isinstance(value_type, type):
            raise TypeError(f"value_type must be a class, got {value_type!r}")
        if not callable(formatter):
            raise TypeError(f"formatter must be callable, got {type(formatter).__name__}")
        self._formatters[value_type] = formatter

    def convert(self, value: object, descriptor: TypeDescriptor) -> str | None:
        """String form of value.

        Raises:
            TypeError: DateTimeFormat variant does not fit the value
        """
        if value is None:
            return None

        hint = descriptor.find_metadata(DateTimeFormat)
        if isinstance(hint, DateTimeFormat) and isinstance(value, (dt.date, dt.time)):
            return _format_temporal(value, hint.iso)

        for klass in type(value).__mro__:
            formatter = self._formatters.get(klass)
            if formatter is not None:
                return formatter(value)

        if is_multi_value(value):
            elements = (self.convert(element, descriptor) for element in value)
            return ",".join(element for element in elements if element is not None)
        return str(value)
