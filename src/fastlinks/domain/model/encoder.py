"""Value encoders: argument value -> validated URI text.

Three strategies, chosen once at compile time from the declared type:

    DIRECT       str, int, bool, enums, collections of those
    CONVERSION   anything else, through ValueConverterPort
    UNSUPPORTED  mappings (only None is accepted)

Every produced string passes through the SegmentKind gate.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from fastlinks.domain.exceptions import EncodingRejectedError, UnsupportedArgumentTypeError
from fastlinks.domain.model.method import TypeDescriptor

if TYPE_CHECKING:
    from fastlinks.domain.model.segment_kind import SegmentKind
    from fastlinks.domain.ports.value_converter import ValueConverterPort

_TEXT_TYPES = (str, bytes, bytearray)


class EncoderKind(Enum):
    """Encoding strategy."""

    DIRECT = auto()
    CONVERSION = auto()
    UNSUPPORTED = auto()


def is_multi_value(value: object) -> bool:
    """Runtime check: value renders as several elements."""
    return (
        isinstance(value, Collection)
        and not isinstance(value, _TEXT_TYPES)
        and not isinstance(value, Mapping)
    )


def stringify(value: object) -> str:
    """Plain string form used by DIRECT encoders.

    Enums render their name, booleans lowercase, collections
    comma-join their elements. None elements are dropped.
    """
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_multi_value(value):
        return ",".join(stringify(element) for element in value if element is not None)
    return str(value)


@dataclass(frozen=True, slots=True)
class ValueEncoder:
    """Encoder bound to one segment kind and one declared type.

    Attributes:
        kind: Encoding strategy
        segment_kind: Segment the result is validated for
        descriptor: Declared parameter type
        converter: Conversion service, required for CONVERSION
    """

    kind: EncoderKind
    segment_kind: SegmentKind
    descriptor: TypeDescriptor = field(default_factory=lambda: TypeDescriptor(object))
    converter: ValueConverterPort | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is EncoderKind.CONVERSION and self.converter is None:
            raise TypeError("CONVERSION encoder requires a converter")

    @classmethod
    def for_descriptor(
        cls,
        descriptor: TypeDescriptor,
        segment_kind: SegmentKind,
        converter: ValueConverterPort,
    ) -> ValueEncoder:
        """Pick the strategy for a declared type."""
        if descriptor.is_simple:
            return cls(EncoderKind.DIRECT, segment_kind, descriptor)
        if descriptor.is_mapping:
            return cls(EncoderKind.UNSUPPORTED, segment_kind, descriptor)
        return cls(EncoderKind.CONVERSION, segment_kind, descriptor, converter)

    def encode(self, value: object) -> str | None:
        """Encode value, None passes through as None.

        Raises:
            UnsupportedArgumentTypeError: non-None value for UNSUPPORTED
            EncodingRejectedError: result has characters not allowed in segment_kind
        """
        if value is None:
            return None

        match self.kind:
            case EncoderKind.UNSUPPORTED:
                raise UnsupportedArgumentTypeError(type(value))
            case EncoderKind.CONVERSION:
                if self.converter is None:
                    raise TypeError("CONVERSION encoder requires a converter")
                result = self.converter.convert(value, self.descriptor)
            case _:
                result = stringify(value)

        if result is None:
            return None
        self.verify(result)
        return result

    def verify(self, value: str) -> None:
        """Refuse value if any character is not allowed.

        Raises:
            EncodingRejectedError: value has a disallowed character
        """
        if not self.segment_kind.is_allowed_value(value):
            raise EncodingRejectedError(value, self.segment_kind.name)
