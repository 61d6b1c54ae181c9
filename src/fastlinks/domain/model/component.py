"""Template components: single render steps of a link template."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from fastlinks.domain.model.accessor import AccessorKind
from fastlinks.domain.model.encoder import is_multi_value

if TYPE_CHECKING:
    from fastlinks.domain.model.accessor import ParameterAccessor
    from fastlinks.domain.model.encoder import ValueEncoder
    from fastlinks.domain.model.invocation import InvocationRecord


class ComponentKind(Enum):
    """Render step variant."""

    LITERAL = auto()  # fixed mapping text
    PATH_VALUE = auto()  # one encoded value
    QUERY_VALUE = auto()  # name=value pairs


@dataclass(frozen=True, slots=True)
class Component:
    """One render step.

    LITERAL uses text only. PATH_VALUE uses accessor and encoder.
    QUERY_VALUE uses name, accessor and encoder.

    Attributes:
        kind: Variant tag
        text: Literal text (LITERAL)
        name: Query parameter name (QUERY_VALUE)
        accessor: Value source (PATH_VALUE, QUERY_VALUE)
        encoder: Value encoder (PATH_VALUE, QUERY_VALUE)
    """

    kind: ComponentKind
    text: str = ""
    name: str = ""
    accessor: ParameterAccessor | None = None
    encoder: ValueEncoder | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is ComponentKind.LITERAL:
            if not self.text:
                raise ValueError("literal component text must not be empty")
            return
        if self.accessor is None or self.encoder is None:
            raise TypeError(f"{self.kind.name} component requires accessor and encoder")
        if self.kind is ComponentKind.QUERY_VALUE and not self.name:
            raise ValueError("query component name must not be empty")

    @classmethod
    def literal(cls, text: str) -> Component:
        """Fixed text copied from the mapping."""
        return cls(ComponentKind.LITERAL, text=text)

    @classmethod
    def path_value(cls, accessor: ParameterAccessor, encoder: ValueEncoder) -> Component:
        """Single encoded value in the path."""
        return cls(ComponentKind.PATH_VALUE, accessor=accessor, encoder=encoder)

    @classmethod
    def query_value(
        cls,
        name: str,
        accessor: ParameterAccessor,
        encoder: ValueEncoder,
    ) -> Component:
        """name=value entry, repeated for collections."""
        return cls(ComponentKind.QUERY_VALUE, name=name, accessor=accessor, encoder=encoder)

    def _value_parts(self) -> tuple[ParameterAccessor, ValueEncoder]:
        if self.accessor is None or self.encoder is None:
            raise TypeError(f"{self.kind.name} component requires accessor and encoder")
        return self.accessor, self.encoder

    def append(self, parts: list[str], invocation: InvocationRecord) -> bool:
        """Append rendered text to parts.

        Returns:
            True if the component contributed text
        """
        if self.kind is ComponentKind.LITERAL:
            parts.append(self.text)
            return True

        accessor, encoder = self._value_parts()

        value = accessor.get(invocation)
        if value is None:
            return False

        if self.kind is ComponentKind.PATH_VALUE:
            encoded = encoder.encode(value)
            if encoded is None:
                return False
            parts.append(encoded)
            return True

        elements = value if is_multi_value(value) else (value,)
        pairs = []
        for element in elements:
            encoded = encoder.encode(element)
            if encoded is not None:
                pairs.append(f"{self.name}={encoded}")
        if not pairs:
            return False
        parts.append("&".join(pairs))
        return True

    def describe(self) -> str:
        """Short human-readable form, e.g. "{arg[0]}" or "ids=arg[1]"."""
        if self.kind is ComponentKind.LITERAL:
            return self.text
        accessor, _ = self._value_parts()
        source = "obj" if accessor.kind is AccessorKind.OBJECT_POSITIONAL else "arg"
        slot = f"{source}[{accessor.index}]"
        if self.kind is ComponentKind.PATH_VALUE:
            return "{" + slot + "}"
        return f"{self.name}={slot}"
