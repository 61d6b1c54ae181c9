"""Method metadata value objects: declared parameter types and method identity."""

from __future__ import annotations

import types
import typing
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Union

if TYPE_CHECKING:
    from collections.abc import Callable

_NONE_TYPE = type(None)
_TEXT_TYPES = (str, bytes, bytearray)


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Declared type of one method parameter.

    Equality and hash use only the runtime class, so two parameters
    of the same class are interchangeable in cache keys.

    Attributes:
        type: Runtime class (Optional and Annotated unwrapped, generics reduced to origin)
        metadata: Extra Annotated items (binding markers, format hints)
    """

    type: type
    metadata: tuple[object, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.type, type):
            raise TypeError(f"type must be a class, got {self.type!r}")

    @classmethod
    def from_annotation(cls, annotation: Any) -> TypeDescriptor:
        """Build descriptor from a resolved type hint.

        Annotated[T, ...] keeps its extras as metadata.
        T | None reduces to T. Unions of several classes,
        type variables and missing hints reduce to object.
        """
        metadata: tuple[object, ...] = ()
        if typing.get_origin(annotation) is Annotated:
            metadata = tuple(annotation.__metadata__)
            annotation = annotation.__origin__

        origin = typing.get_origin(annotation)
        if origin is Union or origin is types.UnionType:
            members = [arg for arg in typing.get_args(annotation) if arg is not _NONE_TYPE]
            if len(members) == 1:
                nested = cls.from_annotation(members[0])
                return cls(type=nested.type, metadata=nested.metadata + metadata)
            return cls(type=object, metadata=metadata)

        runtime = origin if origin is not None else annotation
        if runtime is Any or not isinstance(runtime, type):
            runtime = object
        return cls(type=runtime, metadata=metadata)

    @property
    def is_mapping(self) -> bool:
        """Mapping types cannot be encoded into a link."""
        return issubclass(self.type, Mapping)

    @property
    def is_collection(self) -> bool:
        """Sized iterable of elements, excluding text and mappings."""
        return (
            issubclass(self.type, Collection)
            and not issubclass(self.type, _TEXT_TYPES)
            and not self.is_mapping
        )

    @property
    def is_simple(self) -> bool:
        """Rendered by plain stringification: text, bool, int, enums, collections."""
        return issubclass(self.type, (str, int, Enum)) or self.is_collection

    def find_metadata(self, marker_type: type) -> object | None:
        """First metadata item of the given type, None if absent."""
        for item in self.metadata:
            if isinstance(item, marker_type):
                return item
        return None

    def __str__(self) -> str:
        """Format as qualified class name."""
        return f"{self.type.__module__}.{self.type.__qualname__}"


@dataclass(frozen=True, slots=True)
class MethodIdentity:
    """Identity of a controller method.

    Equal when declaring type, name and parameter classes are equal.
    The function object itself is carried for binding but not compared.

    Attributes:
        declaring_type: Class that declares the method
        name: Method name
        parameter_names: Declared parameter names, self excluded
        parameter_types: Declared parameter types, same order
        function: Underlying function
    """

    declaring_type: type
    name: str
    parameter_names: tuple[str, ...]
    parameter_types: tuple[TypeDescriptor, ...]
    function: Callable[..., object] = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")
        if len(self.parameter_names) != len(self.parameter_types):
            raise ValueError(
                f"parameter_names ({len(self.parameter_names)}) and "
                f"parameter_types ({len(self.parameter_types)}) must have equal length"
            )

    @property
    def arity(self) -> int:
        """Number of declared parameters."""
        return len(self.parameter_types)

    def structural_key(self, target_type: type) -> str:
        """Key from target type, method name and parameter classes."""
        params = ",".join(str(descriptor) for descriptor in self.parameter_types)
        return f"{target_type.__module__}.{target_type.__qualname__}.{self.name}({params})"

    def __str__(self) -> str:
        """Format as Type.method."""
        return f"{self.declaring_type.__qualname__}.{self.name}"
