"""Parameter accessors: where a template component reads its value from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from fastlinks.domain.exceptions import AccessorIndexError

if TYPE_CHECKING:
    from fastlinks.domain.model.invocation import InvocationRecord


class AccessorKind(Enum):
    """Source sequence of an accessor."""

    OBJECT_POSITIONAL = auto()  # resolved_object_arguments
    ARGUMENT_POSITIONAL = auto()  # raw_arguments


@dataclass(frozen=True, slots=True)
class ParameterAccessor:
    """Pure positional lookup against an invocation record.

    Attributes:
        kind: Which sequence to read
        index: Position in that sequence (must be >= 0)
    """

    kind: AccessorKind
    index: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")

    @classmethod
    def object_argument(cls, index: int) -> ParameterAccessor:
        """Accessor for a resolved object argument."""
        return cls(AccessorKind.OBJECT_POSITIONAL, index)

    @classmethod
    def method_argument(cls, index: int) -> ParameterAccessor:
        """Accessor for a raw method argument."""
        return cls(AccessorKind.ARGUMENT_POSITIONAL, index)

    def get(self, invocation: InvocationRecord) -> object:
        """Current value for this accessor.

        Raises:
            AccessorIndexError: index outside the invocation's sequence
        """
        if self.kind is AccessorKind.OBJECT_POSITIONAL:
            values = invocation.resolved_object_arguments
            label = "object"
        else:
            values = invocation.raw_arguments
            label = "method"
        if self.index >= len(values):
            raise AccessorIndexError(label, self.index, len(values))
        return values[self.index]
