"""Captured invocation: the data source a link template renders from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fastlinks.domain.model.method import MethodIdentity


@dataclass(frozen=True, slots=True)
class InvocationRecord:
    """Immutable snapshot of one captured controller call.

    Attributes:
        target_type: Controller type the call was captured on
        method: Called method
        raw_arguments: One value per declared parameter, None allowed
        resolved_object_arguments: Pre-resolved path values, consumed
            ahead of named path variables (independent indexing)
    """

    target_type: type
    method: MethodIdentity
    raw_arguments: tuple[object, ...]
    resolved_object_arguments: tuple[object, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.target_type, type):
            raise TypeError(f"target_type must be a class, got {type(self.target_type).__name__}")
        if len(self.raw_arguments) != self.method.arity:
            raise ValueError(
                f"{self.method} declares {self.method.arity} parameter(s), "
                f"got {len(self.raw_arguments)} argument(s)"
            )


@runtime_checkable
class InvocationCapture(Protocol):
    """Anything that carries a captured invocation record."""

    @property
    def last_invocation(self) -> InvocationRecord:
        """Record of the captured call."""
        ...
