"""Invocation capture: record a controller call without running it.

    link_to(method_on(OrderController).show(42))

method_on() returns a proxy. Calling a method on the proxy binds the
arguments against the method signature and returns an Invocation
instead of executing the method body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, cast

from fastlinks.domain.model.invocation import InvocationRecord
from fastlinks.infrastructure.introspection import bind_arguments, method_identity

if TYPE_CHECKING:
    from fastlinks.domain.model.method import MethodIdentity

_T = TypeVar("_T")


class Invocation:
    """Captured call. Implements InvocationCapture."""

    __slots__ = ("_record",)

    def __init__(self, record: InvocationRecord) -> None:
        """Initialize with the captured record."""
        self._record = record

    @property
    def last_invocation(self) -> InvocationRecord:
        """Record of the captured call."""
        return self._record

    def __repr__(self) -> str:
        """Format as Invocation(Type.method)."""
        return f"Invocation({self._record.target_type.__qualname__}.{self._record.method.name})"


class _MethodRecorder:
    """Callable stand-in for one controller method."""

    __slots__ = ("_method", "_object_arguments", "_target_type")

    def __init__(
        self,
        target_type: type,
        method: MethodIdentity,
        object_arguments: tuple[object, ...],
    ) -> None:
        self._target_type = target_type
        self._method = method
        self._object_arguments = object_arguments

    def __call__(self, *args: object, **kwargs: object) -> Invocation:
        """Record the call.

        Raises:
            TypeError: arguments do not fit the method signature
        """
        record = InvocationRecord(
            target_type=self._target_type,
            method=self._method,
            raw_arguments=bind_arguments(self._method, args, kwargs),
            resolved_object_arguments=self._object_arguments,
        )
        return Invocation(record)


class _ControllerProxy:
    """Attribute access yields method recorders."""

    __slots__ = ("_object_arguments", "_target_type")

    def __init__(self, target_type: type, object_arguments: tuple[object, ...]) -> None:
        self._target_type = target_type
        self._object_arguments = object_arguments

    def __getattr__(self, name: str) -> _MethodRecorder:
        if name.startswith("__"):
            raise AttributeError(name)
        try:
            method = method_identity(self._target_type, name)
        except TypeError as exc:
            raise AttributeError(f"{self._target_type.__qualname__}.{name} is not a method") from exc
        return _MethodRecorder(self._target_type, method, self._object_arguments)

    def __repr__(self) -> str:
        """Format as method_on(Type)."""
        return f"method_on({self._target_type.__qualname__})"


def method_on(controller_type: type[_T], *object_arguments: object) -> _T:
    """Proxy that records calls on controller_type.

    Args:
        controller_type: Controller class whose methods carry mappings
        *object_arguments: Pre-resolved path values, consumed by the
            mapping's variables before any named path variable

    Raises:
        TypeError: controller_type is not a class
    """
    if not isinstance(controller_type, type):
        raise TypeError(f"controller_type must be a class, got {type(controller_type).__name__}")
    return cast("_T", _ControllerProxy(controller_type, object_arguments))
