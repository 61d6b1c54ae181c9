"""Method introspection: controller function → MethodIdentity."""

from __future__ import annotations

import functools
import inspect
import typing
from typing import TYPE_CHECKING

from fastlinks.domain.model.method import MethodIdentity, TypeDescriptor

if TYPE_CHECKING:
    from collections.abc import Callable


def _declaring_type(target_type: type, name: str) -> type:
    """First class in the MRO whose namespace defines name."""
    for klass in target_type.__mro__:
        if name in vars(klass):
            return klass
    raise AttributeError(f"{target_type.__qualname__} has no method {name!r}")


def _unwrap(member: object) -> tuple[Callable[..., object], bool]:
    """Underlying function and whether its first parameter is bound (self/cls)."""
    if isinstance(member, staticmethod):
        return member.__func__, False
    if isinstance(member, classmethod):
        return member.__func__, True
    if inspect.isfunction(member):
        return member, True
    raise TypeError(f"{member!r} is not a method")


@functools.cache
def method_identity(target_type: type, name: str) -> MethodIdentity:
    """Describe method name of target_type.

    Resolved once per (type, name); type hints are evaluated with
    include_extras so Annotated markers survive.

    Raises:
        AttributeError: no such method
        TypeError: attribute is not a function
    """
    declaring = _declaring_type(target_type, name)
    function, bound = _unwrap(inspect.getattr_static(declaring, name))

    hints = typing.get_type_hints(function, include_extras=True)
    parameters = list(inspect.signature(function).parameters.values())
    if bound and parameters:
        parameters = parameters[1:]

    return MethodIdentity(
        declaring_type=declaring,
        name=name,
        parameter_names=tuple(p.name for p in parameters),
        parameter_types=tuple(
            TypeDescriptor.from_annotation(hints.get(p.name, object)) for p in parameters
        ),
        function=function,
    )


def bind_arguments(
    method: MethodIdentity,
    args: tuple[object, ...],
    kwargs: dict[str, object],
) -> tuple[object, ...]:
    """Arguments of one call, one value per declared parameter.

    Defaults are applied. Missing arguments without default are None.

    Raises:
        TypeError: arguments do not fit the signature
    """
    signature = inspect.signature(method.function)
    parameters = list(signature.parameters.values())
    if len(parameters) > method.arity:
        # Drop self/cls: the proxy never has an instance
        signature = signature.replace(parameters=parameters[1:])

    bound = signature.bind_partial(*args, **kwargs)
    bound.apply_defaults()
    return tuple(bound.arguments.get(name) for name in method.parameter_names)
