"""Bound parameter discovery from Annotated markers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastlinks.domain.model.binding import BoundParameter, PathVariable, RequestParam
from fastlinks.domain.ports.parameter_binder import ParameterBinderPort

if TYPE_CHECKING:
    from fastlinks.domain.model.binding import BindingRole
    from fastlinks.domain.model.method import MethodIdentity

_MARKERS = (PathVariable, RequestParam)


class AnnotatedParameterBinder(ParameterBinderPort):
    """Finds PathVariable/RequestParam markers in parameter metadata.

    Unmarked parameters are not bound. A marker without a name
    binds under the Python parameter name.
    """

    def bound_parameters(
        self,
        method: MethodIdentity,
        role: BindingRole,
    ) -> tuple[BoundParameter, ...]:
        """Bound parameters of role in declaration order."""
        bound: list[BoundParameter] = []
        for index, (name, descriptor) in enumerate(
            zip(method.parameter_names, method.parameter_types, strict=True)
        ):
            for marker in descriptor.metadata:
                if isinstance(marker, _MARKERS) and marker.role is role:
                    bound.append(
                        BoundParameter(
                            role=role,
                            name=marker.name or name,
                            index=index,
                            descriptor=descriptor,
                        )
                    )
                    break
        return tuple(bound)
