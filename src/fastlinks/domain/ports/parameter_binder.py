"""Parameter binder port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastlinks.domain.model.binding import BindingRole, BoundParameter
    from fastlinks.domain.model.method import MethodIdentity


class ParameterBinderPort(ABC):
    """Port for discovering which parameters bind into a link.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def bound_parameters(
        self,
        method: MethodIdentity,
        role: BindingRole,
    ) -> tuple[BoundParameter, ...]:
        """Parameters of method bound with role, in declaration order.

        Args:
            method: Method to inspect
            role: Path variable or query parameter

        Returns:
            Bound parameters, possibly empty
        """
        ...
