"""Mapping discoverer port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastlinks.domain.model.method import MethodIdentity


class MappingDiscovererPort(ABC):
    """Port for resolving a controller method to its route mapping.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def get_mapping(self, target_type: type, method: MethodIdentity) -> str:
        """Resolve the raw mapping string, e.g. "/orders/{id}".

        Args:
            target_type: Controller type the call was captured on
            method: Called method

        Returns:
            Mapping string, class-level prefix included

        Raises:
            MappingNotFoundError: If the method carries no mapping
        """
        ...
