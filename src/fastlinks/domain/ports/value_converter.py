"""Value converter port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastlinks.domain.model.method import TypeDescriptor


class ValueConverterPort(ABC):
    """Port for turning richly typed values into their string form.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def convert(self, value: object, descriptor: TypeDescriptor) -> str | None:
        """Convert value declared as descriptor to a string.

        Args:
            value: Argument value
            descriptor: Declared parameter type

        Returns:
            String form, None only when value is None
        """
        ...
