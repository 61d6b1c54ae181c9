"""Parameter binding markers and bound parameter value object.

Controller parameters opt into a link by annotation:

    def show(self, id: Annotated[int, PathVariable()], page: Annotated[int, RequestParam("p")]): ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastlinks.domain.model.method import TypeDescriptor


class BindingRole(Enum):
    """Which part of the URI a parameter supplies."""

    PATH_VARIABLE = auto()  # {name} in the mapping
    QUERY_PARAMETER = auto()  # name=value in the query


@dataclass(frozen=True, slots=True)
class PathVariable:
    """Marks a parameter as a path variable.

    Attributes:
        name: Variable name in the mapping. None = parameter name.
    """

    name: str | None = None

    @property
    def role(self) -> BindingRole:
        """Binding role of this marker."""
        return BindingRole.PATH_VARIABLE


@dataclass(frozen=True, slots=True)
class RequestParam:
    """Marks a parameter as a query parameter.

    Attributes:
        name: Query parameter name. None = parameter name.
    """

    name: str | None = None

    @property
    def role(self) -> BindingRole:
        """Binding role of this marker."""
        return BindingRole.QUERY_PARAMETER


@dataclass(frozen=True, slots=True)
class BoundParameter:
    """Declared method parameter bound to a path variable or query parameter.

    Attributes:
        role: Path variable or query parameter
        name: External name (mapping variable or query key)
        index: Declared position, self excluded (must be >= 0)
        descriptor: Declared type
    """

    role: BindingRole
    name: str
    index: int
    descriptor: TypeDescriptor

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("bound parameter name must not be empty")
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")


class DuplicateNamePolicy(Enum):
    """Which binding wins when two parameters share an external name."""

    LAST_WINS = auto()
    FIRST_WINS = auto()

    def index(self, parameters: tuple[BoundParameter, ...]) -> dict[str, BoundParameter]:
        """Index bindings by external name under this policy."""
        names: dict[str, BoundParameter] = {}
        for parameter in parameters:
            if self is DuplicateNamePolicy.FIRST_WINS:
                names.setdefault(parameter.name, parameter)
            else:
                names[parameter.name] = parameter
        return names
