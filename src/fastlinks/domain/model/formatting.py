"""Format hints for temporal parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ISO(Enum):
    """ISO 8601 rendering of a temporal value."""

    DATE = auto()  # 2024-01-31
    TIME = auto()  # 13:45:00
    DATE_TIME = auto()  # 2024-01-31T13:45:00+00:00


@dataclass(frozen=True, slots=True)
class DateTimeFormat:
    """Annotated marker selecting how a temporal argument is rendered.

    Example:
        day: Annotated[datetime, PathVariable(), DateTimeFormat(iso=ISO.DATE)]

    Attributes:
        iso: ISO 8601 variant to render.
    """

    iso: ISO = ISO.DATE_TIME
