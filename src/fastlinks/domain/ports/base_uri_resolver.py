"""Base URI resolver port (interface)."""

from abc import ABC, abstractmethod


class BaseUriResolverPort(ABC):
    """Port for the absolute URI every link starts with.

    Read at render time, never cached by templates.
    """

    @abstractmethod
    def resolve(self) -> str:
        """Absolute, ASCII-safe base URI without trailing slash."""
        ...
