"""Base URI resolvers."""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import TYPE_CHECKING

from fastlinks.domain.model.configuration import DEFAULT_BASE_URI, normalize_base_uri
from fastlinks.domain.ports.base_uri_resolver import BaseUriResolverPort

if TYPE_CHECKING:
    from collections.abc import Iterator

_CURRENT_BASE_URI: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "fastlinks_base_uri", default=None
)


class StaticBaseUriResolver(BaseUriResolverPort):
    """Same base URI for every link."""

    def __init__(self, base_uri: str = DEFAULT_BASE_URI) -> None:
        """Initialize with a fixed base URI.

        Raises:
            ValueError: base_uri is not an absolute ASCII URI
        """
        self._base_uri = normalize_base_uri(base_uri)

    def resolve(self) -> str:
        """The fixed base URI."""
        return self._base_uri


class ContextBaseUriResolver(BaseUriResolverPort):
    """Base URI of the current context, falling back to a default.

    Web handlers wrap request processing in use_base_uri() so links
    point at the host the request came in on. Context variables keep
    concurrent requests (threads or tasks) apart.
    """

    def __init__(self, default: str = DEFAULT_BASE_URI) -> None:
        """Initialize with the fallback base URI.

        Raises:
            ValueError: default is not an absolute ASCII URI
        """
        self._default = normalize_base_uri(default)

    def resolve(self) -> str:
        """Context base URI, else the default."""
        current = _CURRENT_BASE_URI.get()
        return self._default if current is None else current


@contextmanager
def use_base_uri(base_uri: str) -> Iterator[str]:
    """Set the base URI for ContextBaseUriResolver within the block.

    Raises:
        ValueError: base_uri is not an absolute ASCII URI
    """
    normalized = normalize_base_uri(base_uri)
    token = _CURRENT_BASE_URI.set(normalized)
    try:
        yield normalized
    finally:
        _CURRENT_BASE_URI.reset(token)
