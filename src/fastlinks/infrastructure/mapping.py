"""Route mapping declaration and discovery.

    @request_mapping("/orders")
    class OrderController:
        @request_mapping("/{id}")
        def show(self, id: Annotated[int, PathVariable()]): ...

Class-level mappings are prefixes, inherited through the MRO.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from fastlinks.domain.exceptions import MappingNotFoundError
from fastlinks.domain.ports.mapping_discoverer import MappingDiscovererPort

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastlinks.domain.model.method import MethodIdentity

logger = logging.getLogger(__name__)

MAPPING_ATTRIBUTE = "__fastlinks_mapping__"

_T = TypeVar("_T")


def request_mapping(path: str) -> Callable[[_T], _T]:
    """Declare the route mapping of a controller class or method.

    Args:
        path: Mapping string, may contain {variable} tokens

    Raises:
        TypeError: path is not a string
    """
    if not isinstance(path, str):
        raise TypeError(f"mapping path must be str, got {type(path).__name__}")

    def decorator(target: _T) -> _T:
        setattr(target, MAPPING_ATTRIBUTE, path)
        return target

    return decorator


def join_mappings(type_mapping: str, method_mapping: str) -> str:
    """Join class prefix and method path with exactly one slash."""
    if not type_mapping or type_mapping == "/":
        return method_mapping
    if not method_mapping:
        return type_mapping
    return type_mapping.rstrip("/") + "/" + method_mapping.lstrip("/")


class AnnotationMappingDiscoverer(MappingDiscovererPort):
    """Reads mappings declared with request_mapping.

    Method without mapping falls back to the class mapping.
    Neither declared: MappingNotFoundError.
    """

    def get_mapping(self, target_type: type, method: MethodIdentity) -> str:
        """Class prefix joined with method mapping.

        Raises:
            MappingNotFoundError: neither class nor method is mapped
        """
        type_mapping: str | None = getattr(target_type, MAPPING_ATTRIBUTE, None)
        method_mapping: str | None = getattr(method.function, MAPPING_ATTRIBUTE, None)

        if method_mapping is None:
            if type_mapping is None:
                raise MappingNotFoundError(target_type, method.name)
            return type_mapping
        if type_mapping is None:
            return method_mapping
        return join_mappings(type_mapping, method_mapping)


@dataclass
class CachingMappingDiscoverer(MappingDiscovererPort):
    """Discoverer with in-memory caching.

    Decorator pattern: wraps another MappingDiscovererPort.
    Lookups are pure, so concurrent misses only duplicate work.
    Failures are not cached.

    Attributes:
        _inner: Wrapped discoverer
        _cache: (target type, method) → mapping
    """

    _inner: MappingDiscovererPort
    _cache: dict[tuple[type, MethodIdentity], str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self._inner is None:
            raise TypeError("_inner discoverer must not be None")

    def get_mapping(self, target_type: type, method: MethodIdentity) -> str:
        """Cached mapping lookup."""
        key = (target_type, method)
        mapping = self._cache.get(key)
        if mapping is None:
            mapping = self._inner.get_mapping(target_type, method)
            logger.debug("Discovered mapping %r for %s", mapping, method)
            mapping = self._cache.setdefault(key, mapping)
        return mapping

    def clear(self) -> None:
        """Clear entire cache."""
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        """Number of cached mappings."""
        return len(self._cache)
