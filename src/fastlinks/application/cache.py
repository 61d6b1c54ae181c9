"""Template cache: one compiled LinkTemplate per linked method."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING

from fastlinks.domain.model.configuration import CacheKeyMode
from fastlinks.domain.model.invocation import InvocationRecord

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fastlinks.application.compiler import LinkTemplateCompiler
    from fastlinks.domain.model.link_template import LinkTemplate

logger = logging.getLogger(__name__)


class TemplateCache:
    """Memoizes compiled templates.

    Backed by a plain dict used only through atomic get/setdefault:
    readers are never blocked. Concurrent misses for one key may both
    compile; setdefault keeps the first stored template, so every caller
    observes the same instance afterwards. Templates are pure functions
    of method metadata, so the discarded duplicate is identical.

    No eviction: size is bounded by the number of linked methods.
    Compile errors are not cached.
    """

    def __init__(
        self,
        compiler: LinkTemplateCompiler,
        key_mode: CacheKeyMode = CacheKeyMode.IDENTITY,
    ) -> None:
        """Initialize with compiler and key strategy.

        Raises:
            TypeError: compiler is None
        """
        if compiler is None:
            raise TypeError("compiler must not be None")
        self._compiler = compiler
        self._key_mode = key_mode
        self._templates: dict[Hashable, LinkTemplate] = {}

    def key(self, invocation: InvocationRecord) -> Hashable:
        """Cache key for the invocation's method.

        Object argument count is part of the key: it decides which
        variables are served by object arguments.
        """
        objects = len(invocation.resolved_object_arguments)
        if self._key_mode is CacheKeyMode.STRUCTURAL:
            return (invocation.method.structural_key(invocation.target_type), objects)
        return (invocation.target_type, invocation.method, objects)

    def get(self, invocation: InvocationRecord) -> LinkTemplate:
        """Cached template, compiled on first use.

        Raises:
            CompileError: method cannot be compiled (re-raised every call)
            MappingNotFoundError: method has no mapping
        """
        key = self.key(invocation)
        template = self._templates.get(key)
        if template is not None:
            return template

        logger.debug("Link template cache miss for %s", invocation.method)
        compiled = self._compiler.compile(invocation)
        return self._templates.setdefault(key, compiled)

    def clear(self) -> None:
        """Drop all cached templates."""
        self._templates.clear()

    def keys(self) -> tuple[Hashable, ...]:
        """Snapshot of cached keys."""
        return tuple(self._templates)

    def items(self) -> Iterator[tuple[Hashable, LinkTemplate]]:
        """Snapshot of cached entries."""
        return iter(tuple(self._templates.items()))

    def __contains__(self, invocation: object) -> bool:
        """Whether the invocation's method is cached."""
        if not isinstance(invocation, InvocationRecord):
            return False
        return self.key(invocation) in self._templates

    @property
    def size(self) -> int:
        """Number of cached templates."""
        return len(self._templates)

    @property
    def key_mode(self) -> CacheKeyMode:
        """Key strategy in use."""
        return self._key_mode
