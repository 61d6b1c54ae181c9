"""Link facade: captured invocation → absolute URI string.

Example:
    link = link_to(method_on(OrderController).show(42))
    # "http://localhost/orders/42"
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Self

from fastlinks.application.cache import TemplateCache
from fastlinks.application.compiler import LinkTemplateCompiler
from fastlinks.domain.exceptions import InvocationTypeError
from fastlinks.domain.model.configuration import LinkSettings
from fastlinks.domain.model.invocation import InvocationCapture, InvocationRecord
from fastlinks.infrastructure.base_uri import ContextBaseUriResolver
from fastlinks.infrastructure.conversion import DefaultValueConverter
from fastlinks.infrastructure.mapping import AnnotationMappingDiscoverer, CachingMappingDiscoverer
from fastlinks.infrastructure.parameters import AnnotatedParameterBinder

if TYPE_CHECKING:
    from fastlinks.domain.ports.base_uri_resolver import BaseUriResolverPort


class FastLinks:
    """Builds links from captured controller invocations.

    Composition-based: accepts template cache and base URI resolver.

    Factory methods:
    - from_settings(): default adapters configured by LinkSettings
    """

    def __init__(self, cache: TemplateCache, base_uri_resolver: BaseUriResolverPort) -> None:
        """Initialize with dependencies.

        Args:
            cache: Template cache (owns the compiler)
            base_uri_resolver: Supplies the URI prefix at render time
        """
        self._cache = cache
        self._base_uri_resolver = base_uri_resolver

    @classmethod
    def from_settings(
        cls,
        settings: LinkSettings | None = None,
        *,
        converter: DefaultValueConverter | None = None,
    ) -> Self:
        """Create with default adapters.

        Args:
            settings: Configuration. Uses defaults if None.
            converter: Conversion service. New DefaultValueConverter if None.

        Returns:
            Configured FastLinks with an empty cache
        """
        settings = settings or LinkSettings()
        compiler = LinkTemplateCompiler(
            CachingMappingDiscoverer(AnnotationMappingDiscoverer()),
            AnnotatedParameterBinder(),
            converter or DefaultValueConverter(),
            duplicate_name_policy=settings.duplicate_name_policy,
        )
        return cls(
            TemplateCache(compiler, settings.cache_key_mode),
            ContextBaseUriResolver(settings.base_uri),
        )

    def link_to(self, invocation_value: object) -> str:
        """Absolute URI for a captured invocation.

        Args:
            invocation_value: Result of a call on a method_on() proxy

        Returns:
            base URI + path [+ query]

        Raises:
            InvocationTypeError: value carries no invocation record
            CompileError: method cannot be linked
            MappingNotFoundError: method has no mapping
            RenderMismatchError: a path value is None
            EncodingRejectedError: a value has disallowed characters
            UnsupportedArgumentTypeError: a non-None mapping argument
        """
        if not isinstance(invocation_value, InvocationCapture):
            raise InvocationTypeError(type(invocation_value))
        invocation = invocation_value.last_invocation
        if not isinstance(invocation, InvocationRecord):
            raise InvocationTypeError(type(invocation))

        template = self._cache.get(invocation)
        return template.render(invocation, self._base_uri_resolver.resolve())

    @property
    def cache(self) -> TemplateCache:
        """Underlying template cache."""
        return self._cache


_default: FastLinks | None = None
_default_lock = threading.Lock()


def default_links() -> FastLinks:
    """Process-wide FastLinks, created on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = FastLinks.from_settings()
    return _default


def configure(settings: LinkSettings) -> FastLinks:
    """Replace the process-wide FastLinks. Existing templates are dropped."""
    global _default
    with _default_lock:
        _default = FastLinks.from_settings(settings)
        return _default


def link_to(invocation_value: object) -> str:
    """Absolute URI for a captured invocation, using the process-wide FastLinks.

    Raises:
        InvocationTypeError: value carries no invocation record
    """
    return default_links().link_to(invocation_value)
