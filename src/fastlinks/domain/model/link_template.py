"""Link template: precompiled render plan for one controller method."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastlinks.domain.exceptions import RenderMismatchError

if TYPE_CHECKING:
    from fastlinks.domain.model.component import Component
    from fastlinks.domain.model.invocation import InvocationRecord


@dataclass(frozen=True, slots=True)
class LinkTemplate:
    """Ordered path and query components.

    Holds no mutable state: shared read-only across threads and renders.

    Attributes:
        path_components: Rendered in order, every one must contribute
        query_components: Rendered in order, None values skipped
    """

    path_components: tuple[Component, ...]
    query_components: tuple[Component, ...] = ()

    def render(self, invocation: InvocationRecord, base_uri: str) -> str:
        """Render the absolute URI for one invocation.

        Args:
            invocation: Captured call supplying argument values
            base_uri: Absolute URI prefix

        Returns:
            base_uri + path [+ "?" + query]

        Raises:
            RenderMismatchError: A path value is None
            EncodingRejectedError: A value has disallowed characters
            UnsupportedArgumentTypeError: A non-None mapping argument
        """
        parts = [base_uri]

        for position, component in enumerate(self.path_components):
            if not component.append(parts, invocation):
                raise RenderMismatchError(position)

        parts.append("?")
        for component in self.query_components:
            if component.append(parts, invocation):
                parts.append("&")

        # Drop the trailing "?" or "&"
        parts.pop()
        return "".join(parts)

    def describe(self) -> str:
        """Template in mapping-like notation, e.g. "/orders/{arg[0]}?page=arg[1]"."""
        path = "".join(component.describe() for component in self.path_components)
        if not self.query_components:
            return path
        query = "&".join(component.describe() for component in self.query_components)
        return f"{path}?{query}"
