"""Console reporter: TemplateCache → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fastlinks.domain.model.component import ComponentKind

if TYPE_CHECKING:
    from collections.abc import Hashable

    from fastlinks.application.cache import TemplateCache
    from fastlinks.domain.model.link_template import LinkTemplate


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_encoders: Add a column with encoder kinds per template.
        width: Console width in characters.
    """

    show_encoders: bool = True
    width: int = 120


def _format_key(key: Hashable) -> str:
    """Readable cache key: "Type.method" or the structural string."""
    match key:
        case (str() as structural, int()):
            return structural
        case (type() as target, method, int()):
            return f"{target.__qualname__}.{getattr(method, 'name', method)}"
        case _:
            return str(key)


def _encoder_kinds(template: LinkTemplate) -> str:
    kinds = [
        component.encoder.kind.name
        for component in (*template.path_components, *template.query_components)
        if component.kind is not ComponentKind.LITERAL and component.encoder is not None
    ]
    return ", ".join(kinds) or "-"


class TemplateConsoleReporter:
    """Console reporter: outputs rich formatted table of cached templates.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, cache: TemplateCache) -> str:
        """Format cached templates as a table.

        Args:
            cache: Template cache to describe.

        Returns:
            Formatted string with colors and table.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        table = Table(title=f"Link templates ({cache.size})")
        table.add_column("Method", style="cyan")
        table.add_column("Template")
        if self._config.show_encoders:
            table.add_column("Encoders", style="dim")

        for key, template in sorted(cache.items(), key=lambda item: _format_key(item[0])):
            row = [escape(_format_key(key)), escape(template.describe())]
            if self._config.show_encoders:
                row.append(_encoder_kinds(template))
            table.add_row(*row)

        console.print(table)
        return output.getvalue()
