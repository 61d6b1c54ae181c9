"""Reporters for compiled link templates."""

from fastlinks.application.reporters.console import ConsoleConfig, TemplateConsoleReporter

__all__ = [
    "ConsoleConfig",
    "TemplateConsoleReporter",
]
