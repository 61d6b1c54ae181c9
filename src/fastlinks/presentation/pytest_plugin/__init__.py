"""pytest plugin for fastlinks.

Provides fixtures for link tests:
    link_settings: LinkSettings (override in conftest.py)
    fast_links: FastLinks with a fresh, isolated template cache

Configuration (pytest.ini or pyproject.toml):
    fastlinks_base_uri: Base URI of generated links (default: "http://localhost")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from fastlinks.presentation.pytest_plugin.fixtures import fast_links, link_settings

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "fast_links",
    "link_settings",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "fastlinks_base_uri",
        help="Base URI of links built by the fast_links fixture",
        default="",
    )
