"""pytest fixtures for link tests.

User overrides link_settings in their conftest.py.
"""

from __future__ import annotations

import pytest

from fastlinks.application.facade import FastLinks
from fastlinks.domain.model.configuration import DEFAULT_BASE_URI, LinkSettings


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


@pytest.fixture
def link_settings(request: pytest.FixtureRequest) -> LinkSettings:
    """Link settings for the test.

    Reads fastlinks_base_uri from pytest.ini. Override in conftest.py
    for other key modes or duplicate name policies.

    Returns:
        LinkSettings
    """
    base_uri = _get_ini_value(request.config, "fastlinks_base_uri", DEFAULT_BASE_URI)
    return LinkSettings(base_uri=base_uri)


@pytest.fixture
def fast_links(link_settings: LinkSettings) -> FastLinks:
    """FastLinks with its own template cache.

    Isolated from the process-wide instance used by link_to().

    Returns:
        Configured FastLinks
    """
    return FastLinks.from_settings(link_settings)
