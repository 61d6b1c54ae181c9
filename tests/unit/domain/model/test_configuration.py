"""Tests for domain/model/configuration.py."""

import pytest

from fastlinks.domain.model.binding import DuplicateNamePolicy
from fastlinks.domain.model.configuration import (
    DEFAULT_BASE_URI,
    CacheKeyMode,
    LinkSettings,
    normalize_base_uri,
)


class TestLinkSettings:
    def test_defaults(self) -> None:
        settings = LinkSettings()
        assert settings.base_uri == DEFAULT_BASE_URI
        assert settings.cache_key_mode is CacheKeyMode.IDENTITY
        assert settings.duplicate_name_policy is DuplicateNamePolicy.LAST_WINS

    def test_invalid_base_uri_raises(self) -> None:
        with pytest.raises(ValueError, match="must be absolute"):
            LinkSettings(base_uri="/relative")

    def test_is_frozen(self) -> None:
        settings = LinkSettings()
        with pytest.raises(AttributeError):
            settings.base_uri = "http://other"  # type: ignore[misc]


class TestNormalizeBaseUri:
    """FAIL-FIRST validation of base URIs."""

    def test_strips_trailing_slash(self) -> None:
        assert normalize_base_uri("https://api.example.com/v1/") == "https://api.example.com/v1"

    def test_keeps_port(self) -> None:
        assert normalize_base_uri("http://localhost:8080") == "http://localhost:8080"

    @pytest.mark.parametrize(
        ("uri", "message"),
        [
            ("", "must not be empty"),
            ("localhost", "must be absolute"),
            ("http://exämple.com", "must be ASCII"),
            ("http://example.com?x=1", "query or fragment"),
            ("http://example.com#top", "query or fragment"),
            ("http://example.com?", "query or fragment"),
        ],
    )
    def test_invalid(self, uri: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            normalize_base_uri(uri)
