"""Link generation settings (user config)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from urllib.parse import urlsplit

from fastlinks.domain.model.binding import DuplicateNamePolicy

DEFAULT_BASE_URI = "http://localhost"


class CacheKeyMode(Enum):
    """How the template cache identifies a method."""

    IDENTITY = auto()  # MethodIdentity value
    STRUCTURAL = auto()  # "module.Type.method(param types)" string


def normalize_base_uri(uri: str) -> str:
    """Validate an absolute base URI and strip its trailing slash.

    Raises:
        ValueError: not absolute, not ASCII, or carries query/fragment
    """
    if not uri:
        raise ValueError("base_uri must not be empty")
    if not uri.isascii():
        raise ValueError(f"base_uri must be ASCII, got {uri!r}")
    parts = urlsplit(uri)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"base_uri must be absolute (scheme and host), got {uri!r}")
    if parts.query or parts.fragment or uri.endswith(("?", "#")):
        raise ValueError(f"base_uri must not have query or fragment, got {uri!r}")
    return uri.rstrip("/")


@dataclass(frozen=True, slots=True)
class LinkSettings:
    """Link generation configuration.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        base_uri: Absolute URI every link starts with
        cache_key_mode: Template cache key strategy
        duplicate_name_policy: Which binding wins on duplicate external names
    """

    base_uri: str = DEFAULT_BASE_URI
    cache_key_mode: CacheKeyMode = CacheKeyMode.IDENTITY
    duplicate_name_policy: DuplicateNamePolicy = DuplicateNamePolicy.LAST_WINS

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        normalize_base_uri(self.base_uri)
