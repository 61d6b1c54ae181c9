"""URI segment kinds and their allowed characters (RFC 3986, appendix A)."""

from __future__ import annotations

from enum import Enum

_ALPHA = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGIT = frozenset("0123456789")
_UNRESERVED = _ALPHA | _DIGIT | frozenset("-._~")
_SUB_DELIMS = frozenset("!$&'()*+,;=")
_PCHAR = _UNRESERVED | _SUB_DELIMS | frozenset(":@")

# '=', '+' and '&' are query syntax and never appear unescaped in a value
_QUERY_VALUE = (_PCHAR | frozenset("/?")) - frozenset("=+&")


class SegmentKind(Enum):
    """Kind of URI segment a value is rendered into.

    Each kind is a refusal gate: it tells whether a string may be
    placed into the segment as-is. Nothing is ever escaped.
    """

    PATH_SEGMENT = _PCHAR
    QUERY_PARAM = _QUERY_VALUE

    def is_allowed(self, char: str) -> bool:
        """Check a single code point."""
        return char in self.value

    def is_allowed_value(self, value: str) -> bool:
        """Check every code point of value. One bad character fails all."""
        allowed = self.value
        return all(char in allowed for char in value)
