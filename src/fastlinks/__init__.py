"""fastlinks - precompiled, cached hypermedia links to controller methods."""

__version__ = "0.1.0"

from fastlinks.application.facade import FastLinks, configure, link_to
from fastlinks.domain.exceptions import (
    CompileError,
    EncodingRejectedError,
    FastLinksError,
    InvocationTypeError,
    MappingNotFoundError,
    RenderMismatchError,
    UnmatchedVariableError,
    UnsupportedArgumentTypeError,
)
from fastlinks.domain.model.binding import DuplicateNamePolicy, PathVariable, RequestParam
from fastlinks.domain.model.configuration import CacheKeyMode, LinkSettings
from fastlinks.domain.model.formatting import ISO, DateTimeFormat
from fastlinks.infrastructure.base_uri import use_base_uri
from fastlinks.infrastructure.capture import method_on
from fastlinks.infrastructure.mapping import request_mapping

__all__ = [
    "CacheKeyMode",
    "CompileError",
    "DateTimeFormat",
    "DuplicateNamePolicy",
    "EncodingRejectedError",
    "FastLinks",
    "FastLinksError",
    "ISO",
    "InvocationTypeError",
    "LinkSettings",
    "MappingNotFoundError",
    "PathVariable",
    "RenderMismatchError",
    "RequestParam",
    "UnmatchedVariableError",
    "UnsupportedArgumentTypeError",
    "__version__",
    "configure",
    "link_to",
    "method_on",
    "request_mapping",
    "use_base_uri",
]
