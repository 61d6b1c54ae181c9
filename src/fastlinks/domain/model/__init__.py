"""Domain model entities."""

from fastlinks.domain.model.accessor import AccessorKind, ParameterAccessor
from fastlinks.domain.model.binding import (
    BindingRole,
    BoundParameter,
    DuplicateNamePolicy,
    PathVariable,
    RequestParam,
)
from fastlinks.domain.model.component import Component, ComponentKind
from fastlinks.domain.model.encoder import EncoderKind, ValueEncoder
from fastlinks.domain.model.formatting import ISO, DateTimeFormat
from fastlinks.domain.model.invocation import InvocationCapture, InvocationRecord
from fastlinks.domain.model.link_template import LinkTemplate
from fastlinks.domain.model.method import MethodIdentity, TypeDescriptor
from fastlinks.domain.model.segment_kind import SegmentKind

__all__ = [
    # Enums
    "AccessorKind",
    "BindingRole",
    "ComponentKind",
    "DuplicateNamePolicy",
    "EncoderKind",
    "ISO",
    "SegmentKind",
    # Markers
    "DateTimeFormat",
    "PathVariable",
    "RequestParam",
    # Value objects
    "BoundParameter",
    "InvocationCapture",
    "InvocationRecord",
    "MethodIdentity",
    "TypeDescriptor",
    # Templates
    "Component",
    "LinkTemplate",
    "ParameterAccessor",
    "ValueEncoder",
]
