"""fastlinks domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, types, abc, dataclasses, enum, collections.abc, urllib.parse
"""

from fastlinks.domain.exceptions import (
    AccessorIndexError,
    CompileError,
    EncodingRejectedError,
    FastLinksError,
    InvocationTypeError,
    MappingNotFoundError,
    RenderMismatchError,
    UnmatchedVariableError,
    UnsupportedArgumentTypeError,
)
from fastlinks.domain.model import (
    BindingRole,
    BoundParameter,
    Component,
    ComponentKind,
    DateTimeFormat,
    InvocationCapture,
    InvocationRecord,
    LinkTemplate,
    MethodIdentity,
    PathVariable,
    RequestParam,
    SegmentKind,
    TypeDescriptor,
)
from fastlinks.domain.ports import (
    BaseUriResolverPort,
    MappingDiscovererPort,
    ParameterBinderPort,
    ValueConverterPort,
)

__all__ = [
    # Exceptions
    "FastLinksError",
    "CompileError",
    "UnmatchedVariableError",
    "AccessorIndexError",
    "MappingNotFoundError",
    "EncodingRejectedError",
    "UnsupportedArgumentTypeError",
    "RenderMismatchError",
    "InvocationTypeError",
    # Enums
    "BindingRole",
    "ComponentKind",
    "SegmentKind",
    # Value objects
    "DateTimeFormat",
    "PathVariable",
    "RequestParam",
    "BoundParameter",
    "InvocationCapture",
    "InvocationRecord",
    "MethodIdentity",
    "TypeDescriptor",
    # Templates
    "Component",
    "LinkTemplate",
    # Ports
    "BaseUriResolverPort",
    "MappingDiscovererPort",
    "ParameterBinderPort",
    "ValueConverterPort",
]
