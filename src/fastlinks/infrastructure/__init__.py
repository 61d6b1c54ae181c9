"""Infrastructure adapters: controller introspection and default collaborators."""

from fastlinks.infrastructure.base_uri import (
    ContextBaseUriResolver,
    StaticBaseUriResolver,
    use_base_uri,
)
from fastlinks.infrastructure.capture import Invocation, method_on
from fastlinks.infrastructure.conversion import DefaultValueConverter
from fastlinks.infrastructure.mapping import (
    AnnotationMappingDiscoverer,
    CachingMappingDiscoverer,
    request_mapping,
)
from fastlinks.infrastructure.parameters import AnnotatedParameterBinder
from fastlinks.infrastructure.uri_template import VariableToken, parse_variable_names, parse_variables

__all__ = [
    "AnnotatedParameterBinder",
    "AnnotationMappingDiscoverer",
    "CachingMappingDiscoverer",
    "ContextBaseUriResolver",
    "DefaultValueConverter",
    "Invocation",
    "StaticBaseUriResolver",
    "VariableToken",
    "method_on",
    "parse_variable_names",
    "parse_variables",
    "request_mapping",
    "use_base_uri",
]
