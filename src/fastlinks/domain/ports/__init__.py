"""Domain ports (interfaces) for external collaborators."""

from fastlinks.domain.ports.base_uri_resolver import BaseUriResolverPort
from fastlinks.domain.ports.mapping_discoverer import MappingDiscovererPort
from fastlinks.domain.ports.parameter_binder import ParameterBinderPort
from fastlinks.domain.ports.value_converter import ValueConverterPort

__all__ = [
    "BaseUriResolverPort",
    "MappingDiscovererPort",
    "ParameterBinderPort",
    "ValueConverterPort",
]
