"""Link template compiler: invocation record → LinkTemplate.

Reconciles three binding sources into one ordered plan:
    1. resolved object arguments (positional, first come first served)
    2. PathVariable parameters (by mapping variable name)
    3. RequestParam parameters (query, declaration order)

Outcome depends only on method metadata and the number of object
arguments, never on argument values.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastlinks.domain.exceptions import UnmatchedVariableError
from fastlinks.domain.model.accessor import ParameterAccessor
from fastlinks.domain.model.binding import BindingRole, DuplicateNamePolicy
from fastlinks.domain.model.component import Component
from fastlinks.domain.model.encoder import EncoderKind, ValueEncoder
from fastlinks.domain.model.link_template import LinkTemplate
from fastlinks.domain.model.segment_kind import SegmentKind
from fastlinks.infrastructure.uri_template import parse_variables

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastlinks.domain.model.binding import BoundParameter
    from fastlinks.domain.model.invocation import InvocationRecord
    from fastlinks.domain.ports.mapping_discoverer import MappingDiscovererPort
    from fastlinks.domain.ports.parameter_binder import ParameterBinderPort
    from fastlinks.domain.ports.value_converter import ValueConverterPort
    from fastlinks.infrastructure.uri_template import VariableToken

logger = logging.getLogger(__name__)

_OBJECT_ARGUMENT_ENCODER = ValueEncoder(EncoderKind.DIRECT, SegmentKind.PATH_SEGMENT)


class LinkTemplateCompiler:
    """Builds link templates from controller metadata.

    Stateless apart from its collaborators: safe to call concurrently.
    """

    def __init__(
        self,
        discoverer: MappingDiscovererPort,
        binder: ParameterBinderPort,
        converter: ValueConverterPort,
        *,
        duplicate_name_policy: DuplicateNamePolicy = DuplicateNamePolicy.LAST_WINS,
        parse: Callable[[str], tuple[VariableToken, ...]] = parse_variables,
    ) -> None:
        """Initialize with collaborators.

        Args:
            discoverer: Resolves (type, method) to mapping string
            binder: Finds PathVariable/RequestParam parameters
            converter: Fallback conversion for non-simple types
            duplicate_name_policy: Which binding wins on duplicate names
            parse: Mapping string → variable tokens
        """
        self._discoverer = discoverer
        self._binder = binder
        self._converter = converter
        self._policy = duplicate_name_policy
        self._parse = parse

    def compile(self, invocation: InvocationRecord) -> LinkTemplate:
        """Build the template for the invocation's method.

        Raises:
            MappingNotFoundError: method has no mapping
            UnmatchedVariableError: a mapping variable has no binding
        """
        method = invocation.method
        mapping = self._discoverer.get_mapping(invocation.target_type, method)

        path_components = self._build_path_components(
            mapping,
            self._parse(mapping),
            len(invocation.resolved_object_arguments),
            self._binder.bound_parameters(method, BindingRole.PATH_VARIABLE),
        )
        query_components = self._build_query_components(
            self._binder.bound_parameters(method, BindingRole.QUERY_PARAMETER),
        )

        template = LinkTemplate(path_components, query_components)
        logger.debug("Compiled link template for %s: %s", method, template.describe())
        return template

    def _build_path_components(
        self,
        mapping: str,
        tokens: tuple[VariableToken, ...],
        object_argument_count: int,
        path_parameters: tuple[BoundParameter, ...],
    ) -> tuple[Component, ...]:
        """Walk the mapping left to right, one component per literal and token."""
        by_name = self._policy.index(path_parameters)
        objects_used = 0
        components: list[Component] = []
        start = 0

        for token in tokens:
            # Occurrence after the previous match, not first occurrence by name
            position = mapping.find(token.text, start)
            if position == -1:
                raise UnmatchedVariableError(token.name, mapping)
            if position > start:
                components.append(Component.literal(mapping[start:position]))

            if objects_used < object_argument_count:
                components.append(
                    Component.path_value(
                        ParameterAccessor.object_argument(objects_used),
                        _OBJECT_ARGUMENT_ENCODER,
                    )
                )
                objects_used += 1
            elif token.name in by_name:
                parameter = by_name[token.name]
                components.append(
                    Component.path_value(
                        ParameterAccessor.method_argument(parameter.index),
                        self._encoder(parameter, SegmentKind.PATH_SEGMENT),
                    )
                )
            else:
                raise UnmatchedVariableError(token.name, mapping)

            start = position + len(token.text)

        if start < len(mapping):
            components.append(Component.literal(mapping[start:]))
        return tuple(components)

    def _build_query_components(
        self,
        query_parameters: tuple[BoundParameter, ...],
    ) -> tuple[Component, ...]:
        """One query component per RequestParam, declaration order."""
        if self._policy is DuplicateNamePolicy.FIRST_WINS:
            query_parameters = tuple(self._policy.index(query_parameters).values())
        return tuple(
            Component.query_value(
                parameter.name,
                ParameterAccessor.method_argument(parameter.index),
                self._encoder(parameter, SegmentKind.QUERY_PARAM),
            )
            for parameter in query_parameters
        )

    def _encoder(self, parameter: BoundParameter, segment_kind: SegmentKind) -> ValueEncoder:
        return ValueEncoder.for_descriptor(parameter.descriptor, segment_kind, self._converter)
