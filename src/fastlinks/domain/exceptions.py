"""Domain exceptions: all public errors of fastlinks.

All exceptions visible to users are defined in domain.
Infrastructure/Application raise these, never their own public exceptions.
Each error is scoped to the single link-generation call that raised it.
"""

from __future__ import annotations


class FastLinksError(Exception):
    """Base for all fastlinks error exceptions.

    Allows: except FastLinksError to catch all library errors.
    """


class CompileError(FastLinksError, RuntimeError):
    """Link template cannot be built for a method.

    Depends only on method metadata, never on argument values,
    so the same method fails the same way on every call.
    """


class UnmatchedVariableError(CompileError):
    """Mapping variable satisfied by neither an object argument nor a binding.

    Attributes:
        variable: Variable name from the mapping.
        mapping: Mapping string being compiled.
    """

    def __init__(self, variable: str, mapping: str) -> None:
        """Initialize with variable name and mapping."""
        self.variable = variable
        self.mapping = mapping
        super().__init__(f"Variable from mapping not found: {variable} (mapping {mapping!r})")


class AccessorIndexError(CompileError, IndexError):
    """Accessor index out of range for an invocation.

    Indicates a compiler bug: templates only hold indexes
    that the compiled method declares.

    Attributes:
        kind: Accessor kind name.
        index: Requested index.
        size: Number of available values.
    """

    def __init__(self, kind: str, index: int, size: int) -> None:
        """Initialize with accessor kind, index and available size."""
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"No {kind} argument with index {index} (have {size})")


class MappingNotFoundError(FastLinksError, LookupError):
    """Method carries no route mapping.

    Attributes:
        target_type: Controller type.
        method_name: Method name.
    """

    def __init__(self, target_type: type, method_name: str) -> None:
        """Initialize with controller type and method name."""
        self.target_type = target_type
        self.method_name = method_name
        super().__init__(f"No mapping found for {target_type.__qualname__}.{method_name}")


class EncodingRejectedError(FastLinksError, ValueError):
    """Encoded value contains characters not allowed in its URI segment.

    Values are never percent-encoded: the render fails instead.

    Attributes:
        value: Offending string.
        segment_kind: Name of the segment kind that refused it.
    """

    def __init__(self, value: str, segment_kind: str) -> None:
        """Initialize with rejected value and segment kind."""
        self.value = value
        self.segment_kind = segment_kind
        super().__init__(f"The value contains not allowed characters for {segment_kind}: {value!r}")


class UnsupportedArgumentTypeError(FastLinksError, ValueError):
    """Argument type cannot be encoded into a link.

    Raised for non-None mapping arguments. Pass None instead.

    Attributes:
        value_type: Type of the rejected value.
    """

    def __init__(self, value_type: type) -> None:
        """Initialize with rejected value type."""
        self.value_type = value_type
        super().__init__(
            f"Encoding links with such parameters is not supported: {value_type.__qualname__}"
        )


class RenderMismatchError(FastLinksError, ValueError):
    """Required path value is None at render time.

    Attributes:
        position: Index of the path component that produced no value.
    """

    def __init__(self, position: int) -> None:
        """Initialize with path component position."""
        self.position = position
        super().__init__(
            f"Path component {position} has no value. Arguments don't match the method?"
        )


class InvocationTypeError(FastLinksError, TypeError):
    """Value passed to link_to carries no invocation record.

    Inherits TypeError for semantic correctness.

    Attributes:
        got: Actual type received.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(f"Expected a captured invocation (see method_on), got {got.__name__}")
