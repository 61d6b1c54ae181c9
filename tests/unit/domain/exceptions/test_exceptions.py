"""Tests for domain/exceptions.py."""

import pytest

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
from tests.factories import SampleController


class TestHierarchy:
    """Every error is a FastLinksError and its semantic builtin."""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (CompileError, RuntimeError),
            (UnmatchedVariableError, CompileError),
            (AccessorIndexError, CompileError),
            (AccessorIndexError, IndexError),
            (MappingNotFoundError, LookupError),
            (EncodingRejectedError, ValueError),
            (UnsupportedArgumentTypeError, ValueError),
            (RenderMismatchError, ValueError),
            (InvocationTypeError, TypeError),
        ],
    )
    def test_subclass(self, error: type[Exception], builtin: type[Exception]) -> None:
        assert issubclass(error, FastLinksError)
        assert issubclass(error, builtin)


class TestMessages:
    def test_unmatched_variable(self) -> None:
        err = UnmatchedVariableError("id", "/sample/{id}")
        assert err.variable == "id"
        assert err.mapping == "/sample/{id}"
        assert str(err).startswith("Variable from mapping not found: id")

    def test_accessor_index(self) -> None:
        err = AccessorIndexError("object", 2, 1)
        assert str(err) == "No object argument with index 2 (have 1)"

    def test_mapping_not_found(self) -> None:
        err = MappingNotFoundError(SampleController, "unmapped")
        assert str(err) == "No mapping found for SampleController.unmapped"

    def test_encoding_rejected(self) -> None:
        err = EncodingRejectedError("with blank", "PATH_SEGMENT")
        assert err.value == "with blank"
        assert "'with blank'" in str(err)

    def test_unsupported_argument_type(self) -> None:
        err = UnsupportedArgumentTypeError(dict)
        assert str(err) == "Encoding links with such parameters is not supported: dict"

    def test_render_mismatch(self) -> None:
        assert "Arguments don't match the method?" in str(RenderMismatchError(1))

    def test_invocation_type(self) -> None:
        err = InvocationTypeError(str)
        assert err.got is str
        assert "got str" in str(err)

    def test_can_catch_as_fastlinks_error(self) -> None:
        with pytest.raises(FastLinksError) as exc_info:
            raise RenderMismatchError(0)
        assert isinstance(exc_info.value, RenderMismatchError)
