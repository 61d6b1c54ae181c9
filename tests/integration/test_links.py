"""End-to-end link generation: method_on(...) → link_to → absolute URI."""

from __future__ import annotations

import datetime as dt
from typing import Annotated

import pytest

from fastlinks import (
    EncodingRejectedError,
    FastLinks,
    MappingNotFoundError,
    PathVariable,
    RenderMismatchError,
    UnmatchedVariableError,
    UnsupportedArgumentTypeError,
    method_on,
    request_mapping,
)
from tests.factories import BASE_URI, Color, CustomerOrdersController, SampleController

MOMENT = dt.datetime(2024, 1, 31, 13, 45, tzinfo=dt.UTC)


class CatalogController:
    @request_mapping(r"/items/{id:\d{3}}")
    def item(self, id: Annotated[int, PathVariable()]) -> None: ...

    @request_mapping("/any/{value}")
    def untyped(self, value: Annotated[object, PathVariable()]) -> None: ...


@pytest.fixture
def links() -> FastLinks:
    return FastLinks.from_settings()


class TestPathVariables:
    """Scalar path values."""

    def test_path_and_query(self, links: FastLinks) -> None:
        """None query values are skipped."""
        link = links.link_to(method_on(SampleController).sample(1, 2, None))
        assert link == f"{BASE_URI}/sample/1?id1=2"

    def test_long_round_trip(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).sample(2**62))
        assert link == f"{BASE_URI}/sample/{2**62}"

    def test_no_query_trims_question_mark(self, links: FastLinks) -> None:
        assert links.link_to(method_on(SampleController).no_params()) == f"{BASE_URI}/sample/plain"

    def test_swapped_variables(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).swapped(1, 2, 3))
        assert link == f"{BASE_URI}/sample/2/1?id3=3"

    def test_repeated_variable(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).repeated(5))
        assert link == f"{BASE_URI}/sample/5/copy/5"

    def test_pchar_punctuation_allowed(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).text_param("a:b@c;d=e"))
        assert link == f"{BASE_URI}/sample/a:b@c;d=e"

    def test_booleans_lowercase(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).flag_param(True))
        assert link == f"{BASE_URI}/sample/flags/true?verbose=false"

    def test_regex_quantifier_in_mapping(self, links: FastLinks) -> None:
        link = links.link_to(method_on(CatalogController).item(123))
        assert link == f"{BASE_URI}/items/123"

    def test_untyped_collection_comma_joined(self, links: FastLinks) -> None:
        link = links.link_to(method_on(CatalogController).untyped([1, 2]))
        assert link == f"{BASE_URI}/any/1,2"


class TestQueryCollections:
    """Collections expand to one pair per element."""

    def test_list(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).list_param(1, [2, 3, 4]))
        assert link == f"{BASE_URI}/sample/list?id=1&ids=2&ids=3&ids=4"

    def test_single_element(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).list_param(1, [5]))
        assert link == f"{BASE_URI}/sample/list?id=1&ids=5"

    def test_empty_collection_contributes_nothing(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).list_param(1, []))
        assert link == f"{BASE_URI}/sample/list?id=1"

    def test_none_elements_skipped(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).list_param(1, [2, None, 3]))
        assert link == f"{BASE_URI}/sample/list?id=1&ids=2&ids=3"

    def test_tuple(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).tuple_param(1, (2, 3)))
        assert link == f"{BASE_URI}/sample/tuple?id=1&ids=2&ids=3"

    def test_all_query_values_none(self, links: FastLinks) -> None:
        assert links.link_to(method_on(SampleController).search()) == f"{BASE_URI}/sample/search"


class TestEnums:
    """Enums render their name, never str()."""

    def test_enum_path_and_query(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).enum_param(Color.RED, Color.DARK_BLUE))
        assert link == f"{BASE_URI}/sample/RED?value2=DARK_BLUE"

    def test_enum_list(self, links: FastLinks) -> None:
        link = links.link_to(
            method_on(SampleController).enum_list(1, [Color.RED, Color.DARK_BLUE])
        )
        assert link == f"{BASE_URI}/sample/1?values=RED&values=DARK_BLUE"


class TestTemporalValues:
    """Dates and times go through the conversion service."""

    def test_date_format_hint(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).date_param(MOMENT))
        assert link == f"{BASE_URI}/sample/2024-01-31"

    def test_date_time_format_hint(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).time_param(MOMENT))
        assert link == f"{BASE_URI}/sample/2024-01-31T13:45:00+00:00"

    def test_plain_date(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).day_param(dt.date(2024, 1, 31)))
        assert link == f"{BASE_URI}/sample/2024-01-31"


class TestObjectArguments:
    """Pre-resolved values fill the class mapping variables."""

    def test_object_argument_then_binding(self, links: FastLinks) -> None:
        link = links.link_to(method_on(CustomerOrdersController, 7).show(3))
        assert link == f"{BASE_URI}/customers/7/orders/3"

    def test_with_query(self, links: FastLinks) -> None:
        link = links.link_to(method_on(CustomerOrdersController, 7).show(3, expand="items"))
        assert link == f"{BASE_URI}/customers/7/orders/3?expand=items"

    def test_missing_object_argument(self, links: FastLinks) -> None:
        with pytest.raises(UnmatchedVariableError, match="customer"):
            links.link_to(method_on(CustomerOrdersController).show(3))


class TestRejections:
    """Invalid input fails the call, never silently escaped."""

    def test_space_in_path_rejected(self, links: FastLinks) -> None:
        with pytest.raises(EncodingRejectedError) as exc_info:
            links.link_to(method_on(SampleController).text_param("with space"))
        assert exc_info.value.value == "with space"
        assert exc_info.value.segment_kind == "PATH_SEGMENT"

    def test_slash_in_path_rejected(self, links: FastLinks) -> None:
        with pytest.raises(EncodingRejectedError):
            links.link_to(method_on(SampleController).text_param("a/b"))

    @pytest.mark.parametrize("value", ["a b", "a=b", "a+b", "a&b", "a#b"])
    def test_query_delimiters_rejected(self, links: FastLinks, value: str) -> None:
        with pytest.raises(EncodingRejectedError):
            links.link_to(method_on(SampleController).search(value))

    def test_query_slash_and_question_mark_allowed(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).search("a/b?"))
        assert link == f"{BASE_URI}/sample/search?q=a/b?"

    def test_map_argument_rejected(self, links: FastLinks) -> None:
        invocation = method_on(SampleController).map_param(
            {"firstKey": "firstValue", "secondKey": "secondValue"}
        )
        with pytest.raises(UnsupportedArgumentTypeError):
            links.link_to(invocation)

    def test_none_map_accepted(self, links: FastLinks) -> None:
        link = links.link_to(method_on(SampleController).map_param(None))
        assert link == f"{BASE_URI}/sample/mapsupport"

    def test_none_path_value(self, links: FastLinks) -> None:
        with pytest.raises(RenderMismatchError, match="Arguments don't match"):
            links.link_to(method_on(SampleController).sample(None, 2))

    def test_unbound_variable(self, links: FastLinks) -> None:
        with pytest.raises(UnmatchedVariableError, match="Variable from mapping not found"):
            links.link_to(method_on(SampleController).unbound(1))

    def test_unmapped_method(self, links: FastLinks) -> None:
        with pytest.raises(MappingNotFoundError):
            links.link_to(method_on(SampleController).unmapped())


class TestDeterminism:
    def test_idempotent(self, links: FastLinks) -> None:
        first = links.link_to(method_on(SampleController).list_param(1, [2, 3]))
        second = links.link_to(method_on(SampleController).list_param(1, [2, 3]))
        assert first == second

    def test_separate_instances_agree(self) -> None:
        invocation = method_on(SampleController).swapped(1, 2, 3)
        assert FastLinks.from_settings().link_to(invocation) == (
            FastLinks.from_settings().link_to(invocation)
        )

    def test_values_do_not_change_template(self, links: FastLinks) -> None:
        links.link_to(method_on(SampleController).sample(1, 2, 3))
        links.link_to(method_on(SampleController).sample(4))
        assert links.cache.size == 1
