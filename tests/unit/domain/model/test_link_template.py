"""Tests for domain/model/link_template.py."""

from __future__ import annotations

import pytest

from fastlinks.domain.exceptions import RenderMismatchError
from fastlinks.domain.model.accessor import ParameterAccessor
from fastlinks.domain.model.component import Component
from fastlinks.domain.model.encoder import EncoderKind, ValueEncoder
from fastlinks.domain.model.link_template import LinkTemplate
from fastlinks.domain.model.segment_kind import SegmentKind
from tests.factories import BASE_URI, make_record

PATH_ENCODER = ValueEncoder(EncoderKind.DIRECT, SegmentKind.PATH_SEGMENT)
QUERY_ENCODER = ValueEncoder(EncoderKind.DIRECT, SegmentKind.QUERY_PARAM)


def _sample_template() -> LinkTemplate:
    """/sample/{id}?id1=..&id2=.. over SampleController.sample."""
    return LinkTemplate(
        path_components=(
            Component.literal("/sample/"),
            Component.path_value(ParameterAccessor.method_argument(0), PATH_ENCODER),
        ),
        query_components=(
            Component.query_value("id1", ParameterAccessor.method_argument(1), QUERY_ENCODER),
            Component.query_value("id2", ParameterAccessor.method_argument(2), QUERY_ENCODER),
        ),
    )


class TestRender:
    """Rendering path, separator and query."""

    def test_path_and_partial_query(self) -> None:
        rendered = _sample_template().render(make_record("sample", 1, 2, None), BASE_URI)
        assert rendered == "http://localhost/sample/1?id1=2"

    def test_all_query_values(self) -> None:
        rendered = _sample_template().render(make_record("sample", 1, 2, 3), BASE_URI)
        assert rendered == "http://localhost/sample/1?id1=2&id2=3"

    def test_no_query_value_trims_question_mark(self) -> None:
        rendered = _sample_template().render(make_record("sample", 1, None, None), BASE_URI)
        assert rendered == "http://localhost/sample/1"

    def test_skipped_first_query_value(self) -> None:
        rendered = _sample_template().render(make_record("sample", 1, None, 3), BASE_URI)
        assert rendered == "http://localhost/sample/1?id2=3"

    def test_no_query_components(self) -> None:
        template = LinkTemplate((Component.literal("/sample/plain"),))
        assert template.render(make_record("no_params"), BASE_URI) == BASE_URI + "/sample/plain"

    def test_empty_path(self) -> None:
        template = LinkTemplate(())
        assert template.render(make_record("no_params"), BASE_URI) == BASE_URI

    def test_none_path_value_raises(self) -> None:
        with pytest.raises(RenderMismatchError) as exc_info:
            _sample_template().render(make_record("sample", None, 2, 3), BASE_URI)
        assert exc_info.value.position == 1

    def test_render_is_repeatable(self) -> None:
        template = _sample_template()
        record = make_record("sample", 1, 2, None)
        assert template.render(record, BASE_URI) == template.render(record, BASE_URI)


class TestDescribe:
    def test_describe(self) -> None:
        assert _sample_template().describe() == "/sample/{arg[0]}?id1=arg[1]&id2=arg[2]"

    def test_is_frozen(self) -> None:
        template = _sample_template()
        with pytest.raises(AttributeError):
            template.path_components = ()  # type: ignore[misc]
