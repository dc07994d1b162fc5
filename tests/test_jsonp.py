from __future__ import annotations

import pytest

from prekindle_export.errors import FeedParseError
from prekindle_export.jsonp import parse_jsonp, strip_jsonp_wrapper


def test_strip_wrapper_returns_payload_exactly() -> None:
    payload = '{"events":[{"id":5,"title":"Doors (7pm);"}]}'
    assert strip_jsonp_wrapper(f"widgetCallback({payload});") == payload


def test_strip_wrapper_tolerates_trailing_newline() -> None:
    assert strip_jsonp_wrapper("widgetCallback([1, 2]);\n") == "[1, 2]"
    assert strip_jsonp_wrapper("widgetCallback([1]);  \r\n") == "[1]"


def test_strip_wrapper_only_removes_one_suffix() -> None:
    assert strip_jsonp_wrapper("widgetCallback(x););") == "x);"


def test_unwrapped_text_is_returned_unchanged() -> None:
    assert strip_jsonp_wrapper("not-json-at-all") == "not-json-at-all"
    assert strip_jsonp_wrapper("not-json\n") == "not-json\n"


def test_each_side_is_stripped_independently() -> None:
    assert strip_jsonp_wrapper("widgetCallback([1]") == "[1]"
    assert strip_jsonp_wrapper("[1]);") == "[1]"


def test_other_callback_names_are_left_alone() -> None:
    assert strip_jsonp_wrapper("otherCallback([1]);") == "otherCallback([1]"
    assert strip_jsonp_wrapper("cb([1]);", callback="cb") == "[1]"


def test_parse_jsonp_decodes_events_object() -> None:
    data = parse_jsonp('widgetCallback({"events":[{"id":5}]});')
    assert data == {"events": [{"id": 5}]}


def test_parse_jsonp_raises_with_source_url() -> None:
    with pytest.raises(FeedParseError) as exc_info:
        parse_jsonp("not-json-at-all", url="https://example.test/feed")
    assert exc_info.value.url == "https://example.test/feed"
    assert "not-json-at-all" in exc_info.value.reason
