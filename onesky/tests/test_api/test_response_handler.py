import json
from datetime import datetime, UTC

import pytest

from onesky.api.api_client import APIResponse
from onesky.api.models import FileRecord, Language, ResponseMeta
from onesky.api.response_handler import ResponseHandler
from onesky.core.exceptions import DecodeError, HTTPStatusError

def make_api_response(body, status=200):
    if not isinstance(body, str):
        body = json.dumps(body)
    return APIResponse(
        status=status,
        body=body,
        headers={},
        timestamp=datetime.now(UTC),
        duration=0.01
    )

@pytest.fixture
def handler():
    return ResponseHandler()

def test_check_status(handler):
    handler.check_status(make_api_response("", 201), 201)

    with pytest.raises(HTTPStatusError) as exc_info:
        handler.check_status(make_api_response("boom", 500), 200)
    assert exc_info.value.status == 500
    assert exc_info.value.body == "boom"

def test_unwrap(handler):
    envelope = handler.unwrap(make_api_response({"meta": {"status": 200, "record_count": 2}, "data": [1, 2]}))
    assert envelope.data == [1, 2]
    assert envelope.meta == ResponseMeta(status=200, record_count=2)

def test_unwrap_without_meta(handler):
    envelope = handler.unwrap(make_api_response({"data": {}}))
    assert envelope.meta == ResponseMeta()

@pytest.mark.parametrize("body", ["", "not json", "[]", '{"meta": {}}', "null"])
def test_unwrap_rejects_bad_envelopes(handler, body):
    with pytest.raises(DecodeError):
        handler.unwrap(make_api_response(body))

def test_parse_object(handler):
    language = handler.parse_object(make_api_response({"data": {"code": "de"}}), Language)
    assert language == Language(code="de")

def test_parse_object_wrong_shape(handler):
    with pytest.raises(DecodeError):
        handler.parse_object(make_api_response({"data": []}), Language)

def test_parse_list_keeps_order(handler):
    records = handler.parse_list(
        make_api_response({"data": [{"name": "b"}, {"name": "a"}, {"name": "c"}]}),
        FileRecord
    )
    assert [r.name for r in records] == ["b", "a", "c"]

def test_parse_list_wrong_shape(handler):
    with pytest.raises(DecodeError):
        handler.parse_list(make_api_response({"data": {"name": "a"}}), FileRecord)
    with pytest.raises(DecodeError):
        handler.parse_list(make_api_response({"data": ["a"]}), FileRecord)
