"""
Tests for the response envelope builders.
"""

import json

from contract_api.shared.responses import (
    ErrorEnvelope,
    SuccessEnvelope,
    build_error,
    build_paginated,
    build_success,
    envelope_body,
    envelope_response,
)


def _exactly_one_variant(body: dict) -> bool:
    return ("data" in body) != ("error" in body)


class TestBuildSuccess:
    """Tests for build_success."""

    def test_default_meta_is_empty(self) -> None:
        envelope = build_success({"id": 1})
        assert isinstance(envelope, SuccessEnvelope)
        assert envelope_body(envelope) == {"data": {"id": 1}, "meta": {}}

    def test_meta_kept(self) -> None:
        body = envelope_body(build_success([1, 2], {"source": "test"}))
        assert body == {"data": [1, 2], "meta": {"source": "test"}}

    def test_none_data_still_success(self) -> None:
        body = envelope_body(build_success(None))
        assert body == {"data": None, "meta": {}}
        assert _exactly_one_variant(body)


class TestBuildError:
    """Tests for build_error."""

    def test_details_omitted_when_absent(self) -> None:
        envelope = build_error("NOT_FOUND", "Missing")
        assert isinstance(envelope, ErrorEnvelope)
        assert envelope_body(envelope) == {"error": {"code": "NOT_FOUND", "message": "Missing"}}

    def test_details_included_when_provided(self) -> None:
        body = envelope_body(build_error("VALIDATION_ERROR", "Bad", {"field": "name"}))
        assert body["error"]["details"] == {"field": "name"}

    def test_empty_details_kept(self) -> None:
        body = envelope_body(build_error("VALIDATION_ERROR", "Bad", {}))
        assert body["error"]["details"] == {}

    def test_exactly_one_variant(self) -> None:
        assert _exactly_one_variant(envelope_body(build_error("X", "y")))


class TestBuildPaginated:
    """Tests for build_paginated."""

    def test_meta_is_pagination(self) -> None:
        body = envelope_body(build_paginated(list(range(10)), total=50, page=1, page_size=10))
        assert len(body["data"]) == 10
        assert body["meta"] == {"page": 1, "pageSize": 10, "total": 50, "totalPages": 5}

    def test_empty_page(self) -> None:
        body = envelope_body(build_paginated([], total=0, page=1, page_size=10))
        assert body == {
            "data": [],
            "meta": {"page": 1, "pageSize": 10, "total": 0, "totalPages": 0},
        }


class TestEnvelopeResponse:
    """Tests for envelope_response."""

    def test_status_and_body(self) -> None:
        response = envelope_response(build_error("CONFLICT", "Taken"), status_code=409)
        assert response.status_code == 409
        assert json.loads(response.body) == {"error": {"code": "CONFLICT", "message": "Taken"}}

    def test_headers_forwarded(self) -> None:
        response = envelope_response(
            build_error("METHOD_NOT_ALLOWED", "No"), status_code=405, headers={"Allow": "GET"}
        )
        assert response.headers["allow"] == "GET"
