"""Tests for response classification and decoding."""

import httpx
import pytest

from openocean.errors import HttpError, ParseError
from openocean.models.base import ApiResponse
from openocean.models.swap import QuoteData, QuoteResponse
from openocean.response import (
    EXCERPT_LIMIT,
    body_excerpt,
    decode_body,
    decode_response,
    format_json_path,
)

TOKEN = {"address": "0x1", "decimals": 18, "symbol": "A", "name": "Token A"}


def quote_body(routes: list) -> dict:
    return {
        "code": 200,
        "data": {
            "inToken": TOKEN,
            "outToken": {**TOKEN, "address": "0x2", "symbol": "B"},
            "inAmount": "1000000000000000000",
            "outAmount": 2500000000,
            "estimatedGas": "189000",
            "dexes": [{"dexIndex": 1, "dexCode": "PancakeV2", "swapAmount": "2500000000"}],
            "path": {"from": "0x1", "to": "0x2", "parts": 10, "routes": routes},
        },
    }


class TestBodyExcerpt:
    """Tests for body_excerpt."""

    def test_short_body_unchanged(self):
        assert body_excerpt("not found") == "not found"

    def test_body_at_limit_unchanged(self):
        text = "x" * EXCERPT_LIMIT
        assert body_excerpt(text) == text

    def test_long_body_truncated(self):
        text = "a" * EXCERPT_LIMIT + "b" * 100
        excerpt = body_excerpt(text)
        assert excerpt == "a" * EXCERPT_LIMIT + "..."


class TestFormatJsonPath:
    def test_nested_path(self):
        assert format_json_path(("data", "path", "routes", 0, "percentage")) == (
            "data.path.routes[0].percentage"
        )

    def test_root(self):
        assert format_json_path(()) == ""

    def test_leading_index(self):
        assert format_json_path((2, "symbol")) == "[2].symbol"


class TestDecodeResponse:
    """Tests for decode_response."""

    def test_success(self):
        body = quote_body([{"parts": 10, "percentage": 100, "subRoutes": []}])
        response = httpx.Response(200, json=body)

        result = decode_response(response, QuoteResponse)

        assert result.code == 200
        assert result.data.in_amount == 10**18
        assert result.data.out_amount == 2500000000
        assert result.data.path.routes[0].percentage == 100.0
        assert result.data.dexes[0].dex_code == "PancakeV2"

    def test_http_error_keeps_body_verbatim(self):
        response = httpx.Response(
            404, text="<html>Not Found</html>", headers={"content-type": "text/html"}
        )

        with pytest.raises(HttpError) as exc_info:
            decode_response(response, QuoteResponse)

        assert exc_info.value.status == 404
        assert exc_info.value.body == "<html>Not Found</html>"
        assert exc_info.value.content_type == "text/html"

    def test_http_error_never_decodes_body(self):
        """A JSON body matching the schema is still an HTTP error."""
        body = quote_body([{"parts": 10, "percentage": 100}])
        response = httpx.Response(500, json=body)

        with pytest.raises(HttpError) as exc_info:
            decode_response(response, QuoteResponse)

        assert exc_info.value.status == 500
        assert '"inAmount"' in exc_info.value.body

    def test_http_error_body_truncated(self):
        response = httpx.Response(502, text="e" * (EXCERPT_LIMIT * 2))

        with pytest.raises(HttpError) as exc_info:
            decode_response(response, QuoteResponse)

        assert exc_info.value.body == "e" * EXCERPT_LIMIT + "..."

    def test_missing_nested_field_path(self):
        body = quote_body([{"parts": 10, "subRoutes": []}])
        response = httpx.Response(200, json=body)

        with pytest.raises(ParseError) as exc_info:
            decode_response(response, QuoteResponse)

        assert exc_info.value.path == "data.path.routes[0].percentage"

    def test_wrong_type_path(self):
        body = quote_body([{"parts": 10, "percentage": {"x": 1}}])
        response = httpx.Response(200, json=body)

        with pytest.raises(ParseError) as exc_info:
            decode_response(response, QuoteResponse)

        assert exc_info.value.path == "data.path.routes[0].percentage"

    def test_malformed_json(self):
        response = httpx.Response(200, text='{"code": 200, "data": ')

        with pytest.raises(ParseError) as exc_info:
            decode_response(response, QuoteResponse)

        assert exc_info.value.path == ""
        assert exc_info.value.body == '{"code": 200, "data": '
        assert str(exc_info.value).startswith("parse error at <root>")

    def test_logical_failure_is_not_an_error(self):
        response = httpx.Response(200, json={"code": 400, "errorMsg": "invalid amount"})

        result = decode_response(response, QuoteResponse)

        assert result.code == 400
        assert result.data is None
        assert result.error_msg == "invalid amount"


class TestDecodeBody:
    def test_plain_types(self):
        assert decode_body("[1, 2, 3]", list[int]) == [1, 2, 3]

    def test_generic_envelope(self):
        result = decode_body('{"code": 200, "data": {"a": 1}}', ApiResponse[dict])
        assert result.data == {"a": 1}

    def test_root_type_mismatch(self):
        with pytest.raises(ParseError) as exc_info:
            decode_body("[]", QuoteData)
        assert exc_info.value.path == ""
