"""Response decoding and error classification.

Decoding runs in strictly sequential stages with no backtracking:

1. Status: a non-2xx response becomes HttpError with a body excerpt. The body
   is never decoded against the success schema.
2. Decode: the body is tokenized as JSON (exact numbers) and validated into
   the expected type. The first failing field is reported as a JSON path.

The fetch stage (transport errors, timeouts) is handled by the client.
"""

import json
from decimal import Decimal
from functools import lru_cache
from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from openocean.errors import HttpError, ParseError

T = TypeVar("T")

EXCERPT_LIMIT = 4096
TRUNCATION_MARKER = "..."


def body_excerpt(text: str, limit: int = EXCERPT_LIMIT) -> str:
    """Return text unchanged, or its first `limit` characters plus a marker."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def format_json_path(loc: tuple) -> str:
    """Render a validation location as a dot/bracket path.

    >>> format_json_path(("data", "routes", 2, "percentage"))
    'data.routes[2].percentage'
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def decode_body(text: str, shape: Any) -> Any:
    """Parse a JSON document and validate it into `shape`.

    Raises:
        ParseError: with the JSON path of the first failing field
    """
    try:
        payload = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise ParseError(str(e), "", body_excerpt(text)) from e

    try:
        return _adapter(shape).validate_python(payload)
    except ValidationError as e:
        first = e.errors(include_url=False)[0]
        raise ParseError(first["msg"], format_json_path(first["loc"]), body_excerpt(text)) from e


def decode_response(response: httpx.Response, shape: type[T]) -> T:
    """Classify an HTTP response and decode it into `shape`.

    Args:
        response: A fully read httpx response
        shape: Expected type of the JSON body (a pydantic model or any type
            TypeAdapter accepts)

    Returns:
        The decoded value

    Raises:
        HttpError: for non-2xx statuses
        ParseError: for 2xx bodies that do not match `shape`
    """
    content_type: Optional[str] = response.headers.get("content-type")

    if not response.is_success:
        raise HttpError(response.status_code, body_excerpt(response.text), content_type)

    return decode_body(response.text, shape)
