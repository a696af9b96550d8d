"""Request building: URL joining and parameter serialization."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from openocean.errors import InternalError

Params = Union[BaseModel, Mapping[str, Any], None]


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully qualified request, ready to hand to the transport."""

    method: str
    url: httpx.URL
    params: tuple[tuple[str, str], ...] = ()
    json: Optional[dict] = None


def parse_base_url(url: Union[str, httpx.URL]) -> httpx.URL:
    """Validate a configured base origin.

    Raises:
        InternalError: if the URL is not an absolute http(s) URL with a host
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InternalError(f"invalid base url {url!r}: {e}") from e

    if parsed.scheme not in ("http", "https"):
        raise InternalError(f"invalid base url {url!r}: scheme must be http or https")
    if not parsed.host:
        raise InternalError(f"invalid base url {url!r}: missing host")
    return parsed


def join_url(base: httpx.URL, path: str) -> httpx.URL:
    """Append a relative path to the base URL path.

    Exactly one slash separates the two parts; no segment of either side is
    dropped. The query string of the base is discarded.
    """
    base_path = base.raw_path.decode("ascii").split("?", 1)[0].rstrip("/")
    suffix = path.lstrip("/")
    joined = f"{base_path}/{suffix}" if suffix else base_path or "/"
    return base.copy_with(raw_path=joined.encode("ascii"))


def path_segment(value: Any) -> str:
    """Percent-encode an identifier so it occupies exactly one path segment."""
    return quote(str(value), safe="")


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def query_pairs(params: Params) -> tuple[tuple[str, str], ...]:
    """Serialize a params model or mapping into query pairs.

    Fields are emitted under their wire alias, None values are skipped.
    List fields declared as CommaSeparatedInts serialize to one value.
    """
    if params is None:
        return ()
    if isinstance(params, BaseModel):
        try:
            data = params.model_dump(by_alias=True, exclude_none=True)
        except (ValidationError, TypeError, ValueError) as e:
            raise InternalError(f"cannot serialize {type(params).__name__}: {e}") from e
    else:
        data = {k: v for k, v in params.items() if v is not None}

    return tuple((key, _query_value(value)) for key, value in data.items())


def json_body(params: Params) -> dict:
    """Serialize a params model or mapping into a JSON-ready dict."""
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        try:
            return params.model_dump(mode="json", by_alias=True, exclude_none=True)
        except (ValidationError, TypeError, ValueError) as e:
            raise InternalError(f"cannot serialize {type(params).__name__}: {e}") from e
    return dict(params)


def build_get(base: httpx.URL, path: str, params: Params = None) -> RequestDescriptor:
    """Build a GET request with query parameters."""
    return RequestDescriptor(method="GET", url=join_url(base, path), params=query_pairs(params))


def build_post(base: httpx.URL, path: str, body: Params = None) -> RequestDescriptor:
    """Build a POST request with a JSON body."""
    return RequestDescriptor(method="POST", url=join_url(base, path), json=json_body(body))
