"""Error taxonomy for the OpenOcean client.

Every public call either returns a fully decoded value or raises exactly one
of the four exceptions below:

- NetworkError: no HTTP response was received (DNS, refused, timeout)
- HttpError: a non-2xx response was received
- ParseError: a 2xx response whose body did not match the expected shape
- InternalError: a client-side precondition failed before sending
"""

from typing import Optional

TIMEOUT_MESSAGE = "timeout"


class OpenOceanError(Exception):
    """Base class for all client errors. Never raised directly."""

    kind: str = "error"


class NetworkError(OpenOceanError):
    """Transport failed before any HTTP response existed."""

    kind = "network"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def is_timeout(self) -> bool:
        """True when the fetch stage was cut short by the configured timeout."""
        return self.message == TIMEOUT_MESSAGE

    def __str__(self) -> str:
        return f"network error: {self.message}"


class HttpError(OpenOceanError):
    """Non-2xx HTTP status.

    Attributes:
        status: HTTP status code
        body: Bounded excerpt of the raw response body, verbatim
        content_type: Declared Content-Type header, if any
    """

    kind = "http"

    def __init__(self, status: int, body: str, content_type: Optional[str] = None):
        super().__init__(status, body, content_type)
        self.status = status
        self.body = body
        self.content_type = content_type

    def __str__(self) -> str:
        return f"http error: status={self.status}, body={self.body}"


class ParseError(OpenOceanError):
    """2xx response whose body could not be decoded into the expected type.

    Attributes:
        message: Diagnostic from the JSON or validation layer
        path: Dot/bracket JSON path of the first failing field ("" = root)
        body: Bounded excerpt of the raw response body
    """

    kind = "parse"

    def __init__(self, message: str, path: str = "", body: str = ""):
        super().__init__(message, path, body)
        self.message = message
        self.path = path
        self.body = body

    def __str__(self) -> str:
        where = self.path or "<root>"
        return f"parse error at {where}: {self.message}"


class InternalError(OpenOceanError):
    """Client-side precondition failure; no request was sent."""

    kind = "internal"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"internal error: {self.message}"
