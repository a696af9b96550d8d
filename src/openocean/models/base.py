"""Shared model configuration and response envelopes.

The API does not use one universal envelope: v4 swap and limit-order
endpoints report failures in ``errorMsg``, the DCA/zap/ticket/gasless
families use ``msg``, and a few endpoints return bare objects. Each shape is
declared separately and endpoints pick the one they actually return.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from openocean.types import JsonData

T = TypeVar("T")

SUCCESS_CODE = 200


class OpenOceanModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


@dataclass(frozen=True)
class Success(Generic[T]):
    """Envelope reported success; `data` is the payload."""

    data: T


@dataclass(frozen=True)
class LogicalFailure:
    """Envelope was decoded but its code signals an API-level failure."""

    code: int
    message: Optional[str] = None


Outcome = Union[Success[T], LogicalFailure]


class Envelope(OpenOceanModel):
    """Common behaviour of all `{code, ...}` envelopes."""

    code: int = Field(..., description="API status code, 200 on success")

    @property
    def message(self) -> Optional[str]:
        """Failure message, whichever field this envelope declares for it."""
        return None

    @property
    def is_success(self) -> bool:
        return self.code == SUCCESS_CODE

    def result(self) -> Outcome:
        """Convert the envelope into Success(data) or LogicalFailure(code, message)."""
        if self.is_success:
            return Success(getattr(self, "data", None))
        return LogicalFailure(code=self.code, message=self.message)


class ApiResponse(Envelope, Generic[T]):
    """Envelope with an ``errorMsg`` failure field (v4 swap, limit orders)."""

    data: Optional[T] = None
    error_msg: Optional[str] = None

    @property
    def message(self) -> Optional[str]:
        return self.error_msg


class MsgResponse(Envelope, Generic[T]):
    """Envelope with a ``msg`` failure field (DCA, gasless, zap, ticket)."""

    data: Optional[T] = None
    msg: Optional[str] = None

    @property
    def message(self) -> Optional[str]:
        return self.msg


class CodeResponse(Envelope):
    """Acknowledgement carrying only a code (DCA create/cancel)."""

    msg: Optional[str] = None
    data: Optional[JsonData] = None

    @property
    def message(self) -> Optional[str]:
        return self.msg
