"""Immutable client configuration."""

from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from openocean import __version__
from openocean.errors import InternalError
from openocean.request import parse_base_url

DEFAULT_BASE_URL = "https://open-api.openocean.finance"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"openocean-client/{__version__}"


class ClientConfig(BaseModel):
    """Configuration shared by every call made through one client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API origin")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    user_agent: Optional[str] = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent header (None = httpx default)"
    )

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InternalError(f"invalid client config: {e}") from e

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        # InternalError propagates unwrapped
        parse_base_url(value)
        return value

    @property
    def url(self) -> httpx.URL:
        return parse_base_url(self.base_url)

    @classmethod
    def builder(cls) -> "ClientConfigBuilder":
        return ClientConfigBuilder()


class ClientConfigBuilder:
    """Fluent builder for ClientConfig.

    Example:
        config = ClientConfig.builder().timeout(5).user_agent("bot/1.0").build()
    """

    def __init__(self):
        self._values: dict = {}

    def base_url(self, url: str) -> "ClientConfigBuilder":
        parse_base_url(url)
        self._values["base_url"] = url
        return self

    def timeout(self, seconds: float) -> "ClientConfigBuilder":
        self._values["timeout"] = seconds
        return self

    def user_agent(self, user_agent: Optional[str]) -> "ClientConfigBuilder":
        self._values["user_agent"] = user_agent
        return self

    def build(self) -> ClientConfig:
        """Validate the collected values; raises InternalError on bad input."""
        return ClientConfig(**self._values)
