"""Environment-driven settings for scripts built on the client.

The library itself never reads the environment; example programs and
applications load these settings and turn them into a ClientConfig.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from openocean.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig


class Settings(BaseSettings):
    """Settings loaded from OPENOCEAN_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="OPENOCEAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    base_url: str = Field(default=DEFAULT_BASE_URL, description="OpenOcean API origin")
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Request timeout in seconds")
    user_agent: Optional[str] = Field(default=DEFAULT_USER_AGENT, description="User-Agent header")

    # ======================
    # Scripts
    # ======================
    chain: str = Field(default="bsc", description="Default chain slug or id")
    log_level: str = Field(default="INFO", description="Logging level for scripts")

    def client_config(self) -> ClientConfig:
        """Build the immutable client configuration."""
        return ClientConfig(
            base_url=self.base_url,
            timeout=self.timeout,
            user_agent=self.user_agent,
        )

    def get_safe_dict(self) -> dict:
        """Settings as a plain dict for diagnostics."""
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "user_agent": self.user_agent or "(httpx default)",
            "chain": self.chain,
            "log_level": self.log_level,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
