from __future__ import annotations

from functools import lru_cache
from urllib.parse import urlsplit

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Environments that must talk to the backend over TLS
_PRODUCTION_ENVIRONMENTS = {"production", "staging"}
_LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}


class Settings(BaseSettings):
    app_name: str = Field(default="sistema-buses")
    app_version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    api_base_url: str = Field(default="http://127.0.0.1:8000/api")

    @model_validator(mode="after")
    def validate_api_base_url_for_environment(self) -> "Settings":
        """Validate api_base_url is appropriate for the environment."""
        parts = urlsplit(self.api_base_url)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ValueError(f"api_base_url must be an http(s) URL, got {self.api_base_url!r}")
        if self.environment in _PRODUCTION_ENVIRONMENTS:
            # Tokens travel in a header, so plain HTTP is only tolerated locally
            if parts.scheme == "http" and parts.hostname not in _LOCAL_HOSTS:
                raise ValueError(
                    "Plain HTTP is not allowed for a remote backend in production. "
                    "Use an https:// api_base_url."
                )
        return self

    auth_scheme: str = Field(default="Token")
    request_timeout: float = Field(default=10.0, gt=0)
    request_id_header: str = Field(default="X-Request-ID")

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="SISTEMA_BUSES_",
        env_file=".env",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
