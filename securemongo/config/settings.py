"""Environment-based settings. Read-only; the dial functions themselves never read them."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (and an optional .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="securemongo", description="Name used in log records")
    log_level: str = Field(default="INFO", description="Log level name")

    # MongoDB (see config/storage/mongo for how these reach the dialer)
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI",
    )
    mongo_auth_mechanism: str = Field(
        default="",
        description="Authentication mechanism name; empty disables authentication",
    )
    mongo_tls_enabled: bool = Field(default=True, description="Dial over TLS")
    mongo_tls_ca_file: str | None = Field(default=None, description="CA bundle; certifi when unset")
    mongo_tls_certificate_key_file: str | None = Field(
        default=None, description="Client certificate and private key (PEM)"
    )
    mongo_tls_certificate_key_file_password: str | None = Field(
        default=None, description="Password for the client private key"
    )
    mongo_tls_allow_invalid_certificates: bool = Field(
        default=False, description="Skip server certificate validation"
    )
    mongo_tls_allow_invalid_hostnames: bool = Field(
        default=False, description="Skip server hostname verification"
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
