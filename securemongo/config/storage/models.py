"""TLS configuration model. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field


class TLSConfig(BaseModel):
    """Caller-owned TLS settings for the secure dial path. Never mutated while dialing."""

    model_config = ConfigDict(frozen=True)

    ca_file: str | None = Field(default=None, description="CA bundle (PEM); certifi bundle when None")
    certificate_key_file: str | None = Field(
        default=None, description="Client certificate and private key (PEM) for mutual TLS"
    )
    certificate_key_file_password: str | None = Field(default=None, description="Private key password")
    crl_file: str | None = Field(default=None, description="Certificate revocation list (PEM)")
    allow_invalid_certificates: bool = Field(default=False)
    allow_invalid_hostnames: bool = Field(default=False)
    disable_ocsp_endpoint_check: bool = Field(default=False)
