"""Application settings models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from pulsarhawk.constants.defaults import (
    ADMIN_URL_DEFAULT,
    CLUSTER_NAME_DEFAULT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    PULSAR_URL_DEFAULT,
)
from pulsarhawk.constants.limits import ADMIN_FETCH_ATTEMPTS, MAX_LIVE_MESSAGES
from pulsarhawk.constants.timeouts import ADMIN_REQUEST_TIMEOUT, VERSION_CHECK_INTERVAL


class NoAuth(BaseModel):
    """Unauthenticated cluster access."""

    type: Literal["none"] = "none"


class TokenAuth(BaseModel):
    """Static bearer token."""

    type: Literal["token"] = "token"
    token: str


class OAuthAuth(BaseModel):
    """OAuth2 client-credentials flow against ``token_url``."""

    type: Literal["oauth"] = "oauth"
    client_id: str
    client_secret: str
    audience: str
    token_url: str
    issuer_url: str = ""
    credentials_file_url: str = ""


AuthSettings = Annotated[NoAuth | TokenAuth | OAuthAuth, Field(discriminator="type")]


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Cluster
    cluster_name: str = CLUSTER_NAME_DEFAULT
    pulsar_url: str = PULSAR_URL_DEFAULT
    admin_url: str = Field(default=ADMIN_URL_DEFAULT, alias="pulsar_admin_url")
    default_tenant: str = ""
    auth: AuthSettings = Field(default_factory=NoAuth)

    # Admin requests
    request_timeout_seconds: float = Field(default=ADMIN_REQUEST_TIMEOUT, gt=0)
    fetch_attempts: int = Field(default=ADMIN_FETCH_ATTEMPTS, ge=1)

    # Live tail
    max_live_messages: int = Field(default=MAX_LIVE_MESSAGES, ge=1)

    # Latest release check (disabled when empty)
    release_url: str = ""
    version_check_interval_seconds: float = Field(default=VERSION_CHECK_INTERVAL, gt=0)

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = str(LOG_FILE_DEFAULT)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
