"""Configuration management for the esa API client."""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_ACCESS_TOKEN = "ESA_ACCESS_TOKEN"
ENV_TEAM_NAME = "ESA_TEAM_NAME"
ENV_TIMEOUT = "ESA_TIMEOUT"
ENV_MAX_RATE_LIMIT_RETRIES = "ESA_MAX_RATE_LIMIT_RETRIES"


class EsaClientConfig(BaseModel):
    """Configuration for an esa API client.

    The API origin is fixed; only credentials, the default team and request
    behavior are configurable.
    """

    access_token: str = Field(..., min_length=1, description="esa access token")
    team_name: Optional[str] = Field(
        default=None, description="Default team (subdomain) for team-scoped paths"
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    max_rate_limit_retries: Optional[int] = Field(
        default=None,
        ge=0,
        description="Maximum waits on HTTP 429 per call (None retries indefinitely)",
    )
    default_retry_after: int = Field(
        default=60,
        ge=0,
        description="Seconds to wait when a 429 carries no usable retry-after header",
    )
    strict_response_decoding: bool = Field(
        default=False,
        description="Raise instead of returning {} when a 2xx body is not JSON",
    )

    @field_validator("team_name")
    @classmethod
    def blank_team_name_is_unset(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EsaClientConfig":
        """Build a configuration from ``ESA_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ConfigurationError: If the token is missing or a value is invalid
        """
        env = os.environ if environ is None else environ

        token = env.get(ENV_ACCESS_TOKEN)
        if not token:
            raise ConfigurationError(
                f"{ENV_ACCESS_TOKEN} environment variable not set"
            )

        values = {"access_token": token, "team_name": env.get(ENV_TEAM_NAME)}
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]
        if env.get(ENV_MAX_RATE_LIMIT_RETRIES):
            values["max_rate_limit_retries"] = env[ENV_MAX_RATE_LIMIT_RETRIES]

        try:
            config = cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid esa client configuration: {e}") from e

        logger.debug(
            f"Loaded esa client configuration from environment (team: {config.team_name})"
        )
        return config
