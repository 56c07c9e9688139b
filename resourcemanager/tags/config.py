"""Shared Resource Manager client constants and settings.

This module centralizes the service URL, API version and environment
variable names so the client and the command line entry point resolve
configuration the same way.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.exceptions import ConfigurationError

DEFAULT_ENDPOINT = "https://cloudresourcemanager.googleapis.com"
API_VERSION = "v3"
DEFAULT_TIMEOUT = 30.0

# Server-side paging bounds. The server clamps page_size itself; these are
# informational and never enforced client-side.
MAX_PAGE_SIZE = 300
DEFAULT_PAGE_SIZE = 100

ENV_ENDPOINT = "RESOURCEMANAGER_ENDPOINT"
ENV_ACCESS_TOKEN = "GOOGLE_OAUTH_ACCESS_TOKEN"
ENV_QUOTA_PROJECT = "GOOGLE_CLOUD_QUOTA_PROJECT"
ENV_TIMEOUT = "RESOURCEMANAGER_TIMEOUT"


def get_api_path_prefix(api_version: str = API_VERSION) -> str:
    """Get API path prefix for a version.

    Examples:
        >>> get_api_path_prefix()
        '/v3'
    """
    return f"/{api_version}"


class ClientSettings(BaseSettings):
    """Resolved client configuration, read from environment variables.

    Attributes:
        endpoint: Service base URL (no trailing slash)
        access_token: OAuth2 bearer token sent with every request (None = anonymous)
        quota_project: Project billed for quota (sent as x-goog-user-project)
        timeout: Total per-request timeout in seconds
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    endpoint: str = Field(default=DEFAULT_ENDPOINT, validation_alias=ENV_ENDPOINT)
    access_token: str | None = Field(default=None, validation_alias=ENV_ACCESS_TOKEN)
    quota_project: str | None = Field(default=None, validation_alias=ENV_QUOTA_PROJECT)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, validation_alias=ENV_TIMEOUT)

    @field_validator("endpoint")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/") or DEFAULT_ENDPOINT

    @field_validator("access_token", "quota_project")
    @classmethod
    def empty_as_unset(cls, v: str | None) -> str | None:
        return v or None

    @classmethod
    def from_env(
        cls,
        *,
        endpoint: str | None = None,
        access_token: str | None = None,
        quota_project: str | None = None,
        timeout: float | None = None,
    ) -> ClientSettings:
        """Build settings from explicit values, falling back to the environment.

        Args:
            endpoint: Explicit service URL
            access_token: Explicit bearer token
            quota_project: Explicit quota project
            timeout: Explicit timeout in seconds

        Returns:
            ClientSettings with explicit values taking precedence

        Raises:
            ConfigurationError: If a value fails validation (e.g. non-positive timeout)
        """
        # Keyed by env name so explicit values replace the matching env entry
        overrides = {
            ENV_ENDPOINT: endpoint,
            ENV_ACCESS_TOKEN: access_token,
            ENV_QUOTA_PROJECT: quota_project,
            ENV_TIMEOUT: timeout,
        }
        try:
            return cls(**{key: value for key, value in overrides.items() if value is not None})
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigurationError(f"Invalid client configuration: {details}") from e

    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        headers: dict[str, str] = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        if self.quota_project:
            headers["x-goog-user-project"] = self.quota_project
        return headers
