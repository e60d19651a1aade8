"""
Configuration types for the MVault client SDK.

This module contains the Pydantic model that defines the client configuration.
"""

from typing import Literal

from pydantic import BaseModel, Field

# https://docs.pbs.org/display/MV/Membership+Vault+API#MembershipVaultAPI-Endpoints
LIVE_URL = "https://mvault.services.pbs.org/api/"
STAGING_URL = "https://mvault-staging.services.pbs.org/api/"


class MvaultClientConfig(BaseModel):
    """Main MVault client configuration.

    Required fields:
    - key: API client key
    - secret: API client secret
    - station_id: GUID of the target station

    Optional fields:
    - base_url: API base URL (live by default)
    - timeout: Transport timeout in seconds
    - log_level: Logging level (debug, info, warn, error)
    """

    key: str = Field(..., description="API client key")
    secret: str = Field(..., description="API client secret")
    station_id: str = Field(..., description="GUID of the target station")
    base_url: str = Field(default=LIVE_URL, description="API base URL")
    timeout: float = Field(default=30.0, description="Transport timeout in seconds")
    log_level: Literal["debug", "info", "warn", "error"] = Field(
        default="info", description="Log level"
    )

    @property
    def station_url(self) -> str:
        """Get the station scoped base URL (always ends with a slash)."""
        base_url = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return f"{base_url}{self.station_id}/"
