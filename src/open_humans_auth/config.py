"""
Strategy configuration for the Open Humans OAuth provider.

Decisions:
- host_url defaults per API version (v1 lives on www.openhumans.org, v2 on
  openhumans.org); a trailing "/" is stripped so endpoint paths concatenate cleanly.
- authorization_url, token_url and profile_url are derived from host_url unless
  supplied explicitly.
- Values come from OPEN_HUMANS_* env vars in from_env(); the caller loads .env first.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from .endpoints import DEFAULT_API_VERSION, ENDPOINTS, OpenHumansEndpoints
from .errors import ConfigurationError


@dataclass(frozen=True)
class StrategyConfig:
    """Read-only configuration of an OpenHumansStrategy."""

    client_id: str
    client_secret: str
    callback_url: str | None = None
    host_url: str | None = None
    authorization_url: str | None = None
    token_url: str | None = None
    profile_url: str | None = None
    scope: str | Sequence[str] | None = None
    scope_separator: str = " "
    origin: str | None = None
    api_version: str = DEFAULT_API_VERSION

    def __post_init__(self) -> None:
        if not self.client_id:
            raise ConfigurationError("Open Humans strategy requires a client_id")
        if not self.client_secret:
            raise ConfigurationError("Open Humans strategy requires a client_secret")
        if self.api_version not in ENDPOINTS:
            raise ConfigurationError(
                f"Unknown Open Humans API version: {self.api_version!r}",
                {"known_versions": sorted(ENDPOINTS)},
            )

        endpoints = self.endpoints
        host_url = (self.host_url or endpoints.default_host_url).rstrip("/")

        # Frozen dataclass: derived defaults are written once here.
        object.__setattr__(self, "host_url", host_url)
        object.__setattr__(self, "authorization_url", self.authorization_url or endpoints.authorize_url(host_url))
        object.__setattr__(self, "token_url", self.token_url or endpoints.token_url(host_url))
        object.__setattr__(self, "profile_url", self.profile_url or endpoints.profile_url(host_url))
        object.__setattr__(self, "scope_separator", self.scope_separator or " ")

    @property
    def endpoints(self) -> OpenHumansEndpoints:
        return ENDPOINTS[self.api_version]

    @property
    def scope_string(self) -> str | None:
        """Scope as sent on the wire: sequences are joined with scope_separator."""
        if self.scope is None or isinstance(self.scope, str):
            return self.scope or None
        return self.scope_separator.join(self.scope) or None

    @classmethod
    def from_env(cls) -> "StrategyConfig":
        """Build a config from OPEN_HUMANS_* environment variables."""
        return cls(
            client_id=os.getenv("OPEN_HUMANS_CLIENT_ID", ""),
            client_secret=os.getenv("OPEN_HUMANS_CLIENT_SECRET", ""),
            callback_url=os.getenv("OPEN_HUMANS_CALLBACK_URL"),
            host_url=os.getenv("OPEN_HUMANS_HOST_URL"),
            scope=os.getenv("OPEN_HUMANS_SCOPE"),
            origin=os.getenv("OPEN_HUMANS_ORIGIN"),
            api_version=os.getenv("OPEN_HUMANS_API_VERSION", DEFAULT_API_VERSION),
        )
