"""Open Humans wire endpoints for each known API version."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OpenHumansEndpoints:
    """Immutable endpoint layout of one Open Humans deployment."""

    version: str
    default_host_url: str
    authorize_path: str
    token_path: str
    profile_path: str

    def authorize_url(self, host_url: str) -> str:
        return host_url + self.authorize_path

    def token_url(self, host_url: str) -> str:
        return host_url + self.token_path

    def profile_url(self, host_url: str) -> str:
        return host_url + self.profile_path


V1 = OpenHumansEndpoints(
    version="v1",
    default_host_url="https://www.openhumans.org",
    authorize_path="/oauth2/authorize/",
    token_path="/oauth2/token/",
    profile_path="/api/member/",
)

V2 = OpenHumansEndpoints(
    version="v2",
    default_host_url="https://openhumans.org",
    authorize_path="/oauth2/authorize",
    token_path="/oauth2/access_token",
    profile_path="/api/profile/current/",
)

ENDPOINTS: dict[str, OpenHumansEndpoints] = {
    "v1": V1,
    "v2": V2,
}

DEFAULT_API_VERSION = "v2"
