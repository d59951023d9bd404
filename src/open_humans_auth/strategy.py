"""
Open Humans authentication strategy.

Adapts a generic OAuth2 client to Open Humans: endpoint configuration, the
"origin" parameter on authorization and token requests, and profile
normalization. The OAuth2 handshake itself belongs to the OAuth2Client.

Applications supply a verify callable taking (access_token, refresh_token,
profile) and returning the application's user, or a falsy value when the
credentials are not accepted. It may be a coroutine function.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from typing import Any, NamedTuple

import structlog

from open_humans_auth.client import AuthlibOAuth2Client
from open_humans_auth.config import StrategyConfig
from open_humans_auth.errors import ConfigurationError, OpenHumansAuthError, ProfileFetchError, ProfileParseError
from open_humans_auth.profile import PROVIDER, Profile, parse_profile
from open_humans_auth.protocol import OAuth2Client

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class ProfileResult(NamedTuple):
    """(error, profile) completion pair; exactly one side is set."""

    error: OpenHumansAuthError | None
    profile: Profile | None


def build_auth_params(options: Mapping[str, Any]) -> dict[str, str]:
    """Map an origin option onto the origin parameter Open Humans understands."""
    params: dict[str, str] = {}
    origin = options.get("origin")
    if origin:
        params["origin"] = "open-humans" if origin == "open-humans" else "external"
    return params


class OpenHumansStrategy:
    """OAuth provider that delegates login to Open Humans."""

    name: str = PROVIDER

    def __init__(self, config: StrategyConfig, verify: Callable[..., Any], client: OAuth2Client | None = None):
        """Store config and verify callback; build the Authlib client unless one is injected."""
        if not isinstance(config, StrategyConfig):
            raise ConfigurationError(
                "Open Humans strategy requires a StrategyConfig", {"type": type(config).__name__}
            )
        if not callable(verify):
            raise ConfigurationError("Open Humans strategy requires a verify callback")
        self.name = PROVIDER
        self.config = config
        self.verify = verify
        self.client = client if client is not None else AuthlibOAuth2Client(config)

    @property
    def host_url(self) -> str:
        return self.config.host_url

    def _options(self, options: Mapping[str, Any]) -> dict[str, Any]:
        merged = dict(options)
        if not merged.get("origin") and self.config.origin:
            merged["origin"] = self.config.origin
        return merged

    def authorization_params(self, options: Mapping[str, Any] | None = None) -> dict[str, str]:
        """Extra query parameters for the authorization redirect."""
        return build_auth_params(self._options(options or {}))

    def token_params(self, options: Mapping[str, Any] | None = None) -> dict[str, str]:
        """Extra body parameters for the token exchange."""
        return build_auth_params(self._options(options or {}))

    async def fetch_profile(self, access_token: str) -> Profile:
        """
        Fetch the current member from Open Humans and normalize it.

        Raises ProfileFetchError (wrapping the transport error) when the request
        fails and ProfileParseError when the body is not a usable profile.
        """
        url = self.config.profile_url
        log.debug("profile_fetch_started", url=url)
        try:
            body = await self.client.get_protected_resource(url, access_token)
        except Exception as e:
            # Transport failures of any type surface as ProfileFetchError.
            log.warning("profile_fetch_failed", url=url, error=str(e), error_type=type(e).__name__)
            raise ProfileFetchError("failed to fetch user profile", e, {"url": url}) from e

        try:
            profile = parse_profile(body)
        except ProfileParseError as e:
            log.warning("profile_parse_failed", url=url, error=str(e), body_length=len(body or ""))
            raise

        log.info("profile_fetched", member_id=profile.id)
        return profile

    async def user_profile(self, access_token: str) -> ProfileResult:
        """Fetch the profile and report the outcome as an (error, profile) pair."""
        try:
            return ProfileResult(None, await self.fetch_profile(access_token))
        except OpenHumansAuthError as e:
            return ProfileResult(e, None)

    async def login_redirect(self, request, redirect_uri: str, **options):
        """Return RedirectResponse to the Open Humans authorization page."""
        return await self.client.authorize(request, redirect_uri, self.authorization_params(options))

    async def handle_callback(self, request, **options) -> tuple[Any, Profile]:
        """Exchange code for token, fetch the profile and run verify. Return (user, profile)."""
        token = await self.client.exchange_token(request, self.token_params(options))
        access_token = token["access_token"]

        profile = await self.fetch_profile(access_token)

        user = self.verify(access_token, token.get("refresh_token"), profile)
        if inspect.isawaitable(user):
            user = await user
        return user, profile
