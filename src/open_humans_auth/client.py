"""
Authlib-backed OAuth2 client for Open Humans.

Uses Authlib's Starlette integration for the authorization-code handshake
(state is kept in the Starlette session) and its httpx client for the
bearer-token profile fetch.
"""

from __future__ import annotations

from typing import Any

from authlib.integrations.starlette_client import OAuth

from open_humans_auth.config import StrategyConfig


class AuthlibOAuth2Client:
    """OAuth2Client implementation registered on an Authlib OAuth registry."""

    def __init__(self, config: StrategyConfig, oauth: OAuth | None = None, name: str = "open_humans"):
        """Register the Open Humans endpoints from config on the given (or a new) registry."""
        self.oauth = oauth or OAuth()
        client_kwargs: dict[str, Any] = {
            # Open Humans expects client credentials in the token request body.
            "token_endpoint_auth_method": "client_secret_post",
        }
        if config.scope_string:
            client_kwargs["scope"] = config.scope_string

        self.app = self.oauth.register(
            name=name,
            client_id=config.client_id,
            client_secret=config.client_secret,
            authorize_url=config.authorization_url,
            access_token_url=config.token_url,
            api_base_url=config.host_url + "/",
            client_kwargs=client_kwargs,
            overwrite=True,
        )

    async def authorize(self, request, redirect_uri: str, params: dict[str, str]):
        """Return RedirectResponse to the Open Humans authorization endpoint."""
        return await self.app.authorize_redirect(request, redirect_uri, **params)

    async def exchange_token(self, request, params: dict[str, str]) -> dict[str, Any]:
        """Validate state and exchange the callback code; params go in the token request body."""
        return await self.app.authorize_access_token(request, **params)

    async def get_protected_resource(self, url: str, access_token: str) -> str:
        """GET url with a bearer token; raises httpx.HTTPStatusError on non-2xx."""
        token = {"access_token": access_token, "token_type": "Bearer"}
        resp = await self.app.get(url, token=token)
        resp.raise_for_status()
        return resp.text
