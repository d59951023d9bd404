"""Shared fixtures: a scripted OAuth2Client and a strategy wired to it."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
from fastapi.responses import RedirectResponse

from open_humans_auth import OpenHumansStrategy, StrategyConfig

PROFILE_BODY = '{"id":"42","username":"alice","url":"https://x/alice"}'


class FakeOAuth2Client:
    """OAuth2Client double that records calls and replays a scripted outcome."""

    def __init__(self, body: str = PROFILE_BODY, error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.token: dict[str, Any] = {"access_token": "at-123", "refresh_token": "rt-456", "token_type": "Bearer"}
        self.calls: list[tuple[str, Any]] = []

    async def authorize(self, request, redirect_uri: str, params: dict[str, str]):
        self.calls.append(("authorize", (redirect_uri, params)))
        return RedirectResponse(url="https://openhumans.org/oauth2/authorize")

    async def exchange_token(self, request, params: dict[str, str]) -> dict[str, Any]:
        self.calls.append(("exchange_token", params))
        return self.token

    async def get_protected_resource(self, url: str, access_token: str) -> str:
        self.calls.append(("get_protected_resource", (url, access_token)))
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def config() -> StrategyConfig:
    return StrategyConfig(
        client_id="client-id",
        client_secret="client-secret",
        callback_url="http://testserver/auth/callback",
    )


@pytest.fixture
def fake_client() -> FakeOAuth2Client:
    return FakeOAuth2Client()


@pytest.fixture
def strategy(config: StrategyConfig, fake_client: FakeOAuth2Client) -> OpenHumansStrategy:
    return OpenHumansStrategy(config, lambda access_token, refresh_token, profile: profile, client=fake_client)


@pytest.fixture
def connect_error() -> httpx.ConnectError:
    return httpx.ConnectError("connection refused", request=httpx.Request("GET", "https://openhumans.org"))
