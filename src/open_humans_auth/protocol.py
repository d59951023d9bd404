"""
Protocols for the OAuth collaborators used by the strategy and the auth router.

OAuth2Client is the capability the strategy composes with (redirect, code
exchange, authenticated fetch). OAuthProvider is what the router drives.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OAuth2Client(Protocol):
    """Generic OAuth2 client: owns the handshake, state checks and HTTP transport.

    Transport failures usually surface as httpx.HTTPError or authlib OAuthError.
    """

    async def authorize(self, request, redirect_uri: str, params: dict[str, str]):
        """Return a redirect response to the authorization endpoint."""
        ...

    async def exchange_token(self, request, params: dict[str, str]) -> dict[str, Any]:
        """Exchange the callback's code for a token mapping with at least access_token."""
        ...

    async def get_protected_resource(self, url: str, access_token: str) -> str:
        """GET url with a bearer token and return the response body."""
        ...


@runtime_checkable
class OAuthProvider(Protocol):
    """Protocol for an OAuth provider strategy (e.g. Open Humans)."""

    name: str

    async def login_redirect(self, request, redirect_uri: str, **options):
        """Redirect the user to the identity provider login page."""
        ...

    async def handle_callback(self, request, **options) -> tuple[Any, Any]:
        """Handle the OAuth callback: exchange code for token, return (user, profile)."""
        ...
