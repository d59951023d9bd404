"""
FastAPI auth router: login, callback, /me, logout.

Builds an APIRouter around an OpenHumansStrategy. The session holds the
normalized profile summary, and the origin of a login in flight so the token
exchange sends the same origin as the authorization redirect.
"""

import structlog
from authlib.integrations.starlette_client import OAuthError
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from open_humans_auth.errors import ProfileFetchError, ProfileParseError
from open_humans_auth.strategy import OpenHumansStrategy

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

ORIGIN_SESSION_KEY = "open_humans_origin"


def create_auth_router(strategy: OpenHumansStrategy):
    """Create an APIRouter with /login, /auth/callback, /me, and /logout endpoints."""
    router = APIRouter()

    @router.get("/login")
    async def login(request: Request, origin: str | None = None):
        """Redirect the user to the Open Humans login page."""
        redirect_uri = strategy.config.callback_url or str(request.url_for("auth_callback"))
        params = strategy.authorization_params({"origin": origin})
        if params.get("origin"):
            request.session[ORIGIN_SESSION_KEY] = params["origin"]
        else:
            request.session.pop(ORIGIN_SESSION_KEY, None)
        return await strategy.login_redirect(request, redirect_uri, origin=origin)

    @router.get("/auth/callback", name="auth_callback")
    async def auth_callback(request: Request):
        """Handle OAuth callback: exchange code for token, store the profile, redirect to /me."""
        origin = request.session.pop(ORIGIN_SESSION_KEY, None)
        try:
            user, profile = await strategy.handle_callback(request, origin=origin)
        except OAuthError as e:
            return JSONResponse({"error": str(e)}, status_code=400)
        except (ProfileFetchError, ProfileParseError) as e:
            return JSONResponse({"error": str(e)}, status_code=502)

        if not user:
            log.info("login_rejected", member_id=profile.id)
            return JSONResponse({"error": "login rejected"}, status_code=401)

        request.session["user"] = profile.to_dict()
        return RedirectResponse(url="/me")

    @router.get("/me")
    async def me(request: Request):
        """Return current user; redirect to /login if not authenticated."""
        if "user" not in request.session:
            return RedirectResponse(url="/login")
        return {"user": request.session["user"]}

    @router.get("/logout")
    async def logout(request: Request):
        """Clear session and redirect to home."""
        request.session.clear()
        return RedirectResponse(url="/")

    return router
