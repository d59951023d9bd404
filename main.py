"""
FastAPI app: Open Humans OAuth login with session-stored profiles.

Decisions:
- .env is loaded before building the strategy so OPEN_HUMANS_* and
  SESSION_SECRET are available (Ruff E402 suppressed for that).
- verify accepts every Open Humans member; a real app would look up or create
  its own user record here and return None to reject the login.
- Session secret from SESSION_SECRET env; default "change-me" is for dev only.
"""

import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

load_dotenv()

# Load .env before reading config; Ruff E402.
from open_humans_auth import OpenHumansStrategy, Profile, StrategyConfig, create_auth_router  # noqa: E402

SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me")


async def verify(access_token: str, refresh_token: str | None, profile: Profile):
    """Accept any Open Humans member; the profile itself is the user."""
    return profile


strategy = OpenHumansStrategy(StrategyConfig.from_env(), verify)

app = FastAPI()
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)
app.include_router(create_auth_router(strategy))


@app.get("/")
async def home(request: Request):
    user = request.session.get("user")
    return {"logged_in": bool(user), "user": user}
