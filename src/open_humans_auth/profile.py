"""
Normalized Open Humans user profile.

Decisions:
- Parse failures propagate as ProfileParseError; a profile is never returned
  half-built. Callers that need the (error, profile) pair use
  OpenHumansStrategy.user_profile.
- Only id is mandatory. username falls back to id (Open Humans usernames
  and member IDs coincide for older accounts).
- Fields outside the normalized shape stay reachable through parsed/extra, as a
  read-only copy of the decoded body. parsed is left out of equality and hashing;
  raw already determines it.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .errors import ProfileParseError

PROVIDER = "open-humans"

_EMAIL_FIELDS = ("email", "contact_email")
_MAPPED_FIELDS = frozenset({"id", "username", "name", "url", *_EMAIL_FIELDS})


@dataclass(frozen=True)
class Profile:
    """Provider-agnostic user record built from one profile response."""

    id: str
    username: str
    display_name: str | None = None
    profile_url: str | None = None
    emails: tuple[str, ...] = ()
    raw: str = ""
    parsed: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), compare=False)
    provider: str = PROVIDER

    @property
    def extra(self) -> dict[str, Any]:
        """Provider-specific fields not captured by the normalized shape."""
        return {k: v for k, v in self.parsed.items() if k not in _MAPPED_FIELDS}

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable summary, suitable for a session cookie."""
        return {
            "provider": self.provider,
            "id": self.id,
            "username": self.username,
            "display_name": self.display_name,
            "profile_url": self.profile_url,
            "emails": list(self.emails),
        }


def _freeze(value: Any) -> Any:
    """Read-only copy of decoded JSON: objects become mapping proxies, arrays tuples."""
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def parse_profile(body: str) -> Profile:
    """Decode a profile response body and map it onto Profile.

    Raises ProfileParseError when the body is not JSON, is not a JSON object,
    or carries no id.
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise ProfileParseError("failed to parse user profile", body) from exc

    if not isinstance(data, dict):
        raise ProfileParseError(
            "user profile is not a JSON object", body, {"type": type(data).__name__}
        )
    if data.get("id") in (None, ""):
        raise ProfileParseError("user profile has no id", body, {"keys": sorted(data)})

    member_id = str(data["id"])
    emails = []
    for key in _EMAIL_FIELDS:
        value = data.get(key)
        if value and value not in emails:
            emails.append(value)

    return Profile(
        id=member_id,
        username=str(data.get("username") or member_id),
        display_name=data.get("name") or None,
        profile_url=data.get("url") or None,
        emails=tuple(emails),
        raw=body,
        parsed=_freeze(data),
    )
