"""Exception hierarchy for the Open Humans strategy."""

from __future__ import annotations

from typing import Any


class OpenHumansAuthError(Exception):
    """Base exception for all Open Humans authentication errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class ConfigurationError(OpenHumansAuthError):
    """Strategy configuration is missing a required field or is malformed."""


class ProfileFetchError(OpenHumansAuthError):
    """Transport failed while fetching the user profile."""

    def __init__(self, message: str, cause: BaseException, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, context)
        self.cause = cause


class ProfileParseError(OpenHumansAuthError):
    """Profile response body could not be decoded into a profile."""

    def __init__(self, message: str, body: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, context)
        self.body = body
