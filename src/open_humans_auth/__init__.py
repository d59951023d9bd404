"""
Open Humans OAuth 2.0 login for FastAPI applications.

Exposes the strategy (OpenHumansStrategy, build_auth_params), its configuration
(StrategyConfig), the normalized Profile, the error types, and the FastAPI auth
router factory (create_auth_router).
"""

from .config import StrategyConfig
from .errors import ConfigurationError, OpenHumansAuthError, ProfileFetchError, ProfileParseError
from .profile import PROVIDER, Profile, parse_profile
from .router import create_auth_router
from .strategy import OpenHumansStrategy, ProfileResult, build_auth_params

__all__ = [
    "PROVIDER",
    "StrategyConfig",
    "OpenHumansStrategy",
    "ProfileResult",
    "build_auth_params",
    "Profile",
    "parse_profile",
    "OpenHumansAuthError",
    "ConfigurationError",
    "ProfileFetchError",
    "ProfileParseError",
    "create_auth_router",
]
