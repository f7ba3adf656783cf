"""
Infobip REST Methods

A thin Python client for the Infobip REST API: SMS, two-factor
authentication, account API keys and status checks.

Usage:
    from infobip_methods import Auth, SMS, Settings

    auth = Auth("App", "public-api-key")

    sms = SMS("CompanyA")
    sms.authorize(auth)
    sms.single("41793026727", "Hello there!")

    settings = Settings()
    settings.authorize(auth)
    settings.get_api_keys(enabled=True)
"""

__version__ = "1.0.0"
__description__ = "Thin client for the Infobip REST API"

from .models import AuthType, ContentType, ServiceConfig, SMSConfig, SettingsConfig
from .exceptions import (
    InfobipError,
    InvalidAuthorizationKindError,
    ValidationError,
    InvalidVersionError,
    InvalidContentTypeError,
    MissingParameterError,
    InvalidRequestError,
    UnauthorizedError,
    RemoteError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ServerError,
    NetworkError,
    normalize_error
)
from .auth import Auth
from .status import Status, status
from .sms import SMS
from .two_fa import TwoFA
from .settings import Settings
from .config import EnvSettings, setup_logging

# Main exports
__all__ = [
    "Auth",
    "AuthType",
    "ContentType",
    "ServiceConfig",
    "SMSConfig",
    "SettingsConfig",
    "Status",
    "status",
    "SMS",
    "TwoFA",
    "Settings",
    "EnvSettings",
    "setup_logging",
    "InfobipError",
    "InvalidAuthorizationKindError",
    "ValidationError",
    "InvalidVersionError",
    "InvalidContentTypeError",
    "MissingParameterError",
    "InvalidRequestError",
    "UnauthorizedError",
    "RemoteError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
    "normalize_error"
]
