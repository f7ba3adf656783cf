"""
Environment configuration for Infobip REST Methods.
Handles environment variable loading and builds credentials and service
configurations from it.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .auth import Auth
from .constants import DEFAULT_BASE_URL, Defaults, EnvVars, LogConfig
from .exceptions import MissingParameterError
from .models import AuthType, ServiceConfig, SettingsConfig, SMSConfig
from .validators import validate_auth_type


class EnvSettings:
    """
    Configuration read from the environment (and a .env file if present).
    """

    def __init__(self, dotenv_path: Optional[str] = None):
        """Load environment variables from .env without overriding existing ones."""
        load_dotenv(dotenv_path)

    # Endpoint Configuration
    @property
    def base_url(self) -> str:
        return os.getenv(EnvVars.BASE_URL, DEFAULT_BASE_URL)

    @property
    def content_type(self) -> str:
        return os.getenv(EnvVars.CONTENT_TYPE, Defaults.CONTENT_TYPE)

    @property
    def sender_id(self) -> str:
        return os.getenv(EnvVars.SENDER_ID, Defaults.SENDER_ID)

    @property
    def account_key(self) -> str:
        return os.getenv(EnvVars.ACCOUNT_KEY, Defaults.ACCOUNT_KEY)

    # Credentials
    @property
    def auth_type(self) -> str:
        return os.getenv(EnvVars.AUTH_TYPE, Defaults.AUTH_TYPE)

    @property
    def api_key(self) -> str:
        return os.getenv(EnvVars.API_KEY, "")

    @property
    def username(self) -> str:
        return os.getenv(EnvVars.USERNAME, "")

    @property
    def password(self) -> str:
        return os.getenv(EnvVars.PASSWORD, "")

    @property
    def token(self) -> str:
        return os.getenv(EnvVars.TOKEN, "")

    # Logging Configuration
    @property
    def log_level(self) -> str:
        return os.getenv(EnvVars.LOG_LEVEL, LogConfig.DEFAULT_LOG_LEVEL)

    def auth(self) -> Auth:
        """
        Build the credential for the configured authorization type.

        Raises:
            InvalidAuthorizationKindError: If INFOBIP_AUTH_TYPE is unknown
            MissingParameterError: If a variable the type needs is not set
        """
        auth_type = AuthType(validate_auth_type(self.auth_type))

        if auth_type is AuthType.BASIC:
            required_vars = [(EnvVars.USERNAME, self.username), (EnvVars.PASSWORD, self.password)]
        elif auth_type is AuthType.API_KEY:
            required_vars = [(EnvVars.API_KEY, self.api_key)]
        else:
            required_vars = [(EnvVars.TOKEN, self.token)]

        for var_name, var_value in required_vars:
            if not var_value:
                raise MissingParameterError(
                    var_name,
                    message=f"Missing required environment variable: {var_name}"
                )

        if auth_type is AuthType.BASIC:
            return Auth.basic(self.username, self.password)
        if auth_type is AuthType.API_KEY:
            return Auth.api_key(self.api_key)
        return Auth.token(self.token)

    def status_config(self) -> ServiceConfig:
        return ServiceConfig(
            base_url=self.base_url,
            version=Defaults.STATUS_VERSION,
            content_type=self.content_type
        )

    def sms_config(self) -> SMSConfig:
        return SMSConfig(
            base_url=self.base_url,
            version=Defaults.SMS_VERSION,
            content_type=self.content_type,
            default_from=self.sender_id
        )

    def two_fa_config(self) -> ServiceConfig:
        return ServiceConfig(
            base_url=self.base_url,
            version=Defaults.TWO_FA_VERSION,
            content_type=self.content_type
        )

    def settings_config(self) -> SettingsConfig:
        return SettingsConfig(
            base_url=self.base_url,
            version=Defaults.SETTINGS_VERSION,
            content_type=self.content_type,
            account_key=self.account_key
        )

    def setup_logging(self) -> None:
        """Setup logging configuration based on environment variables."""
        setup_logging(self.log_level)


def setup_logging(level: str = LogConfig.DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging with the package format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LogConfig.DEFAULT_LOG_FORMAT
    )
