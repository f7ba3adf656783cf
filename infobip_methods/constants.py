"""
Constants and configuration for Infobip REST Methods.

This module contains the API root, endpoint path templates, header names,
default values and other constants used throughout the package.
"""

# API Configuration
DEFAULT_BASE_URL = "https://api.infobip.com"
MIN_API_VERSION = 1
MAX_API_VERSION = 2

# API Endpoints
class Endpoints:
    """Infobip REST endpoint templates, relative to the base URL."""

    STATUS = "/status"

    # SMS
    SMS_SINGLE = "/sms/{version}/text/single"
    SMS_REPORTS = "/sms/{version}/reports"

    # 2FA applications and message templates
    TWO_FA_APPLICATIONS = "/2fa/{version}/applications"
    TWO_FA_APPLICATION = "/2fa/{version}/applications/{application_id}"
    TWO_FA_MESSAGES = "/2fa/{version}/applications/{application_id}/messages"
    TWO_FA_MESSAGE = "/2fa/{version}/applications/{application_id}/messages/{message_id}"

    # 2FA pins
    TWO_FA_PIN = "/2fa/{version}/pin"
    TWO_FA_PIN_RESEND = "/2fa/{version}/pin/{pin_id}/resend"
    TWO_FA_PIN_VERIFY = "/2fa/{version}/pin/{pin_id}/verify"

    # Account API keys
    API_KEYS = "/settings/{version}/accounts/{account_key}/api-keys"
    API_KEY = "/settings/{version}/accounts/{account_key}/api-keys/{key}"

# HTTP Headers
class Headers:
    """Standard HTTP headers used by the package."""

    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    ACCEPT = "Accept"

    # Content types
    JSON_CONTENT_TYPE = "application/json"
    XML_CONTENT_TYPE = "application/xml"

# Status Codes
class StatusCodes:
    """HTTP status codes the package reacts to."""

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500

# Default Values
class Defaults:
    """Default values for service configuration."""

    SENDER_ID = "INFO"
    ACCOUNT_KEY = "_"  # the caller's own account
    SMS_VERSION = 1
    TWO_FA_VERSION = 2
    SETTINGS_VERSION = 1
    STATUS_VERSION = 1
    CONTENT_TYPE = "json"
    AUTH_TYPE = "App"

# Common Error Messages
class ErrorMessages:
    """Common error messages."""

    INVALID_AUTH_TYPE = "Invalid authorization type: {auth_type}. Supported types: {supported}."
    INVALID_VERSION = "Invalid version number: {version}. Must be between {minimum} and {maximum}."
    INVALID_CONTENT_TYPE = "Invalid content type: {content_type}. Supported types: {supported}."
    UNAUTHORIZED = "Unauthorized API call. Call authorize() first."
    MISSING_PARAMETER = "Please provide {field}."
    NO_RESPONSE = "No response received from the API."
    REQUEST_FAILED = "API request failed"

# Environment Variable Names
class EnvVars:
    """Environment variable names."""

    BASE_URL = "INFOBIP_BASE_URL"
    AUTH_TYPE = "INFOBIP_AUTH_TYPE"
    API_KEY = "INFOBIP_API_KEY"
    USERNAME = "INFOBIP_USERNAME"
    PASSWORD = "INFOBIP_PASSWORD"
    TOKEN = "INFOBIP_TOKEN"
    CONTENT_TYPE = "INFOBIP_CONTENT_TYPE"
    SENDER_ID = "INFOBIP_SENDER_ID"
    ACCOUNT_KEY = "INFOBIP_ACCOUNT_KEY"
    LOG_LEVEL = "INFOBIP_LOG_LEVEL"

# Logging Configuration
class LogConfig:
    """Logging configuration constants."""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
