"""
Input validation functions for Infobip REST Methods.

Validation is deliberately shallow: membership checks for the closed sets
(versions, content types, authorization types) and presence checks for
required arguments. Request payload contents are left to the API.
"""

from typing import Any, Optional

from .constants import ErrorMessages, MAX_API_VERSION, MIN_API_VERSION
from .exceptions import (
    InvalidAuthorizationKindError,
    InvalidContentTypeError,
    InvalidVersionError,
    MissingParameterError,
)

SUPPORTED_CONTENT_TYPES = ("json", "xml")
SUPPORTED_AUTH_TYPES = ("Basic", "App", "IBSSO")


def _enum_value(value: Any) -> Any:
    """Accept either an enum member or its raw value."""
    return getattr(value, "value", value)


def validate_version(version: Any) -> int:
    """
    Validate an API version number.

    Args:
        version: Version to validate

    Returns:
        The version

    Raises:
        InvalidVersionError: If the version is not an integer in 1..2
    """
    if isinstance(version, bool) or not isinstance(version, int) or not MIN_API_VERSION <= version <= MAX_API_VERSION:
        raise InvalidVersionError(
            ErrorMessages.INVALID_VERSION.format(
                version=version,
                minimum=MIN_API_VERSION,
                maximum=MAX_API_VERSION
            ),
            field="version",
            value=version
        )
    return version


def validate_content_type(content_type: Any) -> str:
    """
    Validate a service content type.

    Raises:
        InvalidContentTypeError: If the content type is not json or xml
    """
    value = _enum_value(content_type)
    if value not in SUPPORTED_CONTENT_TYPES:
        raise InvalidContentTypeError(
            ErrorMessages.INVALID_CONTENT_TYPE.format(
                content_type=content_type,
                supported=", ".join(SUPPORTED_CONTENT_TYPES)
            ),
            field="content_type",
            value=content_type
        )
    return value


def validate_auth_type(auth_type: Any) -> str:
    """
    Validate an authorization type.

    Raises:
        InvalidAuthorizationKindError: If the type is not Basic, App or IBSSO
    """
    value = _enum_value(auth_type)
    if value not in SUPPORTED_AUTH_TYPES:
        raise InvalidAuthorizationKindError(
            ErrorMessages.INVALID_AUTH_TYPE.format(
                auth_type=auth_type,
                supported=", ".join(SUPPORTED_AUTH_TYPES)
            ),
            auth_type=auth_type
        )
    return value


def require_param(field: str, value: Any) -> Any:
    """
    Presence check for a required argument.

    Raises:
        MissingParameterError: If value is None or empty
    """
    if value is None or (hasattr(value, "__len__") and len(value) == 0):
        raise MissingParameterError(field)
    return value


def resolve_version(override: Optional[int], default: int) -> int:
    """Use a per-call version override when it is truthy, else the configured version."""
    if not override:
        return default
    return validate_version(override)
