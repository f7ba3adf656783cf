"""
Configuration models for Infobip REST Methods.

This module defines the closed sets of authorization and content types and
the immutable per-service endpoint configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .constants import DEFAULT_BASE_URL, Defaults, Headers
from .validators import validate_content_type, validate_version
from .utils import normalize_base_url


class AuthType(Enum):
    """Enumeration of supported authorization schemes (value is the header prefix)."""
    BASIC = "Basic"
    API_KEY = "App"
    TOKEN = "IBSSO"


class ContentType(Enum):
    """Enumeration of supported request/response formats."""
    JSON = "json"
    XML = "xml"


def mime_type_for(content_type: Union[ContentType, str]) -> str:
    """MIME type for a content type; anything other than xml means JSON."""
    if getattr(content_type, "value", content_type) == ContentType.XML.value:
        return Headers.XML_CONTENT_TYPE
    return Headers.JSON_CONTENT_TYPE


@dataclass(frozen=True)
class ServiceConfig:
    """
    Endpoint configuration shared by every service.

    Attributes:
        base_url: Infobip personal base URL
        version: API version used in endpoint paths, 1 or 2
        content_type: Format the API sends and receives, json or xml
    """
    base_url: str = DEFAULT_BASE_URL
    version: int = Defaults.SMS_VERSION
    content_type: Union[ContentType, str] = Defaults.CONTENT_TYPE

    def __post_init__(self):
        validate_version(self.version)
        validate_content_type(self.content_type)
        # frozen dataclass, so normalized values go through object.__setattr__
        object.__setattr__(self, "base_url", normalize_base_url(self.base_url))
        object.__setattr__(self, "content_type", ContentType(getattr(self.content_type, "value", self.content_type)))


@dataclass(frozen=True)
class SMSConfig(ServiceConfig):
    """
    SMS service configuration.

    Attributes:
        default_from: Sender ID used when a send call gives none
    """
    default_from: str = Defaults.SENDER_ID


@dataclass(frozen=True)
class SettingsConfig(ServiceConfig):
    """
    Account settings configuration.

    Attributes:
        account_key: Account to manage, "_" for the caller's own account
    """
    account_key: str = Defaults.ACCOUNT_KEY
