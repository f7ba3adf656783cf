"""
Authorization for Infobip REST Methods.

An Auth holds one credential (Basic, App or IBSSO) and derives the request
headers and pre-configured HTTP sessions the services use.

Example:
    auth = Auth("Basic", "username", "password")
    auth = Auth("App", "public-api-key")
    auth = Auth("IBSSO", "token")

    sms = SMS()
    sms.authorize(auth)
"""

import base64
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

import requests

from .constants import Headers
from .models import AuthType, ContentType, mime_type_for
from .validators import validate_auth_type


@dataclass(frozen=True, init=False)
class Auth:
    """
    Immutable Infobip credential.

    Attributes:
        auth_type: Authorization scheme
        secret: Value sent after the scheme name; for Basic this is the
            base64 encoded "username:password" pair
    """
    auth_type: AuthType
    secret: str = field(repr=False)

    def __init__(
        self,
        auth_type: Union[AuthType, str],
        token_key_or_username: str,
        password: str = ""
    ):
        """
        Build a credential.

        Args:
            auth_type: "Basic", "App" or "IBSSO" (or the AuthType member)
            token_key_or_username: API key, token, or Basic username
            password: Basic password, ignored for other types

        Raises:
            InvalidAuthorizationKindError: If auth_type is not supported
        """
        kind = AuthType(validate_auth_type(auth_type))
        secret = token_key_or_username
        if kind is AuthType.BASIC:
            secret = base64.b64encode(f"{token_key_or_username}:{password}".encode("utf-8")).decode("ascii")

        object.__setattr__(self, "auth_type", kind)
        object.__setattr__(self, "secret", secret)

    @classmethod
    def basic(cls, username: str, password: str) -> "Auth":
        return cls(AuthType.BASIC, username, password)

    @classmethod
    def api_key(cls, key: str) -> "Auth":
        return cls(AuthType.API_KEY, key)

    @classmethod
    def token(cls, token: str) -> "Auth":
        return cls(AuthType.TOKEN, token)

    @property
    def authorization(self) -> str:
        """Value of the Authorization header."""
        return f"{self.auth_type.value} {self.secret}"

    def headers(self, content_type: Union[ContentType, str] = ContentType.JSON) -> Dict[str, str]:
        """
        Build the request header set for a response format.

        Anything other than xml falls back to JSON.
        """
        mime_type = mime_type_for(content_type)

        return {
            Headers.AUTHORIZATION: self.authorization,
            Headers.CONTENT_TYPE: mime_type,
            Headers.ACCEPT: mime_type,
        }

    def session(
        self,
        content_type: Union[ContentType, str] = ContentType.JSON,
        session: Optional[requests.Session] = None
    ) -> requests.Session:
        """
        Create an HTTP session carrying this credential's headers.

        Args:
            content_type: Response format the session asks for
            session: Existing session (or test double) to configure instead
                of creating a new one

        Returns:
            The configured session
        """
        if session is None:
            session = requests.Session()
        session.headers.update(self.headers(content_type))
        return session
