"""
Shared service plumbing for Infobip REST Methods.

BaseService holds the immutable endpoint configuration, the authorize step
and the single request path every endpoint method goes through.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .auth import Auth
from .constants import StatusCodes
from .exceptions import (
    LOCAL_REQUEST_ERRORS,
    UnauthorizedError,
    create_exception_from_failure,
    create_local_error
)
from .models import ServiceConfig
from .utils import clean_query, decode_body
from .validators import require_param, resolve_version

# Set up logging
logger = logging.getLogger(__name__)


class BaseService:
    """
    Base class for the Infobip services.

    Subclasses build their configuration and expose one method per
    endpoint. A service is unusable until authorize() attaches a session.
    """

    def __init__(self, config: ServiceConfig):
        self.config = config
        self.session: Optional[requests.Session] = None

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def version(self) -> int:
        return self.config.version

    @property
    def content_type(self) -> str:
        return self.config.content_type.value

    def authorize(self, auth: Auth, session: Optional[requests.Session] = None) -> None:
        """
        Authorize API calls.

        Args:
            auth: Credential to sign requests with
            session: Optional session (or test double) to use as transport
        """
        self.session = auth.session(self.config.content_type, session=session)
        logger.debug(f"{self.__class__.__name__} authorized with {auth.auth_type.value}")

    def _ensure_authorized(self) -> None:
        if self.session is None:
            raise UnauthorizedError()

    @staticmethod
    def _require(**params: Any) -> None:
        for name, value in params.items():
            require_param(name, value)

    def _url(self, template: str, version: Optional[int] = None, **segments: Any) -> str:
        """Interpolate an endpoint template with the resolved version and quoted path segments."""
        quoted = {name: quote(str(value), safe="") for name, value in segments.items()}
        path = template.format(version=resolve_version(version, self.config.version), **quoted)
        return f"{self.config.base_url}{path}"

    def _request(
        self,
        method: str,
        url: str,
        payload: Any = None,
        query: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Issue exactly one request and return the decoded body.

        Args:
            method: HTTP method (GET, POST or PUT)
            url: Absolute endpoint URL
            payload: Request body; str/bytes are sent as-is, anything else
                is JSON encoded
            query: Query parameters, empty values are dropped

        Returns:
            Decoded response body

        Raises:
            InvalidRequestError: If the request cannot be built, nothing is sent
            RemoteError: On transport failure or non-2xx status
        """
        kwargs: Dict[str, Any] = {"params": clean_query(query or {})}
        if payload is not None:
            if isinstance(payload, (str, bytes)):
                kwargs["data"] = payload
            else:
                kwargs["json"] = payload

        logger.info(f"Making {method} request to {url}")
        if payload is not None:
            logger.debug(f"Request payload: {payload}")

        try:
            response = self.session.request(method, url, **kwargs)
            logger.debug(f"Response status: {response.status_code}")
            if response.status_code >= StatusCodes.BAD_REQUEST:
                raise requests.HTTPError(
                    f"{response.status_code} error for {method} {url}",
                    response=response
                )
        except LOCAL_REQUEST_ERRORS as e:
            raise create_local_error(e) from e
        except requests.RequestException as e:
            raise create_exception_from_failure(e) from e

        return decode_body(response)

    def _get(self, url: str, query: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", url, query=query)

    def _post(self, url: str, payload: Any = None, query: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("POST", url, payload=payload, query=query)

    def _put(self, url: str, payload: Any = None) -> Any:
        return self._request("PUT", url, payload=payload)
