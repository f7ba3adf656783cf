"""
API status check.
"""

import logging
from typing import Any, Optional, Union

import requests

from .base import BaseService
from .constants import DEFAULT_BASE_URL, Defaults, Endpoints, Headers, StatusCodes
from .exceptions import LOCAL_REQUEST_ERRORS, create_exception_from_failure, create_local_error
from .models import ContentType, ServiceConfig, mime_type_for
from .utils import decode_body, normalize_base_url

logger = logging.getLogger(__name__)


class Status(BaseService):
    """
    Authorized status check.

    Example:
        status = Status()
        status.authorize(Auth("App", "public-api-key"))
        print(status.check())
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        version: int = Defaults.STATUS_VERSION,
        content_type: Union[ContentType, str] = Defaults.CONTENT_TYPE,
        config: Optional[ServiceConfig] = None
    ):
        if config is None:
            config = ServiceConfig(base_url=base_url, version=version, content_type=content_type)
        super().__init__(config)

    def check(self) -> Any:
        """Get API status."""
        self._ensure_authorized()
        return self._get(f"{self.config.base_url}{Endpoints.STATUS}")


def status(
    base_url: str = DEFAULT_BASE_URL,
    content_type: Union[ContentType, str] = Defaults.CONTENT_TYPE,
    session: Optional[requests.Session] = None
) -> Any:
    """
    Get API status without credentials.

    Only the Accept header is sent; xml asks for XML, anything else for JSON.

    Raises:
        RemoteError: On transport failure or non-2xx status
    """
    accept = mime_type_for(content_type)

    url = f"{normalize_base_url(base_url)}{Endpoints.STATUS}"
    http = session if session is not None else requests
    logger.info(f"Making GET request to {url}")

    try:
        response = http.get(url, headers={Headers.ACCEPT: accept})
        if response.status_code >= StatusCodes.BAD_REQUEST:
            raise requests.HTTPError(f"{response.status_code} error for GET {url}", response=response)
    except LOCAL_REQUEST_ERRORS as e:
        raise create_local_error(e) from e
    except requests.RequestException as e:
        raise create_exception_from_failure(e) from e

    return decode_body(response)
