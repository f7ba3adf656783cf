"""
Custom exceptions for Infobip REST Methods.

This module defines the exception hierarchy raised by the package and the
normalization step that reduces a transport failure to its most useful
payload before it reaches the caller.
"""

from typing import Optional, Dict, Any

import requests

from .constants import ErrorMessages, StatusCodes
from .utils import decode_body


class InfobipError(Exception):
    """
    Base exception class for all Infobip API related errors.

    Attributes:
        message (str): Error message
        status_code (Optional[int]): HTTP status code if applicable
        error_code (Optional[str]): API specific error code
        details (Dict[str, Any]): Additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self):
        error_parts = [f"{self.__class__.__name__}: {self.message}"]

        if self.status_code:
            error_parts.append(f"Status Code: {self.status_code}")

        if self.error_code:
            error_parts.append(f"Error Code: {self.error_code}")

        if self.details:
            error_parts.append(f"Details: {self.details}")

        return " | ".join(error_parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "error_code": self.error_code,
            "details": self.details
        }


class InvalidAuthorizationKindError(InfobipError):
    """Raised when a credential is built with an unknown authorization type."""

    def __init__(self, message: str, auth_type: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.auth_type = auth_type


class ValidationError(InfobipError):
    """
    Raised when local input validation fails.

    Attributes:
        field (Optional[str]): The field that failed validation
        value (Any): The invalid value
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def __str__(self):
        base_str = super().__str__()
        if self.field:
            base_str += f" | Field: {self.field}"
        if self.value is not None:
            base_str += f" | Value: {self.value}"
        return base_str


class InvalidVersionError(ValidationError):
    """Raised when a service is configured with an API version outside 1..2."""


class InvalidContentTypeError(ValidationError):
    """Raised when a service is configured with a content type other than json/xml."""


class MissingParameterError(ValidationError):
    """Raised when a required argument is absent or empty."""

    def __init__(self, field: str, message: Optional[str] = None, **kwargs):
        super().__init__(
            message or ErrorMessages.MISSING_PARAMETER.format(field=field),
            field=field,
            **kwargs
        )


class InvalidRequestError(ValidationError):
    """
    Raised when requests refuses to build a request, so nothing was sent.

    This includes payloads that cannot be JSON encoded (NaN, sets, ...)
    and malformed URLs or headers.
    """


# requests failures raised while preparing a request, before any I/O
LOCAL_REQUEST_ERRORS = (
    requests.exceptions.InvalidJSONError,
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidHeader,
    requests.exceptions.URLRequired,
)


def create_local_error(error: Exception) -> InvalidRequestError:
    """Wrap a request preparation failure as a local validation error."""
    if isinstance(error, requests.exceptions.InvalidJSONError):
        field = "payload"
    elif isinstance(error, requests.exceptions.InvalidHeader):
        field = "headers"
    else:
        field = "url"
    return InvalidRequestError(str(error), field=field)


class UnauthorizedError(InfobipError):
    """Raised when an endpoint method is called before authorize()."""

    def __init__(self, message: str = ErrorMessages.UNAUTHORIZED, **kwargs):
        super().__init__(message, **kwargs)


class RemoteError(InfobipError):
    """
    Raised when the API call itself failed.

    Attributes:
        payload (Any): The normalized failure, see normalize_error()
    """

    def __init__(self, message: str = ErrorMessages.REQUEST_FAILED, payload: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.payload = payload


class AuthenticationError(RemoteError):
    """
    Raised when the API rejects the credentials.

    This typically occurs when:
    - API key is invalid, expired or revoked
    - Basic credentials are wrong
    - The key lacks permission for the endpoint
    """


class NotFoundError(RemoteError):
    """Raised when the addressed application, template, pin or key does not exist."""


class RateLimitError(RemoteError):
    """
    Raised when API rate limits are exceeded.

    Attributes:
        retry_after (Optional[int]): Seconds to wait before retrying
    """

    def __init__(self, message: str = ErrorMessages.REQUEST_FAILED, retry_after: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after

    def __str__(self):
        base_str = super().__str__()
        if self.retry_after:
            base_str += f" | Retry After: {self.retry_after}s"
        return base_str


class ServerError(RemoteError):
    """Raised on 5xx responses."""


class NetworkError(RemoteError):
    """
    Raised when a request was sent but no response came back.

    This includes connection failures, DNS errors and transport timeouts.
    """


def normalize_error(error: Any) -> Any:
    """
    Reduce a failure to the most useful payload available.

    Rules, first match wins:
        1. a server response with a body -> the decoded body
        2. a server response without a body -> the response object
        3. a sent request that never got a response -> the request object
        4. anything else -> the error unchanged

    Args:
        error: Any failure value, usually a requests exception

    Returns:
        The normalized payload
    """
    # already-normalized payloads (bodies, responses, requests) pass through
    if not isinstance(error, BaseException):
        return error

    response = getattr(error, "response", None)
    if response is not None:
        body = decode_body(response)
        if body is not None and body != "":
            return body
        return response

    request = getattr(error, "request", None)
    if request is not None:
        return request

    return error


def _extract_message(payload: Any) -> tuple:
    """Pull the service exception text and id out of an Infobip error body."""
    if isinstance(payload, dict):
        request_error = payload.get("requestError") or {}
        service_error = request_error.get("serviceException") or request_error.get("policyException") or {}
        if service_error:
            return service_error.get("text"), service_error.get("messageId")
        if "error" in payload:
            return str(payload["error"]), None
    return None, None


def create_exception_from_failure(error: Exception) -> RemoteError:
    """
    Create the RemoteError matching a transport failure.

    Args:
        error: The requests exception raised while calling the API

    Returns:
        Appropriate RemoteError subclass instance carrying the normalized payload
    """
    payload = normalize_error(error)
    response = getattr(error, "response", None)

    if response is None:
        return NetworkError(
            message=str(error) or ErrorMessages.NO_RESPONSE,
            payload=payload
        )

    status_code = response.status_code
    text, error_code = _extract_message(payload)
    message = text or f"{ErrorMessages.REQUEST_FAILED} with status {status_code}"

    if status_code in (StatusCodes.UNAUTHORIZED, StatusCodes.FORBIDDEN):
        exception_class = AuthenticationError
    elif status_code == StatusCodes.NOT_FOUND:
        exception_class = NotFoundError
    elif status_code == StatusCodes.TOO_MANY_REQUESTS:
        retry_after = response.headers.get("Retry-After")
        return RateLimitError(
            message=message,
            status_code=status_code,
            error_code=error_code,
            payload=payload,
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None
        )
    elif status_code >= StatusCodes.INTERNAL_SERVER_ERROR:
        exception_class = ServerError
    else:
        exception_class = RemoteError

    return exception_class(
        message=message,
        status_code=status_code,
        error_code=error_code,
        payload=payload
    )
