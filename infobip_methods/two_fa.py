"""
Two-factor authentication service for Infobip REST Methods.

Covers 2FA applications, their message templates, and the pin
send / resend / verify flow.

Example:
    two_fa = TwoFA()
    two_fa.authorize(Auth("Basic", "username", "password"))

    app = two_fa.new_app({"name": "Mobile Number Verifier", "enabled": True})
    template = two_fa.new_message_template(app["applicationId"], {
        "pinType": "NUMERIC",
        "messageText": "Your pin is {{pin}}",
        "pinLength": 4
    })
    pin = two_fa.send_pin({
        "applicationId": app["applicationId"],
        "messageId": template["messageId"],
        "to": "41793026727"
    })
    two_fa.verify_pin(pin["pinId"], "1234")
"""

from typing import Any, Dict, Optional, Union

from .base import BaseService
from .constants import DEFAULT_BASE_URL, Defaults, Endpoints
from .models import ContentType, ServiceConfig


class TwoFA(BaseService):
    """2FA applications, message templates and pins."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        version: int = Defaults.TWO_FA_VERSION,
        content_type: Union[ContentType, str] = Defaults.CONTENT_TYPE,
        config: Optional[ServiceConfig] = None
    ):
        """
        Initialize 2FA service.

        Args:
            base_url: Infobip personal base URL
            version: API version 1 or 2
            content_type: The type of data the API returns, "json" or "xml"
            config: Ready-made configuration, overrides the other arguments
        """
        if config is None:
            config = ServiceConfig(base_url=base_url, version=version, content_type=content_type)
        super().__init__(config)

    # Applications

    def get_apps(self, version: Optional[int] = None) -> Any:
        """List all 2FA applications."""
        self._ensure_authorized()
        return self._get(self._url(Endpoints.TWO_FA_APPLICATIONS, version))

    def get_app(self, application_id: str, version: Optional[int] = None) -> Any:
        """Get a 2FA application by its application ID."""
        self._ensure_authorized()
        self._require(application_id=application_id)
        return self._get(self._url(Endpoints.TWO_FA_APPLICATION, version, application_id=application_id))

    def new_app(self, params: Dict[str, Any], version: Optional[int] = None) -> Any:
        """
        Create an application.

        Args:
            params: Application properties, e.g.
                {"name": "Mobile Number Verifier",
                 "configuration": {"pinAttempts": 10, "pinTimeToLive": "15m"},
                 "enabled": True}
            version: API version for this call only
        """
        self._ensure_authorized()
        self._require(params=params)
        return self._post(self._url(Endpoints.TWO_FA_APPLICATIONS, version), params)

    def update_app(self, application_id: str, params: Dict[str, Any], version: Optional[int] = None) -> Any:
        """Update an application."""
        self._ensure_authorized()
        self._require(application_id=application_id, params=params)
        return self._put(
            self._url(Endpoints.TWO_FA_APPLICATION, version, application_id=application_id),
            params
        )

    # Message templates

    def get_message_templates(self, application_id: str, version: Optional[int] = None) -> Any:
        """List the message templates of an application."""
        self._ensure_authorized()
        self._require(application_id=application_id)
        return self._get(self._url(Endpoints.TWO_FA_MESSAGES, version, application_id=application_id))

    def get_message_template(self, application_id: str, message_id: str, version: Optional[int] = None) -> Any:
        self._ensure_authorized()
        self._require(application_id=application_id, message_id=message_id)
        return self._get(self._url(
            Endpoints.TWO_FA_MESSAGE,
            version,
            application_id=application_id,
            message_id=message_id
        ))

    def new_message_template(self, application_id: str, params: Dict[str, Any], version: Optional[int] = None) -> Any:
        """Create a message template for an application."""
        self._ensure_authorized()
        self._require(application_id=application_id, params=params)
        return self._post(
            self._url(Endpoints.TWO_FA_MESSAGES, version, application_id=application_id),
            params
        )

    def update_message_template(
        self,
        application_id: str,
        message_id: str,
        params: Dict[str, Any],
        version: Optional[int] = None
    ) -> Any:
        self._ensure_authorized()
        self._require(application_id=application_id, message_id=message_id, params=params)
        return self._put(
            self._url(
                Endpoints.TWO_FA_MESSAGE,
                version,
                application_id=application_id,
                message_id=message_id
            ),
            params
        )

    # Pins

    def send_pin(self, params: Dict[str, Any], nc_needed: Optional[bool] = None, version: Optional[int] = None) -> Any:
        """
        Send a pin over SMS.

        Args:
            params: applicationId, messageId, to and optional placeholders
            nc_needed: Ask for Number Lookup before sending
            version: API version for this call only
        """
        self._ensure_authorized()
        self._require(params=params)
        return self._post(self._url(Endpoints.TWO_FA_PIN, version), params, query={"ncNeeded": nc_needed})

    def resend_pin(self, pin_id: str, params: Optional[Dict[str, Any]] = None, version: Optional[int] = None) -> Any:
        """Resend a pin, optionally with new placeholder values."""
        self._ensure_authorized()
        self._require(pin_id=pin_id)
        return self._post(self._url(Endpoints.TWO_FA_PIN_RESEND, version, pin_id=pin_id), params)

    def verify_pin(self, pin_id: str, pin: str, version: Optional[int] = None) -> Any:
        """Verify the pin a user entered."""
        self._ensure_authorized()
        self._require(pin_id=pin_id, pin=pin)
        return self._post(self._url(Endpoints.TWO_FA_PIN_VERIFY, version, pin_id=pin_id), {"pin": pin})
