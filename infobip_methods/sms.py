"""
SMS service for Infobip REST Methods.

Example:
    sms = SMS("CompanyA", "https://api.infobip.com")
    sms.authorize(Auth("App", "public-api-key"))

    # Send single text
    sms.single("631234567890", "Hello there!")

    # Send single text to multiple recipients
    sms.single(["631234567890", "631234567891"], "Hello there!")
"""

from typing import Any, List, Optional, Union

from .base import BaseService
from .constants import DEFAULT_BASE_URL, Defaults, Endpoints
from .models import ContentType, SMSConfig


class SMS(BaseService):
    """SMS sending and delivery reports."""

    def __init__(
        self,
        default_from: str = Defaults.SENDER_ID,
        base_url: str = DEFAULT_BASE_URL,
        version: int = Defaults.SMS_VERSION,
        content_type: Union[ContentType, str] = Defaults.CONTENT_TYPE,
        config: Optional[SMSConfig] = None
    ):
        """
        Initialize SMS service.

        Args:
            default_from: Sender ID, alphanumeric or numeric
            base_url: Infobip personal base URL
            version: API version 1 or 2
            content_type: The type of data the API returns, "json" or "xml"
            config: Ready-made configuration, overrides the other arguments
        """
        if config is None:
            config = SMSConfig(
                base_url=base_url,
                version=version,
                content_type=content_type,
                default_from=default_from
            )
        super().__init__(config)

    @property
    def default_from(self) -> str:
        return self.config.default_from

    def single(
        self,
        to: Union[str, List[str]],
        text: str,
        from_: str = "",
        version: Optional[int] = None
    ) -> Any:
        """
        Send single SMS.

        The maximum length of one message is 160 characters for GSM7 or 70
        characters for Unicode encoded messages.

        Args:
            to: Destination address(es) in international format (e.g. 41793026727)
            text: Text of the message
            from_: Sender ID for this call only; empty uses default_from
            version: API version for this call only

        Returns:
            Decoded response body
        """
        self._ensure_authorized()
        self._require(to=to, text=text)

        payload = {
            "from": from_ or self.config.default_from,
            "to": to,
            "text": text
        }
        return self._post(self._url(Endpoints.SMS_SINGLE, version), payload)

    def get_report_by_message_id(self, message_id: str, version: Optional[int] = None) -> Any:
        """
        Get a delivery report via message ID.

        Args:
            message_id: The ID that uniquely identifies the message sent
            version: API version for this call only
        """
        self._ensure_authorized()
        self._require(message_id=message_id)

        return self._get(self._url(Endpoints.SMS_REPORTS, version), query={"messageId": message_id})
