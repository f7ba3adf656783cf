"""
Account settings service for Infobip REST Methods, used to manage API keys.

Example:
    settings = Settings()
    settings.authorize(Auth("Basic", "username", "password"))

    # List all API keys
    settings.get_api_keys()

    # Look a key up by key, public key or name
    settings.get_api_key("abc")
    settings.get_api_key_by_public_key("abc")
    settings.get_api_key_by_name("live-server")
"""

from typing import Any, Dict, Optional, Union

from .base import BaseService
from .constants import DEFAULT_BASE_URL, Defaults, Endpoints
from .models import ContentType, SettingsConfig


class Settings(BaseService):
    """Account API key management."""

    def __init__(
        self,
        account_key: str = Defaults.ACCOUNT_KEY,
        base_url: str = DEFAULT_BASE_URL,
        version: int = Defaults.SETTINGS_VERSION,
        content_type: Union[ContentType, str] = Defaults.CONTENT_TYPE,
        config: Optional[SettingsConfig] = None
    ):
        """
        Initialize Settings service.

        Args:
            account_key: Account to manage; "_" for your current account or
                an account key for sub accounts
            base_url: Infobip personal base URL
            version: API version 1 or 2
            content_type: The type of data the API returns, "json" or "xml"
            config: Ready-made configuration, overrides the other arguments
        """
        if config is None:
            config = SettingsConfig(
                base_url=base_url,
                version=version,
                content_type=content_type,
                account_key=account_key
            )
        super().__init__(config)

    @property
    def account_key(self) -> str:
        return self.config.account_key

    def _keys_url(self, version: Optional[int], key: Optional[str] = None) -> str:
        if key is None:
            return self._url(Endpoints.API_KEYS, version, account_key=self.config.account_key)
        return self._url(Endpoints.API_KEY, version, account_key=self.config.account_key, key=key)

    def get_api_keys(self, enabled: Union[str, bool] = "", version: Optional[int] = None) -> Any:
        """
        List all API keys.

        Args:
            enabled: Filter on enabled keys, "true"/"false" or a bool
            version: API version for this call only
        """
        self._ensure_authorized()
        return self._get(self._keys_url(version), query={"enabled": enabled})

    def get_api_key(self, key: str, version: Optional[int] = None) -> Any:
        """Get an API key by its key (unique ID)."""
        self._ensure_authorized()
        self._require(key=key)
        return self._get(self._keys_url(version, key))

    def get_api_key_by_public_key(self, public_api_key: str, version: Optional[int] = None) -> Any:
        self._ensure_authorized()
        self._require(public_api_key=public_api_key)
        return self._get(self._keys_url(version), query={"publicApiKey": public_api_key})

    def get_api_key_by_name(self, name: str, version: Optional[int] = None) -> Any:
        self._ensure_authorized()
        self._require(name=name)
        return self._get(self._keys_url(version), query={"name": name})

    def new_api_key(self, params: Dict[str, Any], version: Optional[int] = None) -> Any:
        """
        Create an API key.

        Args:
            params: API key properties, e.g.
                {"name": "Api key 1", "allowedIPs": [], "permissions": ["ALL"]}
            version: API version for this call only
        """
        self._ensure_authorized()
        self._require(params=params)
        return self._post(self._keys_url(version), params)

    def update_api_key(self, key: str, params: Dict[str, Any], version: Optional[int] = None) -> Any:
        """Update an API key."""
        self._ensure_authorized()
        self._require(key=key, params=params)
        return self._put(self._keys_url(version, key), params)
