"""
Unit tests for infobip_methods.status module.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from conftest import build_response
from infobip_methods.status import Status, status
from infobip_methods.exceptions import InvalidRequestError, NetworkError, UnauthorizedError


class TestStatusService:
    """Test the authorized status check."""

    def test_check_requires_authorization(self):
        with pytest.raises(UnauthorizedError):
            Status().check()

    def test_check(self, auth, session):
        session.request.return_value = build_response(200, {"status": "OK"})
        service = Status(base_url="xyz.api.infobip.com")
        service.authorize(auth, session=session)

        assert service.check() == {"status": "OK"}
        assert session.request.call_args[0] == ("GET", "https://xyz.api.infobip.com/status")


class TestStatusFunction:
    """Test the unauthenticated status helper."""

    @patch('infobip_methods.status.requests.get')
    def test_status_sends_accept_only(self, mock_get):
        mock_get.return_value = build_response(200, {"status": "OK"})

        assert status() == {"status": "OK"}

        mock_get.assert_called_once_with(
            "https://api.infobip.com/status",
            headers={"Accept": "application/json"}
        )

    def test_status_xml_with_injected_session(self):
        session = Mock()
        session.get.return_value = build_response(200, "<status>OK</status>", content_type="application/xml")

        assert status(content_type="xml", session=session) == "<status>OK</status>"
        assert session.get.call_args[1]["headers"] == {"Accept": "application/xml"}

    @patch('infobip_methods.status.requests.get')
    def test_status_network_failure(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(NetworkError):
            status()

    @patch('infobip_methods.status.requests.get')
    def test_status_missing_schema_is_local_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.MissingSchema("No scheme supplied")

        with pytest.raises(InvalidRequestError) as exc_info:
            status()

        assert exc_info.value.field == "url"
