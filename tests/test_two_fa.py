"""
Unit tests for infobip_methods.two_fa module.

Tests 2FA application, message template and pin endpoints.
"""

import pytest

from conftest import build_response
from infobip_methods.two_fa import TwoFA
from infobip_methods.exceptions import (
    MissingParameterError,
    NotFoundError,
    UnauthorizedError
)

BASE = "https://api.infobip.com/2fa/2"


class TestTwoFAUnauthorized:
    """Test that every method fails before authorize()."""

    @pytest.mark.parametrize("method,args", [
        ("get_apps", ()),
        ("get_app", ("app-1",)),
        ("new_app", ({"name": "x"},)),
        ("update_app", ("app-1", {"name": "x"})),
        ("get_message_templates", ("app-1",)),
        ("get_message_template", ("app-1", "msg-1")),
        ("new_message_template", ("app-1", {"messageText": "{{pin}}"})),
        ("update_message_template", ("app-1", "msg-1", {"messageText": "{{pin}}"})),
        ("send_pin", ({"to": "41793026727"},)),
        ("resend_pin", ("pin-1",)),
        ("verify_pin", ("pin-1", "1234")),
    ])
    def test_unauthorized(self, method, args):
        with pytest.raises(UnauthorizedError):
            getattr(TwoFA(), method)(*args)


class TestTwoFAApplications:
    """Test application endpoints."""

    @pytest.fixture
    def two_fa(self, auth, session):
        two_fa = TwoFA()
        two_fa.authorize(auth, session=session)
        return two_fa

    def test_default_version_is_two(self):
        assert TwoFA().version == 2

    def test_get_apps(self, two_fa, session):
        session.request.return_value = build_response(200, [{"applicationId": "app-1"}])

        assert two_fa.get_apps() == [{"applicationId": "app-1"}]
        assert session.request.call_args[0] == ("GET", f"{BASE}/applications")

    def test_get_app(self, two_fa, session):
        two_fa.get_app("app-1")
        assert session.request.call_args[0] == ("GET", f"{BASE}/applications/app-1")

    def test_get_app_requires_id(self, two_fa, session):
        with pytest.raises(MissingParameterError) as exc_info:
            two_fa.get_app("")
        assert exc_info.value.field == "application_id"
        session.request.assert_not_called()

    def test_new_app(self, two_fa, session):
        params = {
            "name": "Mobile Number Verifier",
            "configuration": {"pinAttempts": 10, "pinTimeToLive": "15m"},
            "enabled": True
        }
        two_fa.new_app(params)

        args, kwargs = session.request.call_args
        assert args == ("POST", f"{BASE}/applications")
        assert kwargs["json"] == params

    def test_new_app_requires_params(self, two_fa):
        with pytest.raises(MissingParameterError):
            two_fa.new_app(None)

    def test_update_app(self, two_fa, session):
        two_fa.update_app("app-1", {"enabled": False})

        args, kwargs = session.request.call_args
        assert args == ("PUT", f"{BASE}/applications/app-1")
        assert kwargs["json"] == {"enabled": False}

    def test_update_app_requires_params(self, two_fa):
        with pytest.raises(MissingParameterError) as exc_info:
            two_fa.update_app("app-1", {})
        assert exc_info.value.field == "params"

    def test_version_override(self, two_fa, session):
        two_fa.get_apps(version=1)
        assert session.request.call_args[0][1] == "https://api.infobip.com/2fa/1/applications"
        assert two_fa.version == 2

    def test_not_found(self, two_fa, session):
        body = {"requestError": {"serviceException": {"messageId": "NOT_FOUND", "text": "Application not found"}}}
        session.request.return_value = build_response(404, body)

        with pytest.raises(NotFoundError) as exc_info:
            two_fa.get_app("missing")

        assert exc_info.value.payload == body


class TestTwoFAMessageTemplates:
    """Test message template endpoints."""

    @pytest.fixture
    def two_fa(self, auth, session):
        two_fa = TwoFA()
        two_fa.authorize(auth, session=session)
        return two_fa

    def test_get_message_templates(self, two_fa, session):
        two_fa.get_message_templates("app-1")
        assert session.request.call_args[0] == ("GET", f"{BASE}/applications/app-1/messages")

    def test_get_message_template(self, two_fa, session):
        two_fa.get_message_template("app-1", "msg-1")
        assert session.request.call_args[0] == ("GET", f"{BASE}/applications/app-1/messages/msg-1")

    def test_new_message_template(self, two_fa, session):
        params = {"pinType": "NUMERIC", "messageText": "Your pin is {{pin}}", "pinLength": 4}
        two_fa.new_message_template("app-1", params)

        args, kwargs = session.request.call_args
        assert args == ("POST", f"{BASE}/applications/app-1/messages")
        assert kwargs["json"] == params

    def test_update_message_template(self, two_fa, session):
        two_fa.update_message_template("app-1", "msg-1", {"pinLength": 6})
        assert session.request.call_args[0] == ("PUT", f"{BASE}/applications/app-1/messages/msg-1")

    def test_template_requires_message_id(self, two_fa):
        with pytest.raises(MissingParameterError) as exc_info:
            two_fa.get_message_template("app-1", "")
        assert exc_info.value.field == "message_id"


class TestTwoFAPins:
    """Test the pin send / resend / verify flow."""

    @pytest.fixture
    def two_fa(self, auth, session):
        two_fa = TwoFA()
        two_fa.authorize(auth, session=session)
        return two_fa

    def test_send_pin(self, two_fa, session):
        session.request.return_value = build_response(200, {"pinId": "pin-1", "smsStatus": "MESSAGE_SENT"})
        params = {"applicationId": "app-1", "messageId": "msg-1", "to": "41793026727"}

        assert two_fa.send_pin(params)["pinId"] == "pin-1"

        args, kwargs = session.request.call_args
        assert args == ("POST", f"{BASE}/pin")
        assert kwargs["json"] == params
        assert kwargs["params"] is None

    def test_send_pin_with_number_lookup(self, two_fa, session):
        two_fa.send_pin({"to": "41793026727"}, nc_needed=True)
        assert session.request.call_args[1]["params"] == {"ncNeeded": "true"}

    def test_resend_pin(self, two_fa, session):
        two_fa.resend_pin("pin-1")

        args, kwargs = session.request.call_args
        assert args == ("POST", f"{BASE}/pin/pin-1/resend")
        assert "json" not in kwargs

    def test_verify_pin(self, two_fa, session):
        session.request.return_value = build_response(200, {"pinId": "pin-1", "verified": True})

        assert two_fa.verify_pin("pin-1", "1234")["verified"] is True

        args, kwargs = session.request.call_args
        assert args == ("POST", f"{BASE}/pin/pin-1/verify")
        assert kwargs["json"] == {"pin": "1234"}

    def test_verify_pin_requires_pin(self, two_fa):
        with pytest.raises(MissingParameterError) as exc_info:
            two_fa.verify_pin("pin-1", "")
        assert exc_info.value.field == "pin"
