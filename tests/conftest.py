"""
Shared fixtures for the infobip_methods tests.
"""

import json
import sys
import os
from unittest.mock import Mock

import pytest
import requests

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from infobip_methods.auth import Auth


def build_response(status_code=200, body=None, content_type="application/json", headers=None):
    """Build a real requests.Response with the given body."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        response._content = b""
    elif isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = body
    response.headers["Content-Type"] = content_type
    for name, value in (headers or {}).items():
        response.headers[name] = value
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def auth():
    return Auth("App", "pk_abc")


@pytest.fixture
def session():
    """Transport double with a real header dict."""
    mock_session = Mock()
    mock_session.headers = {}
    mock_session.request.return_value = build_response(200, {"ok": True})
    return mock_session
