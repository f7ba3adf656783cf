"""
Utility helpers for Infobip REST Methods.
"""

from typing import Any, Dict, Optional

import requests


def normalize_base_url(url: str) -> str:
    """Normalize base URL to include https:// if missing."""
    if not url.startswith(('http://', 'https://')):
        url = f"https://{url}"
    return url.rstrip('/')


def decode_body(response: requests.Response) -> Any:
    """
    Decode a response body into the most useful Python value.

    Empty bodies decode to None. JSON bodies are parsed, anything else
    (XML included) is returned as text.
    """
    if not getattr(response, "content", None):
        return None

    content_type = (getattr(response, "headers", None) or {}).get("Content-Type", "")
    if "json" in content_type.lower():
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


def clean_query(params: Dict[str, Any]) -> Optional[Dict[str, str]]:
    """Drop empty query parameters and render booleans the way the API expects."""
    query = {}
    for name, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        query[name] = str(value)
    return query or None
