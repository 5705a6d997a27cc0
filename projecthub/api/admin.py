"""Password-gated admin page."""
from __future__ import annotations
import base64
import binascii
import secrets
from typing import Optional
from fastapi import Request
from fastapi.responses import HTMLResponse, Response
from fastapi.security.utils import get_authorization_scheme_param
from projecthub.api._state import get_settings

ADMIN_PATH = "/admin"
ADMIN_USERNAME = "admin"
WELCOME_HTML = "<html><h1> Welcome to the admin dashboard </h1></html>"


def basic_credentials(authorization: Optional[str]) -> Optional[tuple[str, str]]:
    """Decode a Basic Authorization header into (username, password).

    Credentials are UTF-8. Missing or undecodable headers give None.
    """
    scheme, param = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "basic":
        return None
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


def _matches(given: str, expected: str) -> bool:
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def is_authorized(creds: Optional[tuple[str, str]], password: str) -> bool:
    if creds is None:
        return False
    username, given = creds
    user_ok = _matches(username, ADMIN_USERNAME)
    pass_ok = _matches(given, password)
    return user_ok and pass_ok


def admin_portal(request: Request) -> Response:
    """Static admin dashboard behind HTTP Basic auth, for any method."""
    creds = basic_credentials(request.headers.get("authorization"))
    if not is_authorized(creds, get_settings(request).admin_password):
        return Response(status_code=401)
    return HTMLResponse(WELCOME_HTML)
