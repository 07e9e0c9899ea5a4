# admin_console/sessions.py

"""
ADMIN SESSION CODEC

Stateless token stored in the `session` cookie:
    signing.dumps({"sub": <identity>, "exp": <epoch seconds>}, salt=SALT)

Signed with SECRET_KEY through django.core.signing. There is no server-side
session row; logout just drops the cookie.

decode_session returns None for anything it cannot trust:
bad signature, bad encoding, missing/expired exp, empty sub.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone as dt_timezone

from django.conf import settings
from django.core import signing
from django.utils import timezone

logger = logging.getLogger(__name__)

SALT = "admin_console.session"


@dataclass(frozen=True)
class SessionClaims:
    identity: str
    expires_at: datetime


def _ttl():
    return settings.ADMIN_SESSION_TTL


def encode_session(identity: str, *, expires_at: datetime | None = None) -> str:
    expires_at = expires_at or (timezone.now() + _ttl())
    payload = {"sub": identity, "exp": int(expires_at.timestamp())}
    return signing.dumps(payload, salt=SALT)


def decode_session(token, *, now: datetime | None = None) -> SessionClaims | None:
    if not token:
        return None

    try:
        payload = signing.loads(str(token), salt=SALT)
    except signing.BadSignature:
        logger.info("Rejected admin session token")
        return None

    if not isinstance(payload, dict):
        return None

    identity = payload.get("sub")
    exp = payload.get("exp")
    if not isinstance(identity, str) or not identity.strip():
        return None
    if not isinstance(exp, (int, float)):
        return None

    now = now or timezone.now()
    if now.timestamp() >= exp:
        return None

    return SessionClaims(
        identity=identity,
        expires_at=datetime.fromtimestamp(exp, tz=dt_timezone.utc),
    )


def session_from_request(request) -> SessionClaims | None:
    return decode_session(request.COOKIES.get(settings.ADMIN_SESSION_COOKIE_NAME))


def start_session(response, identity: str) -> SessionClaims:
    """Issue a fresh token and set it as an HttpOnly cookie on response."""
    expires_at = timezone.now() + _ttl()
    response.set_cookie(
        settings.ADMIN_SESSION_COOKIE_NAME,
        encode_session(identity, expires_at=expires_at),
        max_age=int(_ttl().total_seconds()),
        path="/",
        secure=settings.ADMIN_SESSION_COOKIE_SECURE,
        httponly=True,
        samesite="Lax",
    )
    return SessionClaims(identity=identity, expires_at=expires_at)


def end_session(response) -> None:
    response.delete_cookie(
        settings.ADMIN_SESSION_COOKIE_NAME, path="/", samesite="Lax"
    )
