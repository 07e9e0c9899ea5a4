# admin_console/authentication.py

from __future__ import annotations

from dataclasses import dataclass

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, CSRFCheck

from admin_console.sessions import session_from_request


@dataclass(frozen=True)
class AdminPrincipal:
    """request.user for API calls carrying a valid admin session cookie."""

    identity: str

    is_authenticated = True
    is_anonymous = False

    @property
    def username(self) -> str:
        return self.identity


class AdminSessionAuthentication(BaseAuthentication):
    """
    Reads the same signed cookie as the /admin pages.
    No cookie / invalid cookie -> unauthenticated (permission decides).
    A valid cookie on an unsafe method also needs a CSRF token, the same
    way DRF's SessionAuthentication treats Django sessions.
    """

    def authenticate(self, request):
        claims = session_from_request(request._request)
        if claims is None:
            return None
        self.enforce_csrf(request)
        return AdminPrincipal(identity=claims.identity), claims

    def enforce_csrf(self, request):
        def dummy_get_response(request):  # pragma: no cover
            return None

        check = CSRFCheck(dummy_get_response)
        # populates request.META['CSRF_COOKIE'] for process_view
        check.process_request(request)
        reason = check.process_view(request, None, (), {})
        if reason:
            raise exceptions.PermissionDenied(f"CSRF Failed: {reason}")

    def authenticate_header(self, request):
        return 'Session realm="admin"'
