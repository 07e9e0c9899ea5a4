# admin_console/middleware.py

"""
ADMIN AUTH GATE

For every path under /admin:
- no valid session, not the login page -> 302 /admin/login/
- valid session, on the login page     -> 302 /admin/dashboard/
- otherwise                            -> pass through

The decoded claims are exposed as request.admin_session (or None).
"""

from __future__ import annotations

from django.shortcuts import redirect

from admin_console.sessions import session_from_request

ADMIN_PREFIX = "/admin"
LOGIN_PATH = "/admin/login"
LOGIN_URL = "/admin/login/"
DASHBOARD_URL = "/admin/dashboard/"


def _is_admin_path(path: str) -> bool:
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + "/")


class AdminAuthGateMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path.rstrip("/") or "/"

        if not _is_admin_path(path):
            return self.get_response(request)

        claims = session_from_request(request)
        request.admin_session = claims

        if path == LOGIN_PATH:
            if claims is not None:
                return redirect(DASHBOARD_URL)
        elif claims is None:
            return redirect(LOGIN_URL)

        return self.get_response(request)
