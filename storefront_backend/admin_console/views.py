# admin_console/views.py

"""
ADMIN CONSOLE

Web (behind AdminAuthGateMiddleware):
    GET  /admin/             -> redirect to dashboard
    GET  /admin/login/       -> login form
    POST /admin/login/       -> set session cookie, redirect to dashboard
    POST /admin/logout/      -> drop session cookie, redirect to login
    GET  /admin/dashboard/   -> dashboard page

API:
    GET  /api/admin/dashboard (admin session) -> dashboard JSON
"""

from __future__ import annotations

import logging

from django.shortcuts import redirect, render
from django.views import View
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.response import Response

from admin_console.config import ADMIN_IDENTITY
from admin_console.forms import AdminLoginForm
from admin_console.middleware import DASHBOARD_URL, LOGIN_URL
from admin_console.services.dashboard import build_dashboard
from admin_console.sessions import end_session, start_session
from common.views import ServiceAPIView

logger = logging.getLogger(__name__)


class AdminIndexView(View):
    def get(self, request, *args, **kwargs):
        return redirect(DASHBOARD_URL)


class AdminLoginView(View):
    template_name = "admin_console/login.html"

    def get(self, request, *args, **kwargs):
        return render(request, self.template_name, {"form": AdminLoginForm()})

    def post(self, request, *args, **kwargs):
        form = AdminLoginForm(request.POST)
        if not form.is_valid():
            logger.warning(
                "Admin login failed",
                extra={"remote_addr": request.META.get("REMOTE_ADDR")},
            )
            return render(request, self.template_name, {"form": form}, status=200)

        response = redirect(DASHBOARD_URL)
        claims = start_session(response, ADMIN_IDENTITY)
        logger.info(
            "Admin signed in",
            extra={"expires_at": claims.expires_at.isoformat()},
        )
        return response


class AdminLogoutView(View):
    http_method_names = ["post"]

    def post(self, request, *args, **kwargs):
        response = redirect(LOGIN_URL)
        end_session(response)
        return response


class AdminDashboardPageView(View):
    template_name = "admin_console/dashboard.html"

    def get(self, request, *args, **kwargs):
        return render(
            request,
            self.template_name,
            {"dashboard": build_dashboard(), "admin_session": request.admin_session},
        )


class AdminDashboardView(ServiceAPIView):
    """Default permission (IsAdminSession) applies."""

    generic_error_message = "Failed to build dashboard"

    @extend_schema(
        tags=["Admin"],
        responses={
            200: OpenApiResponse(description="Dashboard aggregates"),
            401: OpenApiResponse(description="Admin session required"),
        },
    )
    def get(self, request, *args, **kwargs):
        return Response(build_dashboard())
