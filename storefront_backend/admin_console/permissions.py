# admin_console/permissions.py

from rest_framework.permissions import BasePermission

from admin_console.authentication import AdminPrincipal


class IsAdminSession(BasePermission):
    """Allows access only with a valid admin session cookie."""

    message = "Admin session required"

    def has_permission(self, request, view):
        return isinstance(request.user, AdminPrincipal)
