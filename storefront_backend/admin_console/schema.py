# admin_console/schema.py

from django.conf import settings
from drf_spectacular.extensions import OpenApiAuthenticationExtension


class AdminSessionScheme(OpenApiAuthenticationExtension):
    target_class = "admin_console.authentication.AdminSessionAuthentication"
    name = "adminSession"

    def get_security_definition(self, auto_schema):
        return {
            "type": "apiKey",
            "in": "cookie",
            "name": settings.ADMIN_SESSION_COOKIE_NAME,
        }
