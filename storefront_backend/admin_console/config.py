# admin_console/config.py

from __future__ import annotations

import hmac
from dataclasses import dataclass

from django.conf import settings

ADMIN_IDENTITY = "admin"


@dataclass(frozen=True)
class AdminCredentials:
    """The single fixed admin principal (ADMIN_USERNAME / ADMIN_PASSWORD)."""

    username: str
    password: str

    @classmethod
    def from_settings(cls) -> "AdminCredentials":
        return cls(
            username=str(getattr(settings, "ADMIN_USERNAME", "") or "").strip(),
            password=str(getattr(settings, "ADMIN_PASSWORD", "") or "").strip(),
        )

    def check(self, username, password) -> bool:
        """Trimmed, constant-time compare. Unconfigured credentials never match."""
        if not self.username or not self.password:
            return False

        user_ok = hmac.compare_digest(
            str(username or "").strip().encode("utf-8"),
            self.username.encode("utf-8"),
        )
        pass_ok = hmac.compare_digest(
            str(password or "").strip().encode("utf-8"),
            self.password.encode("utf-8"),
        )
        return user_ok and pass_ok
