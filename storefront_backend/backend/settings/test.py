# backend/settings/test.py
"""
PATH: backend/settings/test.py

TEST SETTINGS

- Deterministic admin + PayHere credentials (system checks stay green)
- In-memory SQLite
- Dummy cache so scoped throttles never trip between test cases
- SMS disabled unless a test patches the transport
"""

from __future__ import annotations

from datetime import timedelta

from .base import *  # noqa: F403
from .base import PAYMENTS, REST_FRAMEWORK  # explicit for Ruff (F405)

DEBUG = False
SECRET_KEY = "test-secret-key-not-for-production"
ALLOWED_HOSTS = ["testserver", "localhost"]
TIME_ZONE = "Asia/Colombo"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {"BACKEND": "django.core.cache.backends.dummy.DummyCache"},
}

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-horse"
ADMIN_SESSION_TTL = timedelta(days=7)
ADMIN_SESSION_COOKIE_SECURE = False

PUBLIC_BASE_URL = "https://shop.example.lk"

PAYMENTS = {
    **PAYMENTS,
    "PAYHERE": {
        "MERCHANT_ID": "1211149",
        "MERCHANT_SECRET": "test-merchant-secret",
        "SANDBOX": True,
    },
}

NOTIFY = {
    "API_KEY": "",
    "USER_ID": "",
    "SENDER_ID": "NotifyDEMO",
    "ADMIN_PHONE": "",
}

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_CLASSES": (),
}

SENTRY_DSN = ""
