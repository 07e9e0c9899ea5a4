"""
PATH: backend/settings/base.py

BASE SETTINGS (shared by dev + prod + test)

Covers:
- Admin console credentials + session cookie lifetime
- PayHere merchant config (sandbox vs live checkout)
- Notify.lk SMS credentials
- Throttling for public write / webhook endpoints
- Sentry (optional): error visibility in production
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import environ
from corsheaders.defaults import default_headers, default_methods

# -----------------------------------------
# BASE DIRECTORY
# -----------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# -----------------------------------------
# ENV (django-environ)
# -----------------------------------------
env = environ.Env(
    DEBUG=(bool, True),
    SECRET_KEY=(str, ""),
    TIME_ZONE=(str, "Asia/Colombo"),
    ALLOWED_HOSTS=(list, ["localhost", "127.0.0.1"]),
    CORS_ALLOWED_ORIGINS=(list, ["http://localhost:3000"]),
    CSRF_TRUSTED_ORIGINS=(list, ["http://localhost:3000"]),
    DATABASE_URL=(str, f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
    # Admin console (single fixed principal)
    ADMIN_USERNAME=(str, ""),
    ADMIN_PASSWORD=(str, ""),
    ADMIN_SESSION_TTL_DAYS=(int, 7),
    # PayHere
    PAYHERE_MERCHANT_ID=(str, ""),
    PAYHERE_MERCHANT_SECRET=(str, ""),
    PAYHERE_SANDBOX=(bool, True),
    PUBLIC_BASE_URL=(str, ""),
    NEXT_PUBLIC_BASE_URL=(str, "http://localhost:3000"),
    # Notify.lk SMS
    NOTIFY_API_KEY=(str, ""),
    NOTIFY_USER_ID=(str, ""),
    NOTIFY_SENDER_ID=(str, "NotifyDEMO"),
    NOTIFY_ADMIN_PHONE=(str, ""),
    # Throttling
    THROTTLE_ANON_RATE=(str, "120/min"),
    THROTTLE_USER_RATE=(str, "600/min"),
    THROTTLE_PUBLIC_WRITE_RATE=(str, "20/min"),
    THROTTLE_PUBLIC_CATALOG_RATE=(str, "240/min"),
    THROTTLE_WEBHOOK_RATE=(str, "600/min"),
    # Sentry (optional; enable by setting SENTRY_DSN)
    SENTRY_DSN=(str, ""),
    SENTRY_ENVIRONMENT=(str, "development"),
    SENTRY_TRACES_SAMPLE_RATE=(float, 0.0),
    SENTRY_SEND_PII=(bool, False),
    LOG_LEVEL=(str, "INFO"),
)

# -----------------------------------------
# LOAD .env
# -----------------------------------------
env_file_1 = BASE_DIR / ".env"
env_file_2 = BASE_DIR.parent / ".env"

if env_file_1.exists():
    env.read_env(str(env_file_1))
elif env_file_2.exists():
    env.read_env(str(env_file_2))

# -----------------------------------------
# CORE SECURITY
# -----------------------------------------
SECRET_KEY = (env("SECRET_KEY") or "dev-insecure-change-me").strip()
DEBUG = env.bool("DEBUG")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS")

# -----------------------------------------
# I18N / TZ
# -----------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = (env("TIME_ZONE") or "UTC").strip()
USE_I18N = True
USE_TZ = True

# -----------------------------------------
# INSTALLED APPS
# -----------------------------------------
# The admin console has no user table; contrib.auth stays for DRF imports.
INSTALLED_APPS = [
    "corsheaders",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "django_filters",
    "catalog.apps.CatalogConfig",
    "orders.apps.OrdersConfig",
    "payments.apps.PaymentsConfig",
    "notifications.apps.NotificationsConfig",
    "admin_console.apps.AdminConsoleConfig",
]

# -----------------------------------------
# MIDDLEWARE
# -----------------------------------------
MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "admin_console.middleware.AdminAuthGateMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "backend.urls"
WSGI_APPLICATION = "backend.wsgi.application"
APPEND_SLASH = True

# -----------------------------------------
# TEMPLATES (admin console pages)
# -----------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [str(BASE_DIR / "templates")],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    }
]

# -----------------------------------------
# REST FRAMEWORK
# -----------------------------------------
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "admin_console.authentication.AdminSessionAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": ("admin_console.permissions.IsAdminSession",),
    "DEFAULT_FILTER_BACKENDS": ("django_filters.rest_framework.DjangoFilterBackend",),
    "UNAUTHENTICATED_USER": None,
    "COERCE_DECIMAL_TO_STRING": False,
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_THROTTLE_CLASSES": ("rest_framework.throttling.AnonRateThrottle",),
    "DEFAULT_THROTTLE_RATES": {
        "anon": env("THROTTLE_ANON_RATE"),
        "user": env("THROTTLE_USER_RATE"),
        "public_write": env("THROTTLE_PUBLIC_WRITE_RATE"),
        "public_catalog": env("THROTTLE_PUBLIC_CATALOG_RATE"),
        "webhook": env("THROTTLE_WEBHOOK_RATE"),
    },
}

# -----------------------------------------
# DATABASE
# -----------------------------------------
DATABASES = {
    "default": env.db("DATABASE_URL"),
}

# -----------------------------------------
# ADMIN CONSOLE
# -----------------------------------------
ADMIN_USERNAME = (env("ADMIN_USERNAME") or "").strip()
ADMIN_PASSWORD = (env("ADMIN_PASSWORD") or "").strip()
ADMIN_SESSION_COOKIE_NAME = "session"
ADMIN_SESSION_TTL = timedelta(days=env.int("ADMIN_SESSION_TTL_DAYS"))
ADMIN_SESSION_COOKIE_SECURE = not DEBUG

# -----------------------------------------
# PUBLIC BASE URL (PayHere callback targets)
# -----------------------------------------
PUBLIC_BASE_URL = (
    env("PUBLIC_BASE_URL") or env("NEXT_PUBLIC_BASE_URL") or ""
).strip().rstrip("/")

# -----------------------------------------
# PAYMENTS
# -----------------------------------------
PAYMENTS = {
    "PAYHERE": {
        "MERCHANT_ID": (env("PAYHERE_MERCHANT_ID") or "").strip(),
        "MERCHANT_SECRET": (env("PAYHERE_MERCHANT_SECRET") or "").strip(),
        "SANDBOX": env.bool("PAYHERE_SANDBOX"),
    }
}

# -----------------------------------------
# SMS (Notify.lk)
# -----------------------------------------
NOTIFY = {
    "API_KEY": (env("NOTIFY_API_KEY") or "").strip(),
    "USER_ID": (env("NOTIFY_USER_ID") or "").strip(),
    "SENDER_ID": (env("NOTIFY_SENDER_ID") or "").strip(),
    "ADMIN_PHONE": (env("NOTIFY_ADMIN_PHONE") or "").strip(),
}

# -----------------------------------------
# LOGGING
# -----------------------------------------
LOG_LEVEL = (env("LOG_LEVEL") or "INFO").strip().upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        app: {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False}
        for app in ("catalog", "orders", "payments", "notifications", "admin_console")
    },
}

# -----------------------------------------
# SENTRY (optional)
# -----------------------------------------
SENTRY_DSN = (env("SENTRY_DSN") or "").strip()
SENTRY_ENVIRONMENT = (env("SENTRY_ENVIRONMENT") or "development").strip()
SENTRY_TRACES_SAMPLE_RATE = float(env("SENTRY_TRACES_SAMPLE_RATE"))
SENTRY_SEND_PII = env.bool("SENTRY_SEND_PII")

if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=SENTRY_ENVIRONMENT,
        integrations=[DjangoIntegration()],
        traces_sample_rate=SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=SENTRY_SEND_PII,
    )

# -----------------------------------------
# CORS / CSRF
# -----------------------------------------
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS")
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_METHODS = list(default_methods)
CORS_ALLOW_HEADERS = list(default_headers)

CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS")

# -----------------------------------------
# STATIC FILES
# -----------------------------------------
STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -----------------------------------------
# SWAGGER
# -----------------------------------------
SPECTACULAR_SETTINGS = {
    "TITLE": "Furniture Storefront API",
    "DESCRIPTION": "Catalog, orders, PayHere checkout and admin dashboard API",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}
