"""Django settings shared by the resolution service and the intake front door."""
from __future__ import annotations

from pathlib import Path
import os

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

SERVICE_ROLE = env("SERVICE_ROLE", "resolution")
if SERVICE_ROLE not in ("resolution", "intake"):
    raise ImproperlyConfigured(f"SERVICE_ROLE must be 'resolution' or 'intake', got {SERVICE_ROLE!r}")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "backend.api",
    "backend.intake",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "backend.intake.urls" if SERVICE_ROLE == "intake" else "backend.urls"

WSGI_APPLICATION = "backend.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Nothing is persisted.
DATABASES: dict = {}

# Upstream providers (resolution service)
VIACEP_BASE_URL = env("VIACEP_BASE_URL", "https://viacep.com.br/ws")
WEATHER_API_BASE_URL = env("WEATHER_API_BASE_URL", "https://api.weatherapi.com/v1")
WEATHER_API_KEY = os.environ.get("WEATHER_API_KEY", "")
PROVIDER_TIMEOUT = float(os.environ.get("PROVIDER_TIMEOUT", "5"))
RESOLUTION_TIMEOUT = float(os.environ.get("RESOLUTION_TIMEOUT", "10"))

# Forwarding target (intake front door)
RESOLUTION_SERVICE_URL = env("RESOLUTION_SERVICE_URL", "http://localhost:8080")
FORWARD_TIMEOUT = float(os.environ.get("FORWARD_TIMEOUT", "10"))

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "backend.api.exceptions.exception_handler",
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": f"%(asctime)s [{SERVICE_ROLE}] %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True
