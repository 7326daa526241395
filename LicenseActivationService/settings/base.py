"""
Base Django settings for LicenseActivationService.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "SECRET_KEY", "django-insecure-5v#p0d!x2l8m@q9w^r7t$y3u&i1o(a6s)k4j*h+g=f-e_c"
)

ALLOWED_HOSTS = ["*"]

# Application definition
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Third party
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "LicenseActivationService.apps.LicenseActivationServiceConfig",
    "core",
    "licenses",
    "activations",
    "credentials",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Custom middleware
    "core.middleware.observability.ObservabilityMiddleware",
    "core.middleware.metrics.MetricsMiddleware",
    "core.middleware.rate_limit.ActivationRateLimitMiddleware",
    "core.middleware.auth.LicenseTokenAuthenticationMiddleware",
]

ROOT_URLCONF = "LicenseActivationService.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "LicenseActivationService.wsgi.application"
ASGI_APPLICATION = "LicenseActivationService.asgi.application"

# Database
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.environ.get("DB_NAME", "license_activation"),
        "USER": os.environ.get("DB_USER", "postgres"),
        "PASSWORD": os.environ.get("DB_PASSWORD", "postgres"),
        "HOST": os.environ.get("DB_HOST", "localhost"),
        "PORT": os.environ.get("DB_PORT", "5432"),
        "OPTIONS": {
            "connect_timeout": 10,
        },
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "License Activation Service API",
    "DESCRIPTION": (
        "Issues and validates software licenses. Clients activate a license key "
        "for a domain and receive a signed token accepted by protected endpoints."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SCHEMA_PATH_PREFIX": "/api/v1",
    "TAGS": [
        {"name": "License API", "description": "License activation"},
        {"name": "Data API", "description": "Token-protected endpoints"},
    ],
}

# Cache (rate limit counters)
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": os.environ.get("REDIS_URL", "redis://127.0.0.1:6379/1"),
        "OPTIONS": {
            "socket_connect_timeout": 5,
            "socket_timeout": 5,
        },
    }
}

# License tokens
# Loaded once at startup; never logged or returned to clients.
LICENSE_TOKEN_SECRET = os.environ.get(
    "JWT_SECRET", "dev-license-token-secret-change-me-0123456789abcdef"
)
LICENSE_TOKEN_ALGORITHM = "HS256"

# Paths guarded by the license token access gate
LICENSE_PROTECTED_PATH_PREFIXES = ["/api/v1/data/"]

# Activation rate limiting (per client address)
ACTIVATION_RATE_LIMITED_PATHS = ["/api/v1/licenses/validate"]
ACTIVATION_RATE_LIMIT = int(os.environ.get("ACTIVATION_RATE_LIMIT", "30"))
ACTIVATION_RATE_LIMIT_WINDOW = int(os.environ.get("ACTIVATION_RATE_LIMIT_WINDOW", "60"))
# Peers allowed to set X-Forwarded-For (e.g. the load balancer), comma separated
ACTIVATION_RATE_LIMIT_TRUSTED_PROXIES = [
    proxy.strip()
    for proxy in os.environ.get("ACTIVATION_RATE_LIMIT_TRUSTED_PROXIES", "").split(",")
    if proxy.strip()
]

# Observability
LOGGING = get_logging_config(ENVIRONMENT)
