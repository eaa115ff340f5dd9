"""Django settings for the ticket ledger service.

Environment Variables:
    LEDGER_SECRET_KEY: Django secret key - default: insecure development key
    LEDGER_DEBUG: Enable debug mode (true, false) - default: false
    LEDGER_ALLOWED_HOSTS: Comma-separated host names - default: localhost
    LEDGER_DB_PATH: SQLite database file - default: db.sqlite3 beside this project
    LEDGER_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    LEDGER_LOG_FORMAT: Log format (json, text) - default: json
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("LEDGER_SECRET_KEY", "django-insecure-ledger-development-key")
DEBUG = os.getenv("LEDGER_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("LEDGER_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "rest_framework",
    "ledger.apps.LedgerConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
]

ROOT_URLCONF = "config.urls"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("LEDGER_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.BasicAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
}

LOG_LEVEL = os.getenv("LEDGER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LEDGER_LOG_FORMAT", "json").lower()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "fmt": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "rename_fields": {
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        },
        "text": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "formatter": "text" if LOG_FORMAT == "text" else "json",
        },
    },
    "loggers": {
        "ledger": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
        },
    },
}
