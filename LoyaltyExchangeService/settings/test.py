"""
Test settings for LoyaltyExchangeService.
"""
from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

# Use in-memory SQLite for tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

CALLER_AUTH = {
    "SIGNING_SECRET": "test-caller-signing-secret",
    "TIMESTAMP_TOLERANCE_SECONDS": 300,
}

OBSERVABILITY_ENABLED = False

# Disable logging during tests
LOGGING_CONFIG = None
