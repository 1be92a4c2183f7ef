"""
Test settings for LicenseServer.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = False

# Fixed signing secret for tests only
JWT_SECRET = "test-only-jwt-signing-secret-not-for-production-use"

ALLOWED_HOSTS = ["testserver", "localhost"]

# Use PostgreSQL in CI (from DATABASE_URL), SQLite in-memory for local tests
DATABASE_URL = os.environ.get("DATABASE_URL")
if DATABASE_URL and DATABASE_URL.startswith("postgresql"):
    import urllib.parse

    parsed = urllib.parse.urlparse(DATABASE_URL)
    db_name = parsed.path[1:] if parsed.path.startswith("/") else parsed.path
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": db_name,
            "USER": parsed.username or "postgres",
            "PASSWORD": parsed.password or "",
            "HOST": parsed.hostname or "localhost",
            "PORT": parsed.port or 5432,
            "TEST": {
                "NAME": db_name + "_test",
            },
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }

# Apps without migrations get their tables created directly
MIGRATION_MODULES = {}

# Use in-memory cache for tests
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# Password hashers for faster tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

RATE_LIMIT_PER_MINUTE = 1000

# Disable logging during tests
LOGGING_CONFIG = None
