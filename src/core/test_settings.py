"""Settings for the test suite: SQLite, throwaway uploads, cheap bcrypt."""

import tempfile
from pathlib import Path

from .settings import *  # noqa: F401,F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

MEDIA_ROOT = Path(tempfile.mkdtemp(prefix="article-uploads-"))
PUBLIC_BASE_URL = "http://testserver"
BCRYPT_ROUNDS = 4
REJECTED_ARTICLES_PUBLIC = False
DEBUG_AUTH_ERRORS = False
LOG_LEVEL = "WARNING"
LOGGING["root"]["level"] = LOG_LEVEL  # noqa: F405
