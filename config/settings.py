"""
Food Ledger – Django Settings (Infrastructure Only)
=====================================================
Django serves as the framework container: ORM for the world-state
table, HTTP adapter for the query/submit gateway, logging config.
The contract does not depend on Django settings.

Environment overrides:
    FOODLEDGER_SECRET_KEY
    FOODLEDGER_DEBUG                 "1"/"true" enables debug
    FOODLEDGER_DB_PATH               SQLite file (default db.sqlite3)
    FOODLEDGER_WORLD_STATE_BACKEND   "memory" (default) | "orm"
    FOODLEDGER_SEED_ON_START         "1"/"true" submits InitLedger once
    FOODLEDGER_LOG_LEVEL             default INFO
"""

import os
from pathlib import Path


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "FOODLEDGER_SECRET_KEY",
    "foodledger-dev-key-replace-before-deployment",
)

DEBUG = _env_flag("FOODLEDGER_DEBUG", default=True)

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "foodledger.world_state",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL ───────────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("FOODLEDGER_DB_PATH", BASE_DIR / "db.sqlite3"),
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Ledger ────────────────────────────────────────────────────
FOODLEDGER_WORLD_STATE_BACKEND = os.environ.get(
    "FOODLEDGER_WORLD_STATE_BACKEND", "memory"
)
FOODLEDGER_SEED_ON_START = _env_flag("FOODLEDGER_SEED_ON_START")

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "foodledger": {
            "handlers": ["console"],
            "level": os.environ.get("FOODLEDGER_LOG_LEVEL", "INFO").upper(),
            "propagate": True,
        },
    },
}
