# -*- coding: utf-8 -*-
"""
CI/Testing settings - inherits from development with SQLite database.

Use this for fast test runs: DJANGO_SETTINGS_MODULE=ts.settings.ci
"""
import os

# CI runs need no real secrets; these only apply when not already set.
os.environ.setdefault( 'DJANGO_SECRET_KEY', 'ci-only-insecure-secret-key' )
os.environ.setdefault( 'TS_DB_PATH', '/tmp' )

from .development import *  # noqa: E402

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'ts.sqlite3' ),
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# Minimal logging for cleaner test output
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
