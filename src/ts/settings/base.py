# -*- coding: utf-8 -*-
"""
Django settings shared by all environments.  Environment-specific modules
(development, ci) import everything from here and override as needed.
"""
import os
from pathlib import Path

from ts.environment.server import EnvironmentSettings

ENV = EnvironmentSettings.get()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = ENV.SECRET_KEY

DEBUG = False

ALLOWED_HOSTS = list( ENV.ALLOWED_HOSTS )

SITE_NAME = ENV.SITE_NAME

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'rest_framework',

    'custom',
    'ts.apps.api',
    'ts.apps.trips',
    'ts.apps.members',
    'ts.apps.locations',
    'ts.apps.itineraries',
    'ts.apps.sharing',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'ts.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'ts.sqlite3' ),
    }
}

AUTH_USER_MODEL = 'custom.CustomUser'

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
]

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'EXCEPTION_HANDLER': 'ts.apps.api.exception_handler.exception_handler',
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

DATE_FORMAT = '%B %d, %Y'

STATIC_URL = 'static/'
STATIC_ROOT = '/tmp/ts/static'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ====================
# Sharing

# Invite link tokens: unambiguous uppercase alphabet (no 0/O, 1/I).
SHARING_LINK_TOKEN_LENGTH = 8
SHARING_LINK_TOKEN_ALPHABET = 'ABCDEFGHJKLMNPQRSTUVWXYZ23456789'
SHARING_LINK_TOKEN_MAX_ATTEMPTS = 10
SHARING_LINK_URL_TEMPLATE = ENV.SHARING_LINK_URL_TEMPLATE or '/invite/{token}'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {name} {message}',
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
        'ts': {
            'handlers': ['console'],
            'level': 'INFO',
        },
    },
}
