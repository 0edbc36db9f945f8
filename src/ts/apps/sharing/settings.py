"""
Sharing configuration read from Django settings, with defaults so the app
works without any explicit configuration.
"""
from django.conf import settings

DEFAULT_LINK_TOKEN_LENGTH = 8
DEFAULT_LINK_TOKEN_ALPHABET = 'ABCDEFGHJKLMNPQRSTUVWXYZ23456789'
DEFAULT_LINK_TOKEN_MAX_ATTEMPTS = 10
DEFAULT_LINK_URL_TEMPLATE = '/invite/{token}'


def link_token_length() -> int:
    return int( getattr( settings, 'SHARING_LINK_TOKEN_LENGTH', DEFAULT_LINK_TOKEN_LENGTH ))


def link_token_alphabet() -> str:
    return getattr( settings, 'SHARING_LINK_TOKEN_ALPHABET', DEFAULT_LINK_TOKEN_ALPHABET )


def link_token_max_attempts() -> int:
    return int( getattr( settings, 'SHARING_LINK_TOKEN_MAX_ATTEMPTS', DEFAULT_LINK_TOKEN_MAX_ATTEMPTS ))


def link_url_template() -> str:
    return getattr( settings, 'SHARING_LINK_URL_TEMPLATE', DEFAULT_LINK_URL_TEMPLATE ) or DEFAULT_LINK_URL_TEMPLATE
