from dataclasses import dataclass, field
import os
import re
from typing import List, Tuple
import urllib.parse

from django.core.exceptions import ImproperlyConfigured


@dataclass
class EnvironmentSettings:
    """
    Encapsulates the parsing of the environment variables that are needed.
    """

    # If the default value is "None" then the variable is required and its
    # absence will raise an ImproperlyConfigured error.  Optional
    # arguments should have a non-None value (empty string, zero, etc.)
    #
    DJANGO_SETTINGS_MODULE        : str           = None
    DJANGO_SERVER_PORT            : int           = 8000
    SECRET_KEY                    : str           = None
    SITE_DOMAIN                   : str           = 'localhost'
    SITE_NAME                     : str           = 'Trip Share'
    ALLOWED_HOSTS                 : Tuple[ str ]  = field( default_factory = tuple )
    CORS_ALLOWED_ORIGINS          : Tuple[ str ]  = field( default_factory = tuple )
    DATABASES_NAME_PATH           : str           = None
    SHARING_LINK_URL_TEMPLATE     : str           = ''

    @property
    def environment_name(self) -> str:
        if not self.DJANGO_SETTINGS_MODULE:
            return 'unknown'
        parts = self.DJANGO_SETTINGS_MODULE.split('.')
        if len(parts) > 1:
            return parts[-1]
        return 'unknown'

    @classmethod
    def get( cls ) -> 'EnvironmentSettings':
        env_settings = EnvironmentSettings()

        ###########
        # Core Django Settings

        env_settings.DJANGO_SETTINGS_MODULE = cls.get_env_variable(
            'DJANGO_SETTINGS_MODULE',
            env_settings.DJANGO_SETTINGS_MODULE,
        )
        try:
            env_settings.DJANGO_SERVER_PORT = int(
                cls.get_env_variable(
                    'DJANGO_SERVER_PORT',
                    env_settings.DJANGO_SERVER_PORT,
                )
            )
        except ( TypeError, ValueError ):
            pass
        env_settings.SECRET_KEY = cls.get_env_variable(
            'DJANGO_SECRET_KEY',
            env_settings.SECRET_KEY,
        )

        ###########
        # Database (SQLite, file-based)

        env_settings.DATABASES_NAME_PATH = cls.get_env_variable(
            'TS_DB_PATH',
            env_settings.DATABASES_NAME_PATH,
        )

        ###########
        # Sharing

        env_settings.SHARING_LINK_URL_TEMPLATE = cls.get_env_variable(
            'TS_SHARING_LINK_URL_TEMPLATE',
            env_settings.SHARING_LINK_URL_TEMPLATE,
        )

        ###########
        # Django strict host checking and CORS

        allowed_host_list = [
            '127.0.0.1',
            'localhost',
        ]
        cors_allowed_origins_list = [
            f'http://127.0.0.1:{env_settings.DJANGO_SERVER_PORT}',
            f'http://localhost:{env_settings.DJANGO_SERVER_PORT}',
        ]

        extra_host_urls_str = cls.get_env_variable( 'TS_EXTRA_HOST_URLS', '' )
        if extra_host_urls_str:
            host_url_tuple_list = cls.parse_url_list_str( extra_host_urls_str )

            # First extra host is taken as the SITE_DOMAIN.
            if host_url_tuple_list:
                env_settings.SITE_DOMAIN = host_url_tuple_list[0][0]

            for host, url in host_url_tuple_list:
                allowed_host_list.append( host )
                cors_allowed_origins_list.append( url )
                continue

        env_settings.ALLOWED_HOSTS += tuple( allowed_host_list )
        env_settings.CORS_ALLOWED_ORIGINS += tuple( cors_allowed_origins_list )
        return env_settings

    @classmethod
    def get_env_variable( cls, var_name, default = None ) -> str:
        try:
            return os.environ[var_name]
        except KeyError:
            if default is not None:
                return default
            error_msg = 'Set the %s environment variable' % var_name
            raise ImproperlyConfigured(error_msg)

    @classmethod
    def parse_url_list_str( cls, a_string : str ) -> List[ Tuple[ str, str ] ]:
        """
        Parses a whitespace or comma separated list of URLs into
        ( host, url ) tuples.  Entries without a scheme assume https.
        """
        result_list = list()
        for url_str in re.split( r'[\s,]+', a_string.strip() ):
            if not url_str:
                continue
            if '://' not in url_str:
                url_str = f'https://{url_str}'
            parsed_url = urllib.parse.urlparse( url_str )
            if not parsed_url.hostname:
                raise ImproperlyConfigured( f'Bad host url "{url_str}"' )
            url = f'{parsed_url.scheme}://{parsed_url.netloc}'
            result_list.append( ( parsed_url.hostname, url ) )
            continue
        return result_list
