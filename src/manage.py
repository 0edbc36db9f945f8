#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import re
import sys


def main():
    """Run administrative tasks."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'ts.settings.development')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    set_runserver_defaults_if_needed()
    execute_from_command_line( sys.argv )


def set_runserver_defaults_if_needed():
    """
    Default the runserver port from DJANGO_SERVER_PORT when the user did
    not give an address on the command line.
    """
    if len( sys.argv ) < 2 or sys.argv[1] != 'runserver':
        return

    default_port = os.environ.get( 'DJANGO_SERVER_PORT' )
    if not default_port:
        return

    for arg in sys.argv[2:]:
        if arg.startswith( '--' ):
            continue
        # Explicit hostname without a port gets our port appended.
        if not re.fullmatch( r'\d+', arg ) and ':' not in arg:
            sys.argv[sys.argv.index( arg )] = f'{arg}:{default_port}'
        return

    sys.argv.append( f'localhost:{default_port}' )
    return


if __name__ == '__main__':
    main()
