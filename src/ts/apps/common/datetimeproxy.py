# -*- coding: utf-8 -*-
"""
All code that needs the current date or time goes through this module so
that tests can simulate a different wall clock (e.g., to push an invite
link past its expiration) without patching.
"""
import datetime
import logging

import pytz
from django.utils import timezone

logger = logging.getLogger(__name__)

DEFAULT_TIME_ZONE_NAME = 'America/Chicago'

_time_delta = datetime.timedelta()


def now( tzname = None ):
    """
    Wraps Django's timezone.now() to return a timezone aware
    datetime object.
    """
    # This assumes the Django system time is in UTC !!!
    utcnow = timezone.now() + _time_delta
    if tzname is None:
        return utcnow

    try:
        to_zone = pytz.timezone( tzname )
    except pytz.exceptions.UnknownTimeZoneError:
        logger.warning( "Unrecognized time zone '%s'", tzname )
        to_zone = pytz.timezone( DEFAULT_TIME_ZONE_NAME )

    return utcnow.astimezone(to_zone)


def set( force_datetime ):
    """
    Sets the current date/time to a specific time.
    """
    global _time_delta
    _time_delta = force_datetime - timezone.now()
    return


def reset():
    global _time_delta
    _time_delta = datetime.timedelta()
    return


def increment( days=0, seconds=0, microseconds=0,
               milliseconds=0, minutes=0, hours=0, weeks=0 ):
    """
    Increment the current time by the specified amount.
    """
    global _time_delta
    new_time_delta = datetime.timedelta( days, seconds, microseconds,
                                         milliseconds, minutes, hours, weeks )
    _time_delta = _time_delta + new_time_delta
    return
