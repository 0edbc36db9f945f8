import logging
from datetime import datetime, timedelta

import pytz
from django.test import SimpleTestCase

from ts.apps.common import datetimeproxy

logging.disable(logging.CRITICAL)


class DatetimeProxyTestCase(SimpleTestCase):

    def tearDown(self):
        datetimeproxy.reset()
        return

    def test_now_is_aware_utc(self):
        now = datetimeproxy.now()
        self.assertIsNotNone( now.tzinfo )
        self.assertEqual( timedelta(0), now.utcoffset() )
        return

    def test_set_and_reset(self):
        target = datetime( 2030, 6, 1, 12, 0, tzinfo = pytz.utc )
        datetimeproxy.set( target )
        self.assertLess( abs( datetimeproxy.now() - target ), timedelta( seconds = 5 ))

        datetimeproxy.reset()
        self.assertLess( datetimeproxy.now().year, 2030 )
        return

    def test_increment(self):
        before = datetimeproxy.now()
        datetimeproxy.increment( days = 2 )
        self.assertGreaterEqual( datetimeproxy.now() - before, timedelta( days = 2 ))
        return

    def test_time_zone_conversion(self):
        tokyo_now = datetimeproxy.now( 'Asia/Tokyo' )
        self.assertEqual( timedelta( hours = 9 ), tokyo_now.utcoffset() )

        fallback_now = datetimeproxy.now( 'Not/AZone' )
        self.assertEqual( pytz.timezone( datetimeproxy.DEFAULT_TIME_ZONE_NAME ).zone,
                          fallback_now.tzinfo.zone )
        return
