import logging

from django.test import TestCase

from ts.apps.itineraries.tests.synthetic_data import ItinerarySyntheticData
from ts.apps.sharing.catalog import TripCatalog
from ts.apps.trips.tests.synthetic_data import TripSyntheticData

from .synthetic_data import SharingSyntheticData

logging.disable(logging.CRITICAL)


class TripCatalogTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.owner = TripSyntheticData.create_test_user( email = 'owner@test.com' )
        cls.data = SharingSyntheticData.create_two_stop_trip( cls.owner, with_trip_wide_item = True )
        return

    def test_for_trip(self):
        catalog = TripCatalog.for_trip( self.data.trip )

        self.assertEqual( [ 'Paris', 'Tokyo' ], [ x.title for x in catalog.locations ])
        self.assertEqual( 4, catalog.item_count )
        self.assertEqual( frozenset({ self.data.hotel.id, self.data.museum.id }),
                          catalog.item_ids_for_location( self.data.paris.id ))
        self.assertEqual( frozenset({ self.data.sushi.id }),
                          catalog.item_ids_for_location( self.data.tokyo.id ))
        self.assertEqual( frozenset({ self.data.insurance.id }), catalog.trip_wide_item_ids )
        return

    def test_excludes_other_trips(self):
        other_trip = TripSyntheticData.create_test_trip( user = self.owner, title = 'Other' )
        ItinerarySyntheticData.create_test_item( other_trip, title = 'Elsewhere' )

        catalog = TripCatalog.for_trip( self.data.trip )
        self.assertNotIn( 'Elsewhere', [ x.title for x in catalog.items ])
        return

    def test_uuid_lookups(self):
        catalog = TripCatalog.for_trip( self.data.trip )
        self.assertEqual( ( self.data.tokyo.id, ),
                          catalog.location_ids_for_uuids( [ self.data.tokyo.uuid ] ))
        self.assertEqual( ( self.data.sushi.id, self.data.hotel.id ),
                          catalog.item_ids_for_uuids( [ self.data.sushi.uuid, self.data.hotel.uuid ] ))
        with self.assertRaises( KeyError ):
            catalog.location_ids_for_uuids( [ self.data.sushi.uuid ] )
        return
