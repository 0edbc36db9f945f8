import logging

from django.test import TestCase

from ts.apps.itineraries.models import ItineraryItem
from ts.apps.itineraries.tests.synthetic_data import ItinerarySyntheticData
from ts.apps.locations.tests.synthetic_data import LocationSyntheticData
from ts.apps.members.models import ItineraryItemParticipant
from ts.apps.trips.enums import TripPermissionLevel
from ts.apps.trips.tests.synthetic_data import TripSyntheticData

logging.disable(logging.CRITICAL)


class ItineraryItemManagerTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.owner = TripSyntheticData.create_test_user( email = 'owner@test.com' )
        cls.viewer = TripSyntheticData.create_test_user( email = 'viewer@test.com' )
        cls.trip = TripSyntheticData.create_test_trip( user = cls.owner )
        TripSyntheticData.add_trip_member(
            trip = cls.trip,
            user = cls.viewer,
            permission_level = TripPermissionLevel.VIEWER,
        )
        cls.location = LocationSyntheticData.create_test_location( cls.trip, title = 'Rome' )
        cls.hotel = ItinerarySyntheticData.create_test_item( cls.trip, location = cls.location, title = 'Hotel' )
        cls.flight = ItinerarySyntheticData.create_test_item( cls.trip, title = 'Flight home' )
        return

    def test_for_location(self):
        self.assertEqual( [ self.hotel ], list( ItineraryItem.objects.for_location( self.location )))
        return

    def test_owner_sees_everything(self):
        self.assertEqual( [ self.hotel, self.flight ],
                          list( ItineraryItem.objects.visible_to( self.trip, self.owner )))
        return

    def test_viewer_sees_only_granted_items(self):
        ItineraryItemParticipant.objects.create( itinerary_item = self.flight, user = self.viewer )
        self.assertEqual( [ self.flight ],
                          list( ItineraryItem.objects.visible_to( self.trip, self.viewer )))
        return

    def test_deleting_location_removes_its_items(self):
        self.location.delete()
        self.assertFalse( ItineraryItem.objects.filter( pk = self.hotel.pk ).exists() )
        self.assertEqual( [ self.flight ], list( ItineraryItem.objects.for_trip( self.trip )))
        return
