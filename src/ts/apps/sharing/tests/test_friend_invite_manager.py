import logging
from unittest.mock import patch

from django.test import TestCase

from ts.apps.members.enums import ParticipationStatus
from ts.apps.members.models import ItineraryItemParticipant, LocationParticipant, TripMember
from ts.apps.sharing.catalog import TripCatalog
from ts.apps.sharing.exceptions import GrantPersistenceError
from ts.apps.sharing.friend_invite_manager import FriendInvitationManager
from ts.apps.sharing.grant_materializer import GrantMaterializer
from ts.apps.sharing.schemas import FullScope, PartialScope
from ts.apps.sharing.selection_store import SelectionStateStore
from ts.apps.trips.enums import TripPermissionLevel
from ts.apps.trips.tests.synthetic_data import TripSyntheticData

from .synthetic_data import SharingSyntheticData

logging.disable(logging.CRITICAL)


class FriendInvitationManagerTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.owner = TripSyntheticData.create_test_user( email = 'owner@test.com' )
        cls.alice = TripSyntheticData.create_test_user( email = 'alice@test.com' )
        cls.bob = TripSyntheticData.create_test_user( email = 'bob@test.com' )
        cls.carol = TripSyntheticData.create_test_user( email = 'carol@test.com' )
        cls.data = SharingSyntheticData.create_two_stop_trip( cls.owner )
        return

    def setUp(self):
        self.manager = FriendInvitationManager()
        return

    def test_batch_with_partial_failure(self):
        batch_result = self.manager.invite_friends(
            trip = self.data.trip,
            invited_by = self.owner,
            recipient_scopes = [
                ( self.alice, FullScope() ),
                ( self.bob, PartialScope() ),
                ( self.carol, PartialScope( location_ids = ( self.data.tokyo.id, ),
                                            item_ids = ( self.data.sushi.id, ))),
            ],
        )

        self.assertFalse( batch_result.all_succeeded )
        self.assertEqual( [ self.alice, self.carol ], [ x.user for x in batch_result.succeeded ])
        self.assertEqual( [ self.bob ], [ x.user for x in batch_result.failed ])
        self.assertTrue( batch_result.failed[0].error_message )

        self.assertFalse( TripMember.objects.filter( trip = self.data.trip, user = self.bob ).exists() )
        self.assertEqual( 3, ItineraryItemParticipant.objects.filter( user = self.alice ).count() )
        self.assertEqual( 1, LocationParticipant.objects.filter( user = self.carol ).count() )
        return

    def test_new_members_are_invited_viewers(self):
        batch_result = self.manager.invite_friends(
            trip = self.data.trip,
            invited_by = self.owner,
            recipient_scopes = [ ( self.alice, FullScope() ) ],
        )
        self.assertTrue( batch_result.succeeded[0].member_created )

        trip_member = TripMember.objects.get( trip = self.data.trip, user = self.alice )
        self.assertEqual( TripPermissionLevel.VIEWER, trip_member.permission_level )
        self.assertEqual( ParticipationStatus.INVITED, trip_member.participation_status )
        self.assertEqual( self.owner, trip_member.added_by )
        return

    def test_existing_member_is_not_downgraded(self):
        TripSyntheticData.add_trip_member(
            trip = self.data.trip,
            user = self.alice,
            permission_level = TripPermissionLevel.ADMIN,
        )
        batch_result = self.manager.invite_friends(
            trip = self.data.trip,
            invited_by = self.owner,
            recipient_scopes = [ ( self.alice, FullScope() ) ],
        )
        self.assertFalse( batch_result.succeeded[0].member_created )

        trip_member = TripMember.objects.get( trip = self.data.trip, user = self.alice )
        self.assertEqual( TripPermissionLevel.ADMIN, trip_member.permission_level )
        self.assertEqual( ParticipationStatus.CONFIRMED, trip_member.participation_status )
        return

    def test_persistence_failure_is_recorded_per_recipient(self):
        real_materialize = GrantMaterializer.materialize

        def failing_for_bob( user, trip, descriptor ):
            if user == self.bob:
                raise GrantPersistenceError( 'Could not save sharing changes.' )
            return real_materialize( user = user, trip = trip, descriptor = descriptor )

        with patch.object( GrantMaterializer, 'materialize', side_effect = failing_for_bob ):
            batch_result = self.manager.invite_friends(
                trip = self.data.trip,
                invited_by = self.owner,
                recipient_scopes = [
                    ( self.alice, FullScope() ),
                    ( self.bob, FullScope() ),
                    ( self.carol, FullScope() ),
                ],
            )

        self.assertEqual( 2, len( batch_result.succeeded ))
        self.assertEqual( [ self.bob ], [ x.user for x in batch_result.failed ])
        self.assertEqual( 'Could not save sharing changes.', batch_result.failed[0].error_message )
        return

    def test_invite_from_selections(self):
        store = SelectionStateStore()
        catalog = TripCatalog.for_trip( self.data.trip )
        alice_key = self.manager.selection_key( self.data.trip, self.alice )
        bob_key = self.manager.selection_key( self.data.trip, self.bob )

        store.initialize( alice_key, catalog )
        store.toggle_location( alice_key, catalog, self.data.paris.id )
        store.initialize( bob_key, catalog )
        store.deselect_all( bob_key, catalog )

        batch_result = self.manager.invite_from_selections(
            trip = self.data.trip,
            invited_by = self.owner,
            users = [ self.alice, self.bob, self.carol ],
            store = store,
        )

        self.assertEqual( [ self.alice, self.carol ], [ x.user for x in batch_result.succeeded ])
        self.assertEqual( [ self.bob ], [ x.user for x in batch_result.failed ])

        # Alice gets only Tokyo, Carol (no selection opened) gets everything.
        self.assertEqual( [ self.data.tokyo.id ],
                          list( LocationParticipant.objects.filter( user = self.alice ).values_list(
                              'location_id', flat = True )))
        self.assertEqual( 2, LocationParticipant.objects.filter( user = self.carol ).count() )

        # Sent selections are done with; the failed one stays for a retry.
        self.assertFalse( store.has( alice_key ))
        self.assertTrue( store.has( bob_key ))
        return
