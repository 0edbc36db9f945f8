import logging
from uuid import uuid4

from django.test import SimpleTestCase

from ts.apps.sharing.enums import RecipientKind
from ts.apps.sharing.schemas import FullScope, PartialScope, SelectionContextKey
from ts.apps.sharing.scope_compiler import compile_scope
from ts.apps.sharing.selection_store import SelectionContextNotFound, SelectionStateStore

from .synthetic_data import SharingSyntheticData

logging.disable(logging.CRITICAL)

PARIS, TOKYO = 1, 2
HOTEL, MUSEUM, SUSHI = 11, 12, 21


class SelectionStateStoreTestCase(SimpleTestCase):

    def setUp(self):
        self.catalog = SharingSyntheticData.create_catalog()
        self.trip_uuid = uuid4()
        self.friend_key = SelectionContextKey(
            trip_uuid = self.trip_uuid,
            recipient_kind = RecipientKind.FRIEND,
            recipient_key = 'friend-1',
        )
        self.link_key = SelectionContextKey(
            trip_uuid = self.trip_uuid,
            recipient_kind = RecipientKind.LINK_DRAFT,
            recipient_key = 'default',
        )
        self.store = SelectionStateStore()
        return

    def test_initialize_selects_everything(self):
        context = self.store.initialize( self.friend_key, self.catalog )
        self.assertEqual( self.catalog.all_location_ids, context.location_ids )
        self.assertEqual( self.catalog.all_item_ids, context.item_ids )
        return

    def test_reinitialize_keeps_existing_choices(self):
        self.store.initialize( self.friend_key, self.catalog )
        self.store.toggle_location( self.friend_key, self.catalog, PARIS )

        context = self.store.initialize( self.friend_key, self.catalog )
        self.assertEqual( frozenset({ TOKYO }), context.location_ids )
        return

    def test_uninitialized_key(self):
        with self.assertRaises( SelectionContextNotFound ):
            self.store.get( self.friend_key )
        with self.assertRaises( KeyError ):
            self.store.toggle_item( self.friend_key, self.catalog, HOTEL )
        return

    def test_contexts_are_independent(self):
        self.store.initialize( self.friend_key, self.catalog )
        self.store.initialize( self.link_key, self.catalog )

        self.store.deselect_all( self.friend_key, self.catalog )

        self.assertTrue( self.store.get( self.friend_key ).is_empty )
        self.assertEqual( self.catalog.all_item_ids, self.store.get( self.link_key ).item_ids )
        return

    def test_select_all_after_deselect_all(self):
        self.store.initialize( self.link_key, self.catalog )
        self.store.deselect_all( self.link_key, self.catalog )
        context = self.store.select_all( self.link_key, self.catalog )
        self.assertEqual( FullScope(), compile_scope( context, self.catalog ))
        return

    def test_discard_and_keys_for_trip(self):
        other_trip_key = SelectionContextKey(
            trip_uuid = uuid4(),
            recipient_kind = RecipientKind.FRIEND,
            recipient_key = 'friend-1',
        )
        self.store.initialize( self.friend_key, self.catalog )
        self.store.initialize( self.link_key, self.catalog )
        self.store.initialize( other_trip_key, self.catalog )

        self.assertEqual( { self.friend_key, self.link_key },
                          set( self.store.keys_for_trip( self.trip_uuid )))

        self.assertIsNotNone( self.store.discard( self.friend_key ))
        self.assertIsNone( self.store.discard( self.friend_key ))
        self.assertFalse( self.store.has( self.friend_key ))
        self.assertEqual( [ self.link_key ], self.store.keys_for_trip( self.trip_uuid ))
        return

    def test_uses_the_mapping_it_is_given(self):
        contexts = dict()
        store = SelectionStateStore( contexts = contexts )
        store.initialize( self.friend_key, self.catalog )
        self.assertIn( self.friend_key, contexts )
        return

    def test_scenario_toggle_location_then_compile(self):
        self.store.initialize( self.friend_key, self.catalog )
        context = self.store.toggle_location( self.friend_key, self.catalog, PARIS )

        self.assertEqual( frozenset({ TOKYO }), context.location_ids )
        self.assertEqual( frozenset({ SUSHI }), context.item_ids )
        self.assertEqual(
            PartialScope( location_ids = ( TOKYO, ), item_ids = ( SUSHI, )),
            compile_scope( context, self.catalog ),
        )
        return

    def test_scenario_no_toggles_compiles_to_full(self):
        context = self.store.initialize( self.friend_key, self.catalog )
        self.assertEqual( FullScope(), compile_scope( context, self.catalog ))
        return

    def test_scenario_item_toggle_keeps_its_location(self):
        self.store.initialize( self.friend_key, self.catalog )
        context = self.store.toggle_item( self.friend_key, self.catalog, HOTEL )

        self.assertEqual(
            PartialScope( location_ids = ( PARIS, TOKYO ), item_ids = ( MUSEUM, SUSHI )),
            compile_scope( context, self.catalog ),
        )
        return
