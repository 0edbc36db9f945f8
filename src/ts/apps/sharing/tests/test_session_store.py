import logging
from importlib import import_module
from uuid import uuid4

from django.conf import settings
from django.test import RequestFactory, TestCase

from ts.apps.sharing import session_store
from ts.apps.sharing.enums import RecipientKind
from ts.apps.sharing.schemas import SelectionContextKey
from ts.apps.sharing.selection_store import SelectionStateStore

from .synthetic_data import SharingSyntheticData

logging.disable(logging.CRITICAL)


class SelectionSessionStoreTestCase(TestCase):

    def setUp(self):
        self.request = RequestFactory().get( '/' )
        engine = import_module( settings.SESSION_ENGINE )
        self.request.session = engine.SessionStore()
        self.catalog = SharingSyntheticData.create_catalog()
        self.key = SelectionContextKey(
            trip_uuid = uuid4(),
            recipient_kind = RecipientKind.LINK_DRAFT,
            recipient_key = 'default',
        )
        return

    def test_store_survives_the_session(self):
        store = SelectionStateStore()
        store.initialize( self.key, self.catalog )
        store.toggle_location( self.key, self.catalog, 1 )
        session_store.to_session( self.request, store )

        restored = session_store.from_session( self.request )
        self.assertEqual( store.get( self.key ), restored.get( self.key ))
        return

    def test_empty_session(self):
        store = session_store.from_session( self.request )
        self.assertEqual( {}, store.contexts )
        return

    def test_request_without_session(self):
        request = RequestFactory().get( '/' )
        store = session_store.from_session( request )
        self.assertEqual( {}, store.contexts )

        session_store.to_session( request, store )
        self.assertFalse( hasattr( request, 'session' ))
        return

    def test_unreadable_entries_are_dropped(self):
        store = SelectionStateStore()
        store.initialize( self.key, self.catalog )
        session_store.to_session( self.request, store )
        self.request.session[session_store.SESSION_KEY].append({ 'trip_uuid': 'not-a-uuid' })

        restored = session_store.from_session( self.request )
        self.assertEqual( [ self.key ], list( restored.contexts.keys() ))
        return
