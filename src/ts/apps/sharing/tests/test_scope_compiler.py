import logging

from django.test import SimpleTestCase

from ts.apps.sharing.cascade import DeselectAll, SelectAll, ToggleItem, cascade, full_selection
from ts.apps.sharing.catalog import CatalogItem, TripCatalog
from ts.apps.sharing.exceptions import ScopeReferenceError, ScopeValidationError
from ts.apps.sharing.schemas import FullScope, PartialScope, SelectionContext
from ts.apps.sharing.scope_compiler import compile_scope, require_non_empty

from .synthetic_data import SharingSyntheticData, catalog_uuid

logging.disable(logging.CRITICAL)


class ScopeCompilerTestCase(SimpleTestCase):

    def setUp(self):
        self.catalog = SharingSyntheticData.create_catalog( with_trip_wide_item = True )
        self.full = full_selection( self.catalog )
        return

    def test_compiling_twice_gives_identical_descriptors(self):
        context = cascade( self.full, self.catalog, ToggleItem( 21 ))
        first = compile_scope( context, self.catalog )
        second = compile_scope( context, self.catalog )
        self.assertEqual( first, second )
        self.assertEqual( repr(first), repr(second) )
        self.assertEqual( FullScope(), compile_scope( cascade( context, self.catalog, SelectAll() ),
                                                      self.catalog ))
        return

    def test_partial_ids_are_sorted(self):
        context = SelectionContext(
            location_ids = frozenset({ 2, 1 }),
            item_ids = frozenset({ 99, 21, 11 }),
        )
        descriptor = compile_scope( context, self.catalog )
        self.assertEqual( ( 1, 2 ), descriptor.location_ids )
        self.assertEqual( ( 11, 21, 99 ), descriptor.item_ids )
        return

    def test_nothing_selected_is_an_empty_partial(self):
        context = cascade( self.full, self.catalog, DeselectAll() )
        descriptor = compile_scope( context, self.catalog )
        self.assertEqual( PartialScope(), descriptor )
        self.assertTrue( descriptor.is_empty )

        with self.assertRaises( ScopeValidationError ):
            require_non_empty( descriptor )
        return

    def test_require_non_empty_passes_content_through(self):
        descriptor = PartialScope( location_ids = (), item_ids = ( 99, ))
        self.assertIs( descriptor, require_non_empty( descriptor ))
        self.assertEqual( FullScope(), require_non_empty( FullScope() ))
        return

    def test_item_added_after_opening_makes_scope_partial(self):
        context = full_selection( self.catalog )
        grown_catalog = TripCatalog(
            locations = self.catalog.locations,
            items = self.catalog.items + [
                CatalogItem( id = 13, uuid = catalog_uuid(13), title = 'Eiffel Tower', location_id = 1 ),
            ],
        )
        descriptor = compile_scope( context, grown_catalog )
        self.assertFalse( descriptor.is_full )
        self.assertNotIn( 13, descriptor.item_ids )
        return

    def test_removed_content_is_reported(self):
        context = full_selection( self.catalog )
        shrunk_catalog = TripCatalog(
            locations = self.catalog.locations[:1],
            items = [ x for x in self.catalog.items if x.location_id != 2 ],
        )
        with self.assertRaises( ScopeReferenceError ):
            compile_scope( context, shrunk_catalog )
        return
