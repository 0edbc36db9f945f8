"""
Holds one SelectionContext per sharing target.  The store owns no I/O: the
mapping it works on is handed in by the caller (see session_store for the
request-scoped binding).
"""
import logging
from typing import Dict, List, MutableMapping, Optional

from .cascade import (
    DeselectAll,
    SelectAll,
    SelectionAction,
    ToggleItem,
    ToggleLocation,
    cascade,
    full_selection,
)
from .catalog import TripCatalog
from .schemas import SelectionContext, SelectionContextKey

logger = logging.getLogger(__name__)


class SelectionContextNotFound( KeyError ):
    pass


class SelectionStateStore:

    def __init__( self,
                  contexts : Optional[ MutableMapping[ SelectionContextKey, SelectionContext ]] = None ):
        if contexts is None:
            contexts = dict()
        self._contexts = contexts
        return

    @property
    def contexts(self) -> Dict[ SelectionContextKey, SelectionContext ]:
        return dict( self._contexts )

    def initialize( self,
                    key      : SelectionContextKey,
                    catalog  : TripCatalog ) -> SelectionContext:
        """
        Starts a target off with everything selected.  A target that is
        already open keeps its current selection.
        """
        if key in self._contexts:
            return self._contexts[key]
        context = full_selection( catalog )
        self._contexts[key] = context
        logger.debug( f'Initialized selection {key}: {len(context.location_ids)} stops,'
                      f' {len(context.item_ids)} items' )
        return context

    def get( self, key : SelectionContextKey ) -> SelectionContext:
        try:
            return self._contexts[key]
        except KeyError:
            raise SelectionContextNotFound( key )

    def has( self, key : SelectionContextKey ) -> bool:
        return bool( key in self._contexts )

    def apply( self,
               key      : SelectionContextKey,
               catalog  : TripCatalog,
               action   : SelectionAction ) -> SelectionContext:
        context = cascade( self.get( key ), catalog, action )
        self._contexts[key] = context
        logger.debug( f'Selection {key} after {action}: {len(context.location_ids)} stops,'
                      f' {len(context.item_ids)} items' )
        return context

    def toggle_location( self, key : SelectionContextKey, catalog : TripCatalog, location_id : int ):
        return self.apply( key, catalog, ToggleLocation( location_id = location_id ))

    def toggle_item( self, key : SelectionContextKey, catalog : TripCatalog, item_id : int ):
        return self.apply( key, catalog, ToggleItem( item_id = item_id ))

    def select_all( self, key : SelectionContextKey, catalog : TripCatalog ):
        return self.apply( key, catalog, SelectAll() )

    def deselect_all( self, key : SelectionContextKey, catalog : TripCatalog ):
        return self.apply( key, catalog, DeselectAll() )

    def discard( self, key : SelectionContextKey ) -> Optional[ SelectionContext ]:
        return self._contexts.pop( key, None )

    def keys_for_trip( self, trip_uuid ) -> List[ SelectionContextKey ]:
        return [ x for x in self._contexts.keys() if x.trip_uuid == trip_uuid ]
