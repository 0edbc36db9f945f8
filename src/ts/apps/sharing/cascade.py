"""
Selection state transitions.  A stop and its items move together: turning
a stop on or off turns all of its items on or off.  Toggling a single item
only touches that item, so a stop can stay selected with some of its items
left out ("2 of 3 items").  Trip-wide items (no stop) change only through
an item toggle or select/deselect all.
"""
from dataclasses import dataclass
from typing import Union

from .catalog import TripCatalog
from .schemas import SelectionContext


@dataclass( frozen = True )
class ToggleLocation:
    location_id  : int


@dataclass( frozen = True )
class ToggleItem:
    item_id  : int


@dataclass( frozen = True )
class SelectAll:
    pass


@dataclass( frozen = True )
class DeselectAll:
    pass


SelectionAction = Union[ ToggleLocation, ToggleItem, SelectAll, DeselectAll ]


def cascade( context  : SelectionContext,
             catalog  : TripCatalog,
             action   : SelectionAction ) -> SelectionContext:
    if isinstance( action, ToggleLocation ):
        return _toggle_location( context, catalog, action.location_id )
    if isinstance( action, ToggleItem ):
        return _toggle_item( context, catalog, action.item_id )
    if isinstance( action, SelectAll ):
        return full_selection( catalog )
    if isinstance( action, DeselectAll ):
        return SelectionContext()
    raise TypeError( f'Unknown selection action: {action!r}' )


def full_selection( catalog : TripCatalog ) -> SelectionContext:
    return SelectionContext(
        location_ids = catalog.all_location_ids,
        item_ids = catalog.all_item_ids,
    )


def _toggle_location( context      : SelectionContext,
                      catalog      : TripCatalog,
                      location_id  : int ) -> SelectionContext:
    assert catalog.has_location( location_id ), f'Location {location_id} not in catalog'

    child_item_ids = catalog.item_ids_for_location( location_id )
    if context.is_location_selected( location_id ):
        return SelectionContext(
            location_ids = context.location_ids - { location_id },
            item_ids = context.item_ids - child_item_ids,
        )
    return SelectionContext(
        location_ids = context.location_ids | { location_id },
        item_ids = context.item_ids | child_item_ids,
    )


def _toggle_item( context  : SelectionContext,
                  catalog  : TripCatalog,
                  item_id  : int ) -> SelectionContext:
    assert catalog.has_item( item_id ), f'Item {item_id} not in catalog'

    return SelectionContext(
        location_ids = context.location_ids,
        item_ids = context.item_ids ^ { item_id },
    )


def selected_item_count_for_location( context      : SelectionContext,
                                      catalog      : TripCatalog,
                                      location_id  : int ) -> int:
    return len( context.item_ids & catalog.item_ids_for_location( location_id ))


def location_summary( context : SelectionContext, catalog : TripCatalog ) -> str:
    """ Short label for a selection, e.g., "2 of 5 stops". """
    selected_count = len( context.location_ids & catalog.all_location_ids )
    total_count = catalog.location_count

    if selected_count == total_count:
        return 'Full trip'
    if selected_count == 0:
        return 'No stops selected'
    return f'{selected_count} of {total_count} stops'
