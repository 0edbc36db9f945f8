"""
Read-only snapshot of the stops and items of one trip, indexed by id.
Stops keep itinerary order so anything derived from the catalog (resolved
scopes, API listings) comes out in the order the trip is traveled.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple
from uuid import UUID

from ts.apps.itineraries.models import ItineraryItem
from ts.apps.locations.models import Location


@dataclass( frozen = True )
class CatalogLocation:

    id           : int
    uuid         : UUID
    title        : str
    order_index  : int = 0


@dataclass( frozen = True )
class CatalogItem:

    id           : int
    uuid         : UUID
    title        : str
    location_id  : Optional[ int ] = None


@dataclass
class TripCatalog:

    locations  : List[ CatalogLocation ] = field( default_factory = list )
    items      : List[ CatalogItem ]     = field( default_factory = list )

    def __post_init__(self):
        self.location_by_id : Dict[ int, CatalogLocation ] = {
            x.id: x for x in self.locations
        }
        self.item_by_id : Dict[ int, CatalogItem ] = {
            x.id: x for x in self.items
        }

        items_by_location = { x.id: list() for x in self.locations }
        trip_wide_item_ids = list()
        for item in self.items:
            if item.location_id is None:
                trip_wide_item_ids.append( item.id )
            elif item.location_id in items_by_location:
                items_by_location[item.location_id].append( item.id )
            continue
        self.items_by_location : Dict[ int, FrozenSet[ int ] ] = {
            location_id: frozenset( item_ids )
            for location_id, item_ids in items_by_location.items()
        }
        self.trip_wide_item_ids : FrozenSet[ int ] = frozenset( trip_wide_item_ids )

        self.all_location_ids : FrozenSet[ int ] = frozenset( self.location_by_id.keys() )
        self.all_item_ids : FrozenSet[ int ] = frozenset( self.item_by_id.keys() )
        return

    @classmethod
    def for_trip( cls, trip ) -> 'TripCatalog':
        locations = [
            CatalogLocation(
                id = location.id,
                uuid = location.uuid,
                title = location.title,
                order_index = location.order_index,
            )
            for location in Location.objects.for_trip( trip )
        ]
        items = [
            CatalogItem(
                id = item.id,
                uuid = item.uuid,
                title = item.title,
                location_id = item.location_id,
            )
            for item in ItineraryItem.objects.for_trip( trip )
        ]
        return cls( locations = locations, items = items )

    def has_location( self, location_id : int ) -> bool:
        return bool( location_id in self.location_by_id )

    def has_item( self, item_id : int ) -> bool:
        return bool( item_id in self.item_by_id )

    def item_ids_for_location( self, location_id : int ) -> FrozenSet[ int ]:
        return self.items_by_location.get( location_id, frozenset() )

    def location_ids_for_uuids( self, uuid_list : List[ UUID ] ) -> Tuple[ int, ... ]:
        """ Raises KeyError for a uuid that is not in the catalog. """
        by_uuid = { x.uuid: x.id for x in self.locations }
        return tuple( by_uuid[x] for x in uuid_list )

    def item_ids_for_uuids( self, uuid_list : List[ UUID ] ) -> Tuple[ int, ... ]:
        """ Raises KeyError for a uuid that is not in the catalog. """
        by_uuid = { x.uuid: x.id for x in self.items }
        return tuple( by_uuid[x] for x in uuid_list )

    @property
    def location_count(self) -> int:
        return len( self.locations )

    @property
    def item_count(self) -> int:
        return len( self.items )
