import logging

from django.db import DatabaseError

from ts.apps.members.models import ItineraryItemParticipant, LocationParticipant
from ts.apps.trips.models import Trip

from .catalog import TripCatalog
from .exceptions import GrantPersistenceError
from .schemas import GrantDescriptor, MaterializeResult

logger = logging.getLogger(__name__)


class GrantMaterializer:
    """
    Turns a scope into per-user visibility rows.  Rows are written with
    conflicts ignored, so calling again with the same scope is a no-op and
    a failed call can simply be retried.  The two inserts are not wrapped
    in a transaction: a retry completes whatever a failed call left out.
    """

    @classmethod
    def materialize( cls,
                     user,
                     trip        : Trip,
                     descriptor  : GrantDescriptor ) -> MaterializeResult:
        catalog = TripCatalog.for_trip( trip )
        if descriptor.is_full:
            location_ids = [ x.id for x in catalog.locations ]
            item_ids = [ x.id for x in catalog.items ]
        else:
            location_ids = [ x for x in descriptor.location_ids if catalog.has_location( x ) ]
            item_ids = [ x for x in descriptor.item_ids if catalog.has_item( x ) ]

        try:
            LocationParticipant.objects.bulk_create(
                [ LocationParticipant( location_id = x, user = user ) for x in location_ids ],
                ignore_conflicts = True,
            )
            ItineraryItemParticipant.objects.bulk_create(
                [ ItineraryItemParticipant( itinerary_item_id = x, user = user ) for x in item_ids ],
                ignore_conflicts = True,
            )
        except DatabaseError as de:
            logger.exception( f'Grant write failed for user {user.pk} on trip {trip.pk}' )
            raise GrantPersistenceError( 'Could not save sharing changes.' ) from de

        logger.debug( f'Granted user {user.pk} on trip {trip.pk}: {len(location_ids)} stops,'
                      f' {len(item_ids)} items' )
        return MaterializeResult(
            location_ids = location_ids,
            item_ids = item_ids,
        )

    @classmethod
    def revoke( cls, user, trip : Trip ):
        try:
            LocationParticipant.objects.for_trip_and_user( trip = trip, user = user ).delete()
            ItineraryItemParticipant.objects.for_trip_and_user( trip = trip, user = user ).delete()
        except DatabaseError as de:
            logger.exception( f'Grant removal failed for user {user.pk} on trip {trip.pk}' )
            raise GrantPersistenceError( 'Could not remove sharing grants.' ) from de
        logger.debug( f'Revoked grants for user {user.pk} on trip {trip.pk}' )
        return
