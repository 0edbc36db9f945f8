from django.conf import settings
from django.db import models

from ts.apps.common import datetimeproxy
from ts.apps.common.model_fields import LabeledEnumField
from ts.apps.trips.enums import TripPermissionLevel
from ts.apps.trips.models import Trip

from .enums import ParticipationStatus
from . import managers


class TripMember(models.Model):
    """
    Through model for Trip-User many-to-many relationship with permissions.
    Tracks who has access to a trip, at what permission level, and whether
    they have accepted.
    """
    objects = managers.TripMemberManager()

    trip = models.ForeignKey(
        Trip,
        on_delete = models.CASCADE,
        related_name = 'members',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'trip_memberships',
    )
    permission_level = LabeledEnumField(
        TripPermissionLevel,
        'Permission Level',
    )
    participation_status = LabeledEnumField(
        ParticipationStatus,
        'Participation Status',
    )
    added_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.SET_NULL,
        null = True,
        blank = True,
        related_name = 'trips_shared_by_me',
    )
    added_datetime = models.DateTimeField( auto_now_add = True )
    responded_datetime = models.DateTimeField(
        null = True,
        blank = True,
        help_text = 'When the member confirmed or declined.',
    )

    class Meta:
        verbose_name = 'Trip Member'
        verbose_name_plural = 'Trip Members'
        unique_together = [ ('trip', 'user') ]

    def __str__(self):
        return f'{self.user.email} - {self.trip.title} ({self.permission_level})'

    def has_trip_permission( self, required_level: TripPermissionLevel ) -> bool:
        """
        Check if user has at least the required permission level for the trip.
        """
        return bool( self.permission_level >= required_level )

    @property
    def can_manage_members( self ):
        return self.has_trip_permission( required_level = TripPermissionLevel.ADMIN )

    @property
    def can_edit_trip( self ):
        return self.has_trip_permission( required_level = TripPermissionLevel.EDITOR )

    @property
    def sees_everything( self ):
        """ Editors and above are not restricted by per-stop grants. """
        return self.can_edit_trip

    def mark_confirmed( self ):
        self.participation_status = ParticipationStatus.CONFIRMED
        self.responded_datetime = datetimeproxy.now()
        self.save( update_fields = [ 'participation_status', 'responded_datetime' ] )
        return


class LocationParticipant(models.Model):
    """
    Grants a user visibility of one trip stop.
    """
    objects = managers.LocationParticipantManager()

    location = models.ForeignKey(
        'locations.Location',
        on_delete = models.CASCADE,
        related_name = 'participants',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'location_participations',
    )
    created_datetime = models.DateTimeField( auto_now_add = True )

    class Meta:
        verbose_name = 'Location Participant'
        verbose_name_plural = 'Location Participants'
        constraints = [
            models.UniqueConstraint(
                fields = [ 'location', 'user' ],
                name = 'unique_location_participant',
            ),
        ]

    def __str__(self):
        return f'{self.user} @ {self.location}'


class ItineraryItemParticipant(models.Model):
    """
    Grants a user visibility of one itinerary item.
    """
    objects = managers.ItineraryItemParticipantManager()

    itinerary_item = models.ForeignKey(
        'itineraries.ItineraryItem',
        on_delete = models.CASCADE,
        related_name = 'participants',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'itinerary_item_participations',
    )
    created_datetime = models.DateTimeField( auto_now_add = True )

    class Meta:
        verbose_name = 'Itinerary Item Participant'
        verbose_name_plural = 'Itinerary Item Participants'
        constraints = [
            models.UniqueConstraint(
                fields = [ 'itinerary_item', 'user' ],
                name = 'unique_itinerary_item_participant',
            ),
        ]

    def __str__(self):
        return f'{self.user} @ {self.itinerary_item}'
