import uuid

from django.db import models

from ts.apps.common.model_fields import LabeledEnumField
from ts.apps.locations.models import Location
from ts.apps.trips.models import Trip

from .enums import ItineraryItemType
from . import managers


class ItineraryItem(models.Model):
    """
    A flight, reservation, activity, etc. on a trip.  Attached to at most
    one stop and removed along with it; items with no location are
    trip-wide.
    """
    objects = managers.ItineraryItemManager()

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    trip = models.ForeignKey(
        Trip,
        on_delete = models.CASCADE,
        related_name = 'itinerary_items',
    )
    location = models.ForeignKey(
        Location,
        on_delete = models.CASCADE,
        null = True,
        blank = True,
        related_name = 'itinerary_items',
    )
    item_type = LabeledEnumField(
        ItineraryItemType,
        'Item Type',
    )
    title = models.CharField(
        max_length = 200,
    )
    start_datetime = models.DateTimeField()
    end_datetime = models.DateTimeField(
        null = True,
        blank = True,
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Itinerary Item'
        verbose_name_plural = 'Itinerary Items'
        ordering = [ 'start_datetime', 'id' ]

    def __str__(self):
        return f'{self.title} ({self.item_type})'
