import uuid

from django.db import models

from ts.apps.trips.models import Trip

from . import managers


class Location( models.Model ):
    """
    A stop on a trip.  Stops are ordered by order_index and are the unit
    of visibility when a trip is shared with only some of its stops.
    """
    objects = managers.LocationManager()

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    trip = models.ForeignKey(
        Trip,
        on_delete = models.CASCADE,
        related_name = 'locations',
    )
    order_index = models.PositiveIntegerField(
        default = 0,
    )
    title = models.CharField(
        max_length = 200,
    )
    start_date = models.DateField(
        null = True,
        blank = True,
    )
    end_date = models.DateField(
        null = True,
        blank = True,
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Location'
        verbose_name_plural = 'Locations'
        ordering = [ 'order_index', 'id' ]

    def __str__(self):
        return self.title
