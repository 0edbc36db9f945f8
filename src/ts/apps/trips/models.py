import uuid

from django.db import models

from .enums import TripPermissionLevel
from . import managers


class Trip( models.Model ):
    """
    Top-level container owning the trip's Locations and ItineraryItems.
    Access controlled via the TripMember permission model, with per-stop
    and per-item visibility for shared (viewer) members.
    """
    objects = managers.TripManager()

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    title = models.CharField(
        max_length = 200,
    )
    description = models.TextField(
        blank = True,
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Trip'
        verbose_name_plural = 'Trips'
        ordering = [ '-created_datetime' ]

    def __str__(self):
        return f'{self.title} [{self.pk}]'

    @property
    def owner(self):
        """Returns the user with OWNER permission. Cached to prevent N+1 queries."""
        if not hasattr(self, '_owner_cache'):
            owner_member = self.members.filter(
                permission_level = TripPermissionLevel.OWNER
            ).order_by( 'added_datetime' ).first()
            self._owner_cache = owner_member.user if owner_member else None
        return self._owner_cache
