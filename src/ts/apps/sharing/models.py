from typing import Optional
import uuid

from django.conf import settings
from django.db import models

from ts.apps.common import datetimeproxy
from ts.apps.trips.models import Trip

from .enums import LinkStatus
from .schemas import FullScope, GrantDescriptor, PartialScope
from . import managers


class InviteLink(models.Model):
    """
    A shareable token that lets anyone with it join the trip as a viewer
    of the stops and items captured when the link was made.

    The scope is stored as two nullable id lists: both null means the whole
    trip (including anything added later), otherwise the lists are the
    explicit ids.  Use the descriptor property rather than the raw fields.
    A null max_uses means the link can be redeemed any number of times.
    """
    objects = managers.InviteLinkManager()

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    trip = models.ForeignKey(
        Trip,
        on_delete = models.CASCADE,
        related_name = 'invite_links',
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.SET_NULL,
        null = True,
        blank = True,
        related_name = 'invite_links_created',
    )
    token = models.CharField(
        max_length = 32,
        unique = True,
    )
    created_datetime = models.DateTimeField(
        default = datetimeproxy.now,
    )
    expires_datetime = models.DateTimeField(
        null = True,
        blank = True,
    )
    usage_count = models.PositiveIntegerField(
        default = 0,
    )
    max_uses = models.PositiveIntegerField(
        null = True,
        blank = True,
    )
    included_location_ids = models.JSONField(
        null = True,
        blank = True,
    )
    included_item_ids = models.JSONField(
        null = True,
        blank = True,
    )

    class Meta:
        verbose_name = 'Invite Link'
        verbose_name_plural = 'Invite Links'
        ordering = [ '-created_datetime', '-id' ]

    def __str__(self):
        return f'{self.token} - {self.trip.title}'

    @property
    def descriptor(self) -> GrantDescriptor:
        if self.included_location_ids is None and self.included_item_ids is None:
            return FullScope()
        return PartialScope(
            location_ids = tuple( self.included_location_ids or [] ),
            item_ids = tuple( self.included_item_ids or [] ),
        )

    @descriptor.setter
    def descriptor( self, descriptor : GrantDescriptor ):
        if descriptor.is_full:
            self.included_location_ids = None
            self.included_item_ids = None
        else:
            self.included_location_ids = list( descriptor.location_ids )
            self.included_item_ids = list( descriptor.item_ids )
        return

    @property
    def is_full_trip(self) -> bool:
        return self.descriptor.is_full

    def is_expired( self, now = None ) -> bool:
        if self.expires_datetime is None:
            return False
        if now is None:
            now = datetimeproxy.now()
        return bool( now > self.expires_datetime )

    @property
    def is_used_up(self) -> bool:
        if self.max_uses is None:
            return False
        return bool( self.usage_count >= self.max_uses )

    @property
    def status(self) -> LinkStatus:
        if self.pk is None:
            return LinkStatus.DELETED
        if self.is_expired():
            return LinkStatus.EXPIRED
        if self.is_used_up:
            return LinkStatus.USED_UP
        return LinkStatus.ACTIVE
