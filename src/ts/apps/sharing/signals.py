"""
Signal handlers keeping access grants in step with trip membership.
"""
from django.db.models.signals import post_delete
from django.dispatch import receiver

from ts.apps.members.models import TripMember

from .grant_materializer import GrantMaterializer


@receiver( post_delete, sender = TripMember )
def revoke_grants_for_removed_member( sender, instance, **kwargs ):
    """
    A user removed from a trip loses the stops and items that were shared
    with them.  Rejoining later starts from a fresh grant.
    """
    GrantMaterializer.revoke( user = instance.user, trip = instance.trip )
    return
