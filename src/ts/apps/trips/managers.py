from django.db import models, transaction


class TripManager(models.Manager):

    def for_user(self, user):
        """Get all trips where user is a member (any permission level)."""
        return self.filter( members__user = user ).distinct()

    def create_with_owner(self, owner, **trip_fields):
        """
        Atomically creates both the Trip and the owner's TripMember record.
        """
        from .enums import TripPermissionLevel
        from ts.apps.members.enums import ParticipationStatus
        from ts.apps.members.models import TripMember

        with transaction.atomic():
            trip = self.create( **trip_fields )

            TripMember.objects.create(
                trip = trip,
                user = owner,
                permission_level = TripPermissionLevel.OWNER,
                participation_status = ParticipationStatus.CONFIRMED,
                added_by = owner,
            )

        return trip
