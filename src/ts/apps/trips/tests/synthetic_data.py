"""
Synthetic data generators for Trip and TripMember models.

Creates real database objects (never mocks) for use in Django tests.
"""
from django.contrib.auth import get_user_model

from ts.apps.members.enums import ParticipationStatus
from ts.apps.members.models import TripMember
from ts.apps.trips.enums import TripPermissionLevel
from ts.apps.trips.models import Trip

User = get_user_model()


class TripSyntheticData:
    """Factory methods for creating Trip test data with proper relationships."""

    @staticmethod
    def create_test_user( email = 'owner@test.com', password = 'pass', **kwargs ):
        return User.objects.create_user( email = email, password = password, **kwargs )

    @staticmethod
    def create_test_trip( user,
                          title = 'Test Trip',
                          description = '',
                          **kwargs ):
        """
        Create a Trip with an OWNER TripMember relationship.

        This is the standard way to create trips in tests.

        Example:
            trip = TripSyntheticData.create_test_trip(
                user = self.user,
                title = 'My Test Trip',
            )
        """
        return Trip.objects.create_with_owner(
            owner = user,
            title = title,
            description = description,
            **kwargs
        )

    @staticmethod
    def add_trip_member( trip,
                         user,
                         permission_level = TripPermissionLevel.EDITOR,
                         participation_status = ParticipationStatus.CONFIRMED,
                         added_by = None ):
        """
        Add a member to an existing trip with specified permission level.
        The member adds themselves when no added_by is given.
        """
        if added_by is None:
            added_by = user

        return TripMember.objects.create(
            trip = trip,
            user = user,
            permission_level = permission_level,
            participation_status = participation_status,
            added_by = added_by,
        )
