from uuid import UUID

from django.core.exceptions import BadRequest, PermissionDenied
from django.http import Http404, HttpRequest

from ts.apps.members.models import TripMember

from .enums import TripPermissionLevel
from .models import Trip


class TripViewMixin:

    def get_trip_member( self,
                         request    : HttpRequest,
                         trip_uuid  : UUID ) -> TripMember:
        """
        Non-members get a 404 (not a 403) so trip existence is not leaked.
        """
        if not trip_uuid:
            raise BadRequest()
        try:
            trip = Trip.objects.get( uuid = trip_uuid )
            return TripMember.objects.select_related( 'trip', 'user' ).get(
                trip = trip,
                user = request.user,
            )
        except Trip.DoesNotExist:
            raise Http404()
        except TripMember.DoesNotExist:
            raise Http404()

    def assert_has_permission( self,
                               trip_member     : TripMember,
                               required_level  : TripPermissionLevel ) -> None:
        if not trip_member.has_trip_permission( required_level ):
            raise PermissionDenied( 'Insufficient permission for this action' )

    def assert_is_viewer( self, trip_member : TripMember ) -> None:
        self.assert_has_permission(
            trip_member = trip_member,
            required_level = TripPermissionLevel.VIEWER,
        )

    def assert_is_editor( self, trip_member : TripMember ) -> None:
        self.assert_has_permission(
            trip_member = trip_member,
            required_level = TripPermissionLevel.EDITOR,
        )

    def assert_is_admin( self, trip_member : TripMember ) -> None:
        self.assert_has_permission(
            trip_member = trip_member,
            required_level = TripPermissionLevel.ADMIN,
        )
