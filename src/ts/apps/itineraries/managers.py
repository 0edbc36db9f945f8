from django.db import models

from ts.apps.members.models import TripMember


class ItineraryItemManager(models.Manager):

    def for_trip(self, trip):
        return self.filter( trip = trip ).order_by( 'start_datetime', 'id' )

    def for_location(self, location):
        return self.filter( location = location )

    def visible_to(self, trip, user):
        """
        Same rule as for stops: editors and above see everything, other
        members only their granted items.
        """
        trip_member = TripMember.objects.get_for_trip_and_user( trip = trip, user = user )
        if not trip_member:
            return self.none()
        if trip_member.sees_everything:
            return self.for_trip( trip )
        return self.for_trip( trip ).filter( participants__user = user )
