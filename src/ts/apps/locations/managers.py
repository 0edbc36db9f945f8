from django.db import models

from ts.apps.members.models import TripMember


class LocationManager(models.Manager):

    def for_trip(self, trip):
        """ Trip stops in itinerary order. """
        return self.filter( trip = trip ).order_by( 'order_index', 'id' )

    def visible_to(self, trip, user):
        """
        Editors and above see every stop.  Other members see only the
        stops they have been granted.  Non-members see nothing.
        """
        trip_member = TripMember.objects.get_for_trip_and_user( trip = trip, user = user )
        if not trip_member:
            return self.none()
        if trip_member.sees_everything:
            return self.for_trip( trip )
        return self.for_trip( trip ).filter( participants__user = user )
