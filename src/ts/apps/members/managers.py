from django.db import models


class TripMemberManager(models.Manager):

    def get_for_trip_and_user(self, trip, user):
        """ Returns None rather than raising when the user is not a member. """
        return self.filter( trip = trip, user = user ).first()


class LocationParticipantManager(models.Manager):

    def for_trip_and_user(self, trip, user):
        return self.filter( location__trip = trip, user = user )


class ItineraryItemParticipantManager(models.Manager):

    def for_trip_and_user(self, trip, user):
        return self.filter( itinerary_item__trip = trip, user = user )
