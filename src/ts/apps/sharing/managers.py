from django.db import models


class InviteLinkManager(models.Manager):

    def for_trip(self, trip):
        """ Newest first. """
        return self.filter( trip = trip ).order_by( '-created_datetime', '-id' )

    def with_token(self, token):
        return self.filter( token = token ).select_related( 'trip', 'created_by' ).first()
