from django.contrib import admin

from ts.apps.common.admin_utils import admin_link

from . import models


@admin.register( models.TripMember )
class TripMemberAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'trip',
        'user_link',
        'permission_level',
        'participation_status',
        'added_by_link',
        'added_datetime',
    )

    list_filter = ( 'permission_level', 'participation_status' )
    search_fields = [ 'trip__title', 'user__email' ]
    readonly_fields = ( 'added_datetime', 'responded_datetime' )

    @admin_link( 'user', 'User' )
    def user_link(self, user):
        return user.email

    @admin_link( 'added_by', 'Added By' )
    def added_by_link(self, added_by):
        return added_by.email


@admin.register( models.LocationParticipant )
class LocationParticipantAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'location_link',
        'user_link',
        'created_datetime',
    )
    search_fields = [ 'location__title', 'user__email' ]

    @admin_link( 'location', 'Location' )
    def location_link(self, location):
        return location.title

    @admin_link( 'user', 'User' )
    def user_link(self, user):
        return user.email


@admin.register( models.ItineraryItemParticipant )
class ItineraryItemParticipantAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'itinerary_item_link',
        'user_link',
        'created_datetime',
    )
    search_fields = [ 'itinerary_item__title', 'user__email' ]

    @admin_link( 'itinerary_item', 'Itinerary Item' )
    def itinerary_item_link(self, itinerary_item):
        return itinerary_item.title

    @admin_link( 'user', 'User' )
    def user_link(self, user):
        return user.email
