from django.contrib import admin

from . import models


@admin.register( models.ItineraryItem )
class ItineraryItemAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'title',
        'item_type',
        'trip',
        'location',
        'start_datetime',
    )
    list_filter = ( 'item_type', )
    search_fields = [ 'title', 'trip__title' ]
    readonly_fields = ( 'uuid', 'created_datetime', 'modified_datetime' )
