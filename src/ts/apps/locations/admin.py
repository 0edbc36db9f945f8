from django.contrib import admin

from . import models


@admin.register( models.Location )
class LocationAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'title',
        'trip',
        'order_index',
        'start_date',
        'end_date',
    )
    search_fields = [ 'title', 'trip__title' ]
    readonly_fields = ( 'uuid', 'created_datetime', 'modified_datetime' )
