from django.contrib import admin

from . import models


@admin.register( models.Trip )
class TripAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'title',
        'uuid',
        'created_datetime',
    )
    search_fields = [ 'title', 'uuid' ]
    readonly_fields = ( 'uuid', 'created_datetime', 'modified_datetime' )
