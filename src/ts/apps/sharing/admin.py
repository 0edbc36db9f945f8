from django.contrib import admin

from ts.apps.common.admin_utils import admin_link

from . import models


@admin.register( models.InviteLink )
class InviteLinkAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'token',
        'trip',
        'created_by_link',
        'created_datetime',
        'expires_datetime',
        'usage_count',
        'max_uses',
        'status',
    )
    search_fields = [ 'token', 'trip__title' ]
    readonly_fields = (
        'uuid',
        'token',
        'created_datetime',
        'usage_count',
        'included_location_ids',
        'included_item_ids',
    )

    @admin_link( 'created_by', 'Created By' )
    def created_by_link(self, created_by):
        return created_by.email
