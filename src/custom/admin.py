from django.contrib import admin

from .models import CustomUser


@admin.register( CustomUser )
class CustomUserAdmin( admin.ModelAdmin ):
    list_display = ( 'email', 'uuid', 'first_name', 'last_name', 'is_active', 'is_staff' )
    list_filter = ( 'is_staff', 'is_superuser', 'is_active' )
    search_fields = ( 'email', 'uuid' )
    readonly_fields = ( 'uuid', 'last_login', 'date_joined' )
    exclude = ( 'password', )
    ordering = ( 'id', )
