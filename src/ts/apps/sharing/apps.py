from django.apps import AppConfig


class SharingConfig( AppConfig ):
    default_auto_field = "django.db.models.BigAutoField"
    name = "ts.apps.sharing"

    def ready( self ):
        import ts.apps.sharing.signals  # noqa: F401
        return
