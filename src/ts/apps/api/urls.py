from django.urls import path, include


urlpatterns = [
    # Feature-specific delegated API routes
    path('v1/sharing/', include('ts.apps.sharing.api.urls')),
]
