from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),

    # API routes
    path("api/", include("meetup_backend.api_router")),

    # DRF browsable API auth
    path("api-auth/", include("rest_framework.urls")),
]
