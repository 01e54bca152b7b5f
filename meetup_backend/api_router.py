from django.urls import path, include

urlpatterns = [
    path('', include('groups.urls')),
    path('', include('venues.urls')),
    path('', include('events.urls')),
    path('', include('accounts.urls')),
]
