from django.contrib import admin
from .models import Venue


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ("id", "group", "address", "city", "state")
    search_fields = ("address", "city", "state")
    list_filter = ("state",)
