from django.contrib import admin
from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("name", "group", "venue", "type", "start_date", "end_date")
    search_fields = ("name", "description")
    list_filter = ("type",)
