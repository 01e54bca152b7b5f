from django.contrib import admin
from .models import Group, Image, Membership


class MembershipInline(admin.TabularInline):
    model = Membership
    extra = 0


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    list_display = ("name", "organizer", "type", "private", "city", "state")
    search_fields = ("name", "city", "state")
    list_filter = ("type", "private")
    inlines = [MembershipInline]


@admin.register(Membership)
class MembershipAdmin(admin.ModelAdmin):
    list_display = ("user", "group", "status", "created_at")
    list_filter = ("status",)


@admin.register(Image)
class ImageAdmin(admin.ModelAdmin):
    list_display = ("id", "content_type", "imageable_id", "url")
