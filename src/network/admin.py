"""Admin configuration for the network app."""

from django.contrib import admin

from .models import Follow, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Browse graph members."""

    list_display = ("id", "name", "created_at")
    search_fields = ("name",)
    readonly_fields = ("created_at",)


@admin.register(Follow)
class FollowAdmin(admin.ModelAdmin):
    """Browse follow edges."""

    list_display = ("follower", "following", "created_at")
    search_fields = ("follower__name", "following__name")
    list_select_related = ("follower", "following")
    readonly_fields = ("created_at",)
