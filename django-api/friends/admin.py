from django.contrib import admin

from friends.models import Friendship


@admin.register(Friendship)
class FriendshipAdmin(admin.ModelAdmin):
    list_display = ["requester", "recipient", "status", "updated_at"]
    list_filter = ["status"]
