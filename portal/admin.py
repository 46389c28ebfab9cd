from django.contrib import admin
from .models import Notice, Notification, SystemLog


@admin.register(Notice)
class NoticeAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "is_important", "author", "department", "published_at", "expires_at")
    list_filter = ("type", "is_important", "department")
    search_fields = ("title", "content", "author__username")
    ordering = ("-published_at",)
    readonly_fields = ("id", "created_at", "updated_at")


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("title", "user", "type", "is_read", "created_at")
    list_filter = ("type", "is_read")
    search_fields = ("title", "user__username")


@admin.register(SystemLog)
class SystemLogAdmin(admin.ModelAdmin):
    list_display = ("timestamp", "category", "user", "message")
    list_filter = ("category",)
    search_fields = ("message",)
    readonly_fields = ("user", "category", "message", "meta", "timestamp")

    def has_add_permission(self, request):
        return False
