from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    list_display = ("username", "email", "first_name", "last_name", "role", "department", "is_active")
    list_filter = ("role", "department", "is_active")
    search_fields = ("username", "email", "first_name", "last_name", "enrollment_no")
    fieldsets = UserAdmin.fieldsets + (
        ("Campus", {"fields": ("role", "department", "enrollment_no", "semester", "avatar")}),
    )
    add_fieldsets = UserAdmin.add_fieldsets + (
        ("Campus", {"fields": ("role", "department")}),
    )
