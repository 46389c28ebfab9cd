from django.contrib import admin
from .models import Department, Subject, SubjectColorMap


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "created_at")
    search_fields = ("name", "code")
    ordering = ("name",)


@admin.register(Subject)
class SubjectAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "department", "semester", "credits", "is_active")
    search_fields = ("code", "name", "department__name")
    list_filter = ("department", "semester", "is_active")
    filter_horizontal = ("faculty",)
    ordering = ("code",)


@admin.register(SubjectColorMap)
class SubjectColorMapAdmin(admin.ModelAdmin):
    list_display = ("subject", "color_index", "created_at")
    ordering = ("color_index",)
    readonly_fields = ("created_at",)
