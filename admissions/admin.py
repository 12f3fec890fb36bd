"""
Admissions Django Admin Configuration
"""
from django.contrib import admin
from .models import Application


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    """Admin interface for admission applications."""

    list_display = [
        'reference_id', 'full_name', 'email', 'course', 'status', 'submitted_at'
    ]

    list_filter = [
        'status', 'course', 'submitted_at'
    ]

    search_fields = [
        'full_name', 'email', 'phone', 'course', 'qualification'
    ]

    readonly_fields = [
        'id', 'reference_id', 'submitted_at', 'updated_at'
    ]

    fieldsets = (
        ('Applicant', {
            'fields': ('reference_id', 'full_name', 'email', 'phone', 'date_of_birth', 'address')
        }),
        ('Programme', {
            'fields': ('course', 'qualification', 'message')
        }),
        ('Status', {
            'fields': ('status',)
        }),
        ('Metadata', {
            'fields': ('id', 'submitted_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def reference_id(self, obj):
        return obj.reference_id
    reference_id.short_description = 'Reference'
