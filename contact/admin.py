"""
Contact Enquiry Django Admin Configuration
"""
from django.contrib import admin
from .models import Enquiry


@admin.register(Enquiry)
class EnquiryAdmin(admin.ModelAdmin):
    """Admin interface for website enquiries."""

    list_display = [
        'reference_id', 'name', 'email', 'subject', 'submitted_at'
    ]

    list_filter = [
        'submitted_at'
    ]

    search_fields = [
        'name', 'email', 'subject', 'message'
    ]

    readonly_fields = [
        'id', 'reference_id', 'submitted_at'
    ]

    fieldsets = (
        ('Enquiry', {
            'fields': ('reference_id', 'name', 'email', 'subject', 'message')
        }),
        ('Metadata', {
            'fields': ('id', 'submitted_at'),
            'classes': ('collapse',)
        }),
    )

    def reference_id(self, obj):
        return obj.reference_id
    reference_id.short_description = 'Reference'
