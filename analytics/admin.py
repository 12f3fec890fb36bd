"""
Site Analytics Django Admin Configuration
"""
from django.contrib import admin
from .models import VisitCounter


@admin.register(VisitCounter)
class VisitCounterAdmin(admin.ModelAdmin):
    """Read-only view of counters; counts only change through the counter store."""

    list_display = ['key', 'count']
    readonly_fields = ['key', 'count']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
