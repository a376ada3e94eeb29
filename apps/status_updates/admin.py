"""
Admin configuration for status_updates app.
"""

from django.contrib import admin
from .models import StatusSnapshot


@admin.register(StatusSnapshot)
class StatusSnapshotAdmin(admin.ModelAdmin):
    """Admin for StatusSnapshot model."""

    list_display = ('user', 'date', 'completed_count', 'pending_count', 'blocker_count')
    list_filter = ('date',)
    search_fields = ('user__email', 'user__first_name', 'user__last_name')
    ordering = ('-date',)
    date_hierarchy = 'date'
    readonly_fields = ('created_at', 'updated_at')

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related('user')

    def completed_count(self, obj):
        return len(obj.completed or [])
    completed_count.short_description = 'Completed'

    def pending_count(self, obj):
        return len(obj.pending or [])
    pending_count.short_description = 'Pending'

    def blocker_count(self, obj):
        return len(obj.blockers or [])
    blocker_count.short_description = 'Blockers'
