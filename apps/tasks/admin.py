"""
Admin configuration for tasks app.
"""

from django.contrib import admin
from django.utils.html import format_html
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    """Admin for Task model."""

    list_display = (
        'short_text', 'user', 'status_display', 'is_assigned',
        'has_reply_display', 'created_at', 'updated_at'
    )
    list_filter = ('status', 'is_assigned', 'created_at', 'updated_at')
    search_fields = ('text', 'blocker_reason', 'manager_reply', 'user__email')
    ordering = ('-updated_at',)
    date_hierarchy = 'updated_at'

    readonly_fields = ('created_at', 'updated_at', 'manager_reply_at')

    fieldsets = (
        (None, {
            'fields': ('user', 'text', 'status', 'blocker_reason')
        }),
        ('Manager', {
            'fields': ('manager_reply', 'manager_reply_at')
        }),
        ('Assignment', {
            'fields': ('assigned_by', 'is_assigned', 'deadline'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related('user', 'assigned_by')

    def short_text(self, obj):
        return obj.text[:60]
    short_text.short_description = 'Task'

    def status_display(self, obj):
        """Display status with color coding."""
        colors = {
            'pending': '#FFA500',    # Orange
            'completed': '#27ae60',  # Green
            'waiting': '#e74c3c',    # Red
        }
        color = colors.get(obj.status, '#000')
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color, obj.get_status_display()
        )
    status_display.short_description = 'Status'
    status_display.admin_order_field = 'status'

    def has_reply_display(self, obj):
        return obj.has_manager_reply
    has_reply_display.short_description = 'Replied'
    has_reply_display.boolean = True
