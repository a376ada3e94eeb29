"""
Admin for daily_report users.

Managers are created here (there is no sign-up endpoint). The changelist
shows each user's role and how many tasks and status snapshots they have
filed, so inactive reporters are easy to spot.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count
from django.utils.html import format_html

from .models import User

ROLE_COLORS = {
    User.Role.MANAGER: '#2563EB',
    User.Role.EMPLOYEE: '#6B7280',
}


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = (
        'email', 'get_full_name', 'role_badge', 'task_count',
        'snapshot_count', 'is_active',
    )
    list_filter = ('role', 'is_active')
    search_fields = ('email', 'first_name', 'last_name')
    ordering = ('first_name', 'last_name')

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Profile', {'fields': ('first_name', 'last_name', 'role')}),
        ('Access', {
            'fields': ('is_active', 'is_staff', 'is_superuser'),
            'classes': ('collapse',),
        }),
        ('Activity', {'fields': ('last_login', 'created_at', 'updated_at')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'first_name', 'last_name', 'role', 'password1', 'password2'),
        }),
    )
    readonly_fields = ('created_at', 'updated_at', 'last_login')

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            num_tasks=Count('tasks', distinct=True),
            num_snapshots=Count('status_snapshots', distinct=True),
        )

    @admin.display(description='Role', ordering='role')
    def role_badge(self, obj):
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            ROLE_COLORS.get(obj.role, '#000'), obj.get_role_display()
        )

    @admin.display(description='Tasks', ordering='num_tasks')
    def task_count(self, obj):
        return obj.num_tasks

    @admin.display(description='Snapshots', ordering='num_snapshots')
    def snapshot_count(self, obj):
        return obj.num_snapshots
