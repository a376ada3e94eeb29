"""
Report filters using django-filter.

Provides the task selections behind the manager reports:
- PendingTaskFilter: pending/waiting tasks updated since the range start
- EmployeeHistoryFilter: one employee's tasks updated since the range start

Both take the range token (day/week/month) as the ``range`` parameter and an
explicit ``now``. A missing token uses settings.REPORT_DEFAULT_RANGE;
unknown tokens resolve as week.

Usage in services:
    filterset = PendingTaskFilter({'range': 'month'}, queryset=qs, now=now)
    tasks = filterset.qs
"""

import django_filters
from django.conf import settings
from django.core.exceptions import ValidationError

from .date_ranges import resolve_history_start, resolve_range_start
from apps.tasks.models import Task


class TaskRangeFilter(django_filters.FilterSet):
    """
    Base filter: ``updated_at >= range_resolver(range, now)``.
    """

    range = django_filters.CharFilter(method='filter_range', label='Range')

    range_resolver = staticmethod(resolve_range_start)

    class Meta:
        model = Task
        fields = []

    def __init__(self, data=None, *args, now, **kwargs):
        data = dict(data or {})
        if not data.get('range'):
            data['range'] = settings.REPORT_DEFAULT_RANGE
        super().__init__(data, *args, **kwargs)
        self.now = now

    def filter_range(self, queryset, name, value):
        return queryset.filter(updated_at__gte=self.range_resolver(value, self.now))

    @property
    def qs(self):
        # An invalid bound form would silently skip its filters
        if not self.is_valid():
            raise ValidationError(
                '; '.join(f"{field}: {' '.join(errors)}" for field, errors in self.errors.items())
            )
        return super().qs


class PendingTaskFilter(TaskRangeFilter):
    """Outstanding work (pending or waiting) within the range, all employees."""

    class Meta(TaskRangeFilter.Meta):
        pass

    def filter_queryset(self, queryset):
        queryset = queryset.filter(
            status__in=[Task.Status.PENDING, Task.Status.WAITING]
        )
        return super().filter_queryset(queryset)


class EmployeeHistoryFilter(TaskRangeFilter):
    """One employee's tasks within the range; ``day`` means today."""

    user = django_filters.NumberFilter(field_name='user_id', required=True)

    range_resolver = staticmethod(resolve_history_start)

    class Meta(TaskRangeFilter.Meta):
        fields = ['user']
