"""
Shared fixtures for the daily_report test suite.

- now: fixed reference instant (10 Mar 2026, 14:00 local time)
- at: build an aware local datetime relative to ``now``'s day
- make_task: create a Task with explicit created_at/updated_at
- fake_task / fake_user: lightweight stand-ins for the pure builders
"""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest
from django.utils import timezone


@pytest.fixture
def now():
    return timezone.make_aware(datetime(2026, 3, 10, 14, 0))


@pytest.fixture
def at(now):
    """at(hour, minute=0, days_ago=0) -> aware local datetime."""
    def _at(hour, minute=0, days_ago=0):
        day = timezone.localtime(now).date() - timedelta(days=days_ago)
        return timezone.make_aware(datetime(day.year, day.month, day.day, hour, minute))
    return _at


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def make_user(db, django_user_model):
    counter = {'n': 0}

    def _make_user(first_name='Emp', role='employee', **extra):
        counter['n'] += 1
        return django_user_model.objects.create_user(
            email=f"{first_name.lower()}{counter['n']}@example.com",
            password='not-used-in-tests',
            first_name=first_name,
            last_name='Tester',
            role=role,
            **extra,
        )
    return _make_user


@pytest.fixture
def employee(make_user):
    return make_user('Asha')


@pytest.fixture
def other_employee(make_user):
    return make_user('Bilal')


@pytest.fixture
def manager(make_user):
    return make_user('Meera', role='manager')


# =============================================================================
# Tasks
# =============================================================================

@pytest.fixture
def make_task(db):
    from apps.tasks.models import Task

    def _make_task(user, text='task', status='pending', created_at=None,
                   updated_at=None, **fields):
        task = Task.objects.create(user=user, text=text, status=status, **fields)
        stamps = {}
        if created_at is not None:
            stamps['created_at'] = created_at
        if updated_at is not None:
            stamps['updated_at'] = updated_at
        elif created_at is not None:
            stamps['updated_at'] = created_at
        if stamps:
            # auto_now/auto_now_add fields are only bypassed by update()
            Task.objects.filter(pk=task.pk).update(**stamps)
            task.refresh_from_db()
        return task
    return _make_task


@pytest.fixture
def fake_user():
    def _fake_user(pk, name='Someone'):
        return SimpleNamespace(pk=pk, name=name)
    return _fake_user


@pytest.fixture
def fake_task():
    counter = {'n': 0}

    def _fake_task(user, status='pending', text=None, created_at=None,
                   updated_at=None, blocker_reason='', manager_reply='',
                   manager_reply_at=None):
        counter['n'] += 1
        return SimpleNamespace(
            pk=counter['n'],
            user=user,
            user_id=user.pk,
            text=text or f"task {counter['n']}",
            status=status,
            blocker_reason=blocker_reason,
            manager_reply=manager_reply,
            manager_reply_at=manager_reply_at,
            created_at=created_at,
            updated_at=updated_at or created_at,
        )
    return _fake_task
