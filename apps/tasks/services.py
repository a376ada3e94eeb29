"""
Service layer for tasks app.

All business logic for task operations is centralized here so views stay
thin. ``now`` is passed in by the caller wherever a timestamp is written or
a day window is needed.

Services:
- create_task: Employee logs a task for themselves
- assign_task: Manager creates a task on behalf of an employee
- update_task: Owner edits text/status/blocker reason, manager replies
- delete_task: Owner removes a task
- get_todays_tasks: Tasks the user created today
"""

import logging

from django.db import transaction
from django.core.exceptions import PermissionDenied, ValidationError

from .models import Task
from .permissions import (
    can_assign_tasks, can_delete_task, can_edit_task, get_editable_fields
)
from apps.reports.date_ranges import day_window

logger = logging.getLogger(__name__)


def _validate_status(status):
    if status not in Task.Status.values:
        raise ValidationError(f"Invalid status: {status}")


def create_task(user, text, status=Task.Status.PENDING, blocker_reason=''):
    """
    Create a task owned by ``user``.

    Args:
        user: Owner (the logged-in employee)
        text: Task description (required)
        status: pending/completed/waiting (default: pending)
        blocker_reason: Why the task is waiting (optional)

    Returns:
        Created Task instance

    Raises:
        ValidationError: If text is missing or status is unknown
    """
    if not text or not text.strip():
        raise ValidationError("Please add a task description")

    status = status or Task.Status.PENDING
    _validate_status(status)

    task = Task.objects.create(
        user=user,
        text=text.strip(),
        status=status,
        blocker_reason=blocker_reason or '',
    )
    logger.info('Task %s created by user %s', task.pk, user.pk)
    return task


def assign_task(manager, assignee, text, deadline=''):
    """
    Create a pending task for ``assignee`` on behalf of ``manager``.

    Raises:
        PermissionDenied: If the caller is not a manager
        ValidationError: If text or assignee is missing
    """
    if not can_assign_tasks(manager):
        raise PermissionDenied("Only managers can assign tasks.")

    if not text or not text.strip() or assignee is None:
        raise ValidationError("Please add text and select a user.")

    task = Task.objects.create(
        user=assignee,
        text=text.strip(),
        status=Task.Status.PENDING,
        assigned_by=manager,
        is_assigned=True,
        deadline=deadline or '',
    )
    # Real-time delivery to the assignee would hook in here.
    logger.info('Task %s assigned to user %s by %s', task.pk, assignee.pk, manager.pk)
    return task


def update_task(task_id, user, now, **changes):
    """
    Apply a partial update to a task.

    Owners may change text, status and blocker_reason. Managers may write
    manager_reply; a non-empty reply stamps manager_reply_at with ``now``.

    Returns:
        Updated Task instance

    Raises:
        Task.DoesNotExist: If no task has this id
        PermissionDenied: If the user may not touch this task or one of the fields
        ValidationError: If a value is invalid
    """
    with transaction.atomic():
        task = Task.objects.select_for_update().get(pk=task_id)

        if not can_edit_task(user, task):
            raise PermissionDenied("User not authorized")

        allowed = get_editable_fields(user, task)
        refused = [field for field in changes if field not in allowed]
        if refused:
            raise PermissionDenied(
                f"Not allowed to change: {', '.join(sorted(refused))}"
            )

        if 'text' in changes:
            text = changes['text'] or ''
            if not text.strip():
                raise ValidationError("Task text cannot be empty.")
            changes['text'] = text.strip()

        if 'status' in changes:
            _validate_status(changes['status'])

        for field, value in changes.items():
            setattr(task, field, value if value is not None else '')

        if changes.get('manager_reply'):
            task.manager_reply_at = now

        task.save()

    return task


def delete_task(task_id, user):
    """
    Remove a task. Only its owner may do so.

    Raises:
        Task.DoesNotExist: If no task has this id
        PermissionDenied: If the user is not the owner
    """
    task = Task.objects.get(pk=task_id)

    if not can_delete_task(user, task):
        logger.warning(
            'Unauthorized delete attempt: task owner %s vs request user %s',
            task.user_id, user.pk
        )
        raise PermissionDenied(
            f"Unauthorized! Task owner: {task.user_id} | Your ID: {user.pk}"
        )

    task.delete()
    logger.info('Task %s deleted by user %s', task_id, user.pk)
    return task_id


def get_todays_tasks(user, now):
    """Tasks ``user`` created during the current local day, latest update first."""
    start, end = day_window(now)
    return Task.objects.filter(
        user=user,
        created_at__range=(start, end),
    ).order_by('-updated_at')
