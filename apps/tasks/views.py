"""
Views for tasks app.

JSON endpoints for:
- Today's task board (list + create)
- Task update / delete
- Manager task assignment
- Own history timeline
"""

from django.contrib.auth.decorators import login_required
from django.core.exceptions import PermissionDenied, ValidationError
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from .forms import AssignTaskForm, TaskForm, TaskUpdateForm
from .models import Task
from .services import assign_task, create_task, delete_task, get_todays_tasks, update_task
from apps.accounts.permissions import manager_required
from apps.reports.responses import (
    error_response, form_error_response, json_body, validation_error_response
)
from apps.reports.services import get_my_history


def serialize_task(task):
    """Full task representation returned by the task endpoints."""
    return {
        'id': task.pk,
        'user': task.user_id,
        'text': task.text,
        'status': task.status,
        'blocker_reason': task.blocker_reason,
        'manager_reply': task.manager_reply,
        'manager_reply_at': task.manager_reply_at,
        'assigned_by': task.assigned_by_id,
        'is_assigned': task.is_assigned,
        'deadline': task.deadline,
        'created_at': task.created_at,
        'updated_at': task.updated_at,
    }


# =============================================================================
# Task Board
# =============================================================================

@login_required
@require_http_methods(["GET", "POST"])
def task_collection(request):
    """
    GET: tasks the caller created today, latest update first.
    POST: create a task for the caller.
    """
    if request.method == 'GET':
        tasks = get_todays_tasks(request.user, timezone.now())
        return JsonResponse([serialize_task(task) for task in tasks], safe=False)

    try:
        form = TaskForm(data=json_body(request))
        if not form.is_valid():
            return form_error_response(form)
        task = create_task(
            user=request.user,
            text=form.cleaned_data['text'],
            status=form.cleaned_data.get('status'),
            blocker_reason=form.cleaned_data.get('blocker_reason', ''),
        )
    except ValidationError as e:
        return validation_error_response(e)

    return JsonResponse(serialize_task(task), status=201)


@login_required
@require_http_methods(["PUT", "DELETE"])
def task_item(request, pk):
    """
    PUT: partial update (owner fields, or a manager reply).
    DELETE: owner removes the task.
    """
    try:
        if request.method == 'DELETE':
            delete_task(pk, request.user)
            return JsonResponse({'id': pk})

        form = TaskUpdateForm(data=json_body(request))
        if not form.is_valid():
            return form_error_response(form)
        task = update_task(pk, request.user, timezone.now(), **form.changed_fields())
    except Task.DoesNotExist:
        return error_response(f"Task not found with ID: {pk}", status=404)
    except PermissionDenied as e:
        return error_response(str(e) or 'User not authorized', status=403)
    except ValidationError as e:
        return validation_error_response(e)

    return JsonResponse(serialize_task(task))


# =============================================================================
# Assignment (Manager)
# =============================================================================

@require_POST
@manager_required
def task_assign(request):
    """Create a task on behalf of an employee."""
    try:
        form = AssignTaskForm(data=json_body(request))
        if not form.is_valid():
            return form_error_response(form)
        task = assign_task(
            manager=request.user,
            assignee=form.cleaned_data['user'],
            text=form.cleaned_data['text'],
            deadline=form.cleaned_data.get('deadline', ''),
        )
    except PermissionDenied as e:
        return error_response(str(e), status=403)
    except ValidationError as e:
        return validation_error_response(e)

    return JsonResponse(serialize_task(task), status=201)


# =============================================================================
# History
# =============================================================================

@login_required
@require_GET
def my_history(request):
    """The caller's tasks grouped into per-day buckets, newest day first."""
    return JsonResponse(get_my_history(request.user), safe=False)
