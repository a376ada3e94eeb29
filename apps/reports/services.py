"""
Service layer for reports app.

Turns the flat task collection into the views managers and employees read:

- group_history: per-day {completed, pending, blockers} buckets
- build_team_board: one row per employee, present or missing today
- build_pending_report: outstanding work grouped by employee

The build/group functions are pure: they take already-fetched tasks (any
objects with the Task attributes) and an explicit ``now``. The get_*
functions run the queries and hand the results to them.

Tasks with a status outside pending/completed/waiting are left out of every
bucket. Each such drop is counted and logged as a warning rather than raised.
"""

import logging
from collections import OrderedDict

from django.db.models import Q

from .date_ranges import day_window, local_day
from .filters import EmployeeHistoryFilter, PendingTaskFilter
from apps.accounts.services import get_employee_roster
from apps.tasks.models import Task

logger = logging.getLogger(__name__)

# status value -> bucket name
STATUS_BUCKETS = {
    Task.Status.COMPLETED: 'completed',
    Task.Status.PENDING: 'pending',
    Task.Status.WAITING: 'blockers',
}

OUTSTANDING_STATUSES = (Task.Status.PENDING, Task.Status.WAITING)


def _log_dropped(source, dropped):
    if dropped:
        logger.warning(
            '%s: skipped %d task(s) with unrecognised status', source, dropped
        )


# =============================================================================
# History Grouper
# =============================================================================

def history_item(task, include_updated_at=False):
    """Projection of a task inside a history bucket."""
    item = {
        'id': task.pk,
        'text': task.text,
        'blocker_reason': task.blocker_reason,
        'manager_reply': task.manager_reply,
    }
    if include_updated_at:
        item['updated_at'] = task.updated_at
    return item


def group_history(tasks, include_updated_at=False):
    """
    Group tasks into per-day buckets keyed by the local day of updated_at.

    A bucket's ``date`` is the updated_at of the first task seen for that
    day, whatever the input order or that task's status. A day holding only
    unrecognised statuses still gets an (empty) bucket. Buckets come back
    newest ``date`` first.

    Returns:
        list of {'date', 'completed', 'pending', 'blockers'}
    """
    buckets = OrderedDict()
    dropped = 0

    for task in tasks:
        day = local_day(task.updated_at)
        if day not in buckets:
            buckets[day] = {
                'date': task.updated_at,
                'completed': [],
                'pending': [],
                'blockers': [],
            }

        bucket_name = STATUS_BUCKETS.get(task.status)
        if bucket_name is None:
            dropped += 1
            continue
        buckets[day][bucket_name].append(history_item(task, include_updated_at))

    _log_dropped('history', dropped)
    return sorted(buckets.values(), key=lambda bucket: bucket['date'], reverse=True)


def get_my_history(user):
    """All of the user's tasks as a day-by-day timeline."""
    tasks = Task.objects.filter(user=user).order_by('-updated_at')
    return group_history(tasks)


def get_employee_history(user_id, range_token, now):
    """
    One employee's timeline for a manager, limited to the requested range.

    ``day`` means today here (see resolve_history_start).
    """
    filterset = EmployeeHistoryFilter(
        {'user': user_id, 'range': range_token},
        queryset=Task.objects.order_by('-updated_at'),
        now=now,
    )
    return group_history(filterset.qs, include_updated_at=True)


# =============================================================================
# Team Board Builder
# =============================================================================

def _empty_row(employee):
    return {
        'employee': employee,
        'last_activity': None,
        'completed': [],
        'pending': [],
        'blockers': [],
        'is_missing': True,
    }


def team_task_info(task):
    """Projection of a task on the team board."""
    return {
        'id': task.pk,
        'text': task.text,
        'manager_reply': task.manager_reply,
        'manager_reply_at': task.manager_reply_at,
    }


def _board_sort_key(row):
    # Present before missing; dated rows newest first; undated rows last
    last_activity = row['last_activity']
    if last_activity is None:
        return (row['is_missing'], True, 0.0)
    return (row['is_missing'], False, -last_activity.timestamp())


def build_team_board(employees, tasks, now):
    """
    Merge the roster with today's task activity.

    Args:
        employees: Every employee who should appear, even with no tasks
        tasks: Relevant tasks (updated today, or carrying a manager reply);
            each needs ``user`` / ``user_id`` for its owner
        now: Reference instant that defines "today"

    Returns:
        list of rows {'employee', 'last_activity', 'completed', 'pending',
        'blockers', 'is_missing'}, present employees first, then by most
        recent activity.

    An employee counts as present only if they created a task today. An old
    task that is visible because of a manager reply does not count.
    """
    start, end = day_window(now)
    rows = OrderedDict((employee.pk, _empty_row(employee)) for employee in employees)
    dropped = 0

    for task in tasks:
        row = rows.get(task.user_id)
        if row is None:
            # Owner outside the roster (e.g. deactivated since)
            row = rows[task.user_id] = _empty_row(task.user)

        if start <= task.created_at <= end:
            row['is_missing'] = False

        if row['last_activity'] is None or task.updated_at > row['last_activity']:
            row['last_activity'] = task.updated_at

        info = team_task_info(task)
        if task.status == Task.Status.COMPLETED:
            row['completed'].append(info)
        elif task.status == Task.Status.PENDING:
            row['pending'].append(info)
        elif task.status == Task.Status.WAITING:
            info['reason'] = task.blocker_reason
            info['raw_text'] = task.text
            row['blockers'].append(info)
        else:
            dropped += 1

    _log_dropped('team board', dropped)
    return sorted(rows.values(), key=_board_sort_key)


def get_team_relevant_tasks(now):
    """Tasks updated today, plus any task carrying a manager reply."""
    start, end = day_window(now)
    return (
        Task.objects
        .filter(Q(updated_at__range=(start, end)) | ~Q(manager_reply=''))
        .select_related('user')
        .order_by('-updated_at')
    )


def get_team_board(now):
    """Team board for the current local day."""
    return build_team_board(get_employee_roster(), get_team_relevant_tasks(now), now)


# =============================================================================
# Pending-Report Builder
# =============================================================================

def pending_entry(task):
    """Projection of an outstanding task in the pending report."""
    return {
        'text': task.text,
        'status': task.status,
        'date': task.updated_at,
        'reason': task.blocker_reason if task.status == Task.Status.WAITING else '',
    }


def build_pending_report(tasks):
    """
    Group outstanding (pending / waiting) tasks by owner.

    Only owners with at least one outstanding task appear, in the order
    their first task is seen.

    Returns:
        list of {'employee', 'tasks': [{'text', 'status', 'date', 'reason'}]}
    """
    report = OrderedDict()
    for task in tasks:
        if task.status not in OUTSTANDING_STATUSES:
            continue
        if task.user_id not in report:
            report[task.user_id] = {'employee': task.user, 'tasks': []}
        report[task.user_id]['tasks'].append(pending_entry(task))
    return list(report.values())


def get_pending_report(range_token, now):
    """Outstanding work updated since the start of the requested range."""
    filterset = PendingTaskFilter(
        {'range': range_token},
        queryset=Task.objects.select_related('user').order_by('-updated_at'),
        now=now,
    )
    return build_pending_report(filterset.qs)
