"""
Permission helpers for tasks app.

Role-based access control for task operations:
- Owner: edit text/status/blocker reason, delete
- Manager: reply to any task, assign tasks to employees
"""

# Fields each party may change through update_task()
OWNER_EDITABLE_FIELDS = ('text', 'status', 'blocker_reason')
MANAGER_EDITABLE_FIELDS = ('manager_reply',)


def is_task_owner(user, task):
    """Check if user owns the task."""
    return user.is_authenticated and task.user_id == user.pk


def can_edit_task(user, task):
    """
    Check if user can touch a task at all.

    Rules:
    - Owner can edit their own task
    - Manager can reply to any task
    """
    if not user.is_authenticated:
        return False
    return is_task_owner(user, task) or user.role == 'manager'


def get_editable_fields(user, task):
    """
    Fields this user may change on this task.

    A manager who owns the task gets both sets.
    """
    fields = []
    if is_task_owner(user, task):
        fields.extend(OWNER_EDITABLE_FIELDS)
    if user.is_authenticated and user.role == 'manager':
        fields.extend(MANAGER_EDITABLE_FIELDS)
    return fields


def can_delete_task(user, task):
    """Only the owner can remove a task."""
    return is_task_owner(user, task)


def can_assign_tasks(user):
    """Only managers can create tasks on behalf of employees."""
    return user.is_authenticated and user.role == 'manager'
