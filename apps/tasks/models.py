"""
Task models.

Models:
- Task: One unit of reported work, owned by exactly one employee
"""

from django.db import models
from django.conf import settings


class Task(models.Model):
    """
    A task an employee reports on during the day.

    Status drives every report bucket:
    - pending   -> "pending" lists
    - completed -> "completed" lists
    - waiting   -> "blockers" lists, paired with blocker_reason

    Tasks are created by their owner or assigned by a manager, edited by the
    owner (text/status/blocker reason) or replied to by a manager, and only
    ever removed by the owner. A task is never moved to another owner.
    """

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        COMPLETED = 'completed', 'Completed'
        WAITING = 'waiting', 'Waiting (Blocked)'

    # Owner
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='tasks',
        help_text='Employee this task belongs to'
    )
    text = models.TextField(help_text='What the task is about')
    status = models.CharField(
        max_length=15,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    blocker_reason = models.TextField(
        blank=True,
        default='',
        help_text='Only meaningful when status is waiting'
    )

    # Manager feedback
    manager_reply = models.TextField(blank=True, default='')
    manager_reply_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text='Set automatically when a reply is written'
    )

    # Assignment
    assigned_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_tasks',
        help_text='Manager who created this task for the owner'
    )
    is_assigned = models.BooleanField(default=False)
    deadline = models.CharField(
        max_length=100,
        blank=True,
        default='',
        help_text='Free-form due time, shown as entered'
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        verbose_name = 'task'
        verbose_name_plural = 'tasks'
        ordering = ['-updated_at']
        indexes = [
            models.Index(fields=['user', '-updated_at'], name='tasks_task_user_id_7f5b1e_idx'),
            models.Index(fields=['status', 'updated_at'], name='tasks_task_status_3c9a2d_idx'),
        ]

    def __str__(self):
        return f"{self.text[:50]} ({self.get_status_display()})"

    @property
    def is_blocked(self):
        """Check if task is waiting on a blocker."""
        return self.status == self.Status.WAITING

    @property
    def has_manager_reply(self):
        """Check if a manager has replied to this task."""
        return bool(self.manager_reply)
