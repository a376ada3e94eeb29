"""
Daily status snapshot model.

Models:
- StatusSnapshot: Free-text completed/pending/blockers lists, one per user
  per local calendar day
"""

from django.db import models
from django.conf import settings
from django.utils import timezone


class StatusSnapshot(models.Model):
    """
    A user's free-text summary of their day.

    Independent of Task: the lists hold plain strings, not task references.
    Saving again on the same day overwrites the lists of that day's snapshot
    (see services.upsert_snapshot); earlier days are kept as history.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='status_snapshots',
    )
    date = models.DateTimeField(default=timezone.now, db_index=True)
    completed = models.JSONField(default=list, blank=True)
    pending = models.JSONField(default=list, blank=True)
    blockers = models.JSONField(default=list, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'status snapshot'
        verbose_name_plural = 'status snapshots'
        ordering = ['-date']
        indexes = [
            models.Index(fields=['user', '-date'], name='status_snap_user_date_idx'),
        ]

    def __str__(self):
        return f"Status of {self.user} on {timezone.localtime(self.date):%d %b %Y}"
