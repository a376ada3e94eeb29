"""
Service layer for status_updates app.

One snapshot per user per local calendar day:
- upsert_snapshot: Create today's snapshot or overwrite its lists
- get_today_snapshot: Today's snapshot, if any
- get_snapshot_history: All of a user's snapshots, newest first
- get_team_snapshots: Everyone's snapshots, newest first

The upsert is find-then-write. The found row is locked for the update, but
two first writes for the same day can still race and insert two rows.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from .models import StatusSnapshot
from apps.reports.date_ranges import day_window

logger = logging.getLogger(__name__)


def _clean_items(name, items):
    """Check one list of free-text entries; entries are stored as sent."""
    if items is None:
        return []
    if not isinstance(items, (list, tuple)):
        raise ValidationError(f"{name} must be a list of strings.")
    if not all(isinstance(item, str) for item in items):
        raise ValidationError(f"{name} must be a list of strings.")
    return list(items)


def _todays_snapshots(user, now):
    start, end = day_window(now)
    return StatusSnapshot.objects.filter(user=user, date__range=(start, end))


def upsert_snapshot(user, completed, pending, blockers, now):
    """
    Create or overwrite the user's snapshot for the day containing ``now``.

    Returns:
        (snapshot, created) - created is False when an existing snapshot
        for today was overwritten

    Raises:
        ValidationError: If a list is not a list of strings
    """
    completed = _clean_items('completed', completed)
    pending = _clean_items('pending', pending)
    blockers = _clean_items('blockers', blockers)

    with transaction.atomic():
        snapshot = (
            _todays_snapshots(user, now)
            .select_for_update()
            .order_by('-date')
            .first()
        )

        if snapshot is not None:
            snapshot.completed = completed
            snapshot.pending = pending
            snapshot.blockers = blockers
            snapshot.save(update_fields=['completed', 'pending', 'blockers', 'updated_at'])
            logger.debug('Status snapshot %s updated for user %s', snapshot.pk, user.pk)
            return snapshot, False

        snapshot = StatusSnapshot.objects.create(
            user=user,
            date=now,
            completed=completed,
            pending=pending,
            blockers=blockers,
        )
        logger.debug('Status snapshot %s created for user %s', snapshot.pk, user.pk)
        return snapshot, True


def get_today_snapshot(user, now):
    """The user's snapshot for the day containing ``now``, or None."""
    return _todays_snapshots(user, now).order_by('-date').first()


def get_snapshot_history(user):
    """Every snapshot of the user, newest day first."""
    return StatusSnapshot.objects.filter(user=user).order_by('-date')


def get_team_snapshots():
    """Every snapshot of every user with the owner loaded, newest day first."""
    return StatusSnapshot.objects.select_related('user').order_by('-date')
