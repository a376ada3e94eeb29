"""
Views for status_updates app.

JSON endpoints for the daily status snapshot:
- Save today's snapshot (201 when created, 200 when overwritten)
- Today's snapshot
- Own history
- Team snapshots (Manager only)
"""

from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST

from .services import (
    get_snapshot_history, get_team_snapshots, get_today_snapshot, upsert_snapshot
)
from apps.accounts.permissions import manager_required
from apps.accounts.services import user_summary
from apps.reports.responses import json_body, validation_error_response


def serialize_snapshot(snapshot, with_owner=False):
    return {
        'id': snapshot.pk,
        'user': user_summary(snapshot.user) if with_owner else snapshot.user_id,
        'date': snapshot.date,
        'completed': snapshot.completed,
        'pending': snapshot.pending,
        'blockers': snapshot.blockers,
        'created_at': snapshot.created_at,
        'updated_at': snapshot.updated_at,
    }


@login_required
@require_POST
def save_status(request):
    """Create or overwrite the caller's snapshot for today."""
    try:
        payload = json_body(request)
        snapshot, created = upsert_snapshot(
            user=request.user,
            completed=payload.get('completed'),
            pending=payload.get('pending'),
            blockers=payload.get('blockers'),
            now=timezone.now(),
        )
    except ValidationError as e:
        return validation_error_response(e)

    return JsonResponse(serialize_snapshot(snapshot), status=201 if created else 200)


@login_required
@require_GET
def today_status(request):
    """The caller's snapshot for today, or null."""
    snapshot = get_today_snapshot(request.user, timezone.now())
    data = serialize_snapshot(snapshot) if snapshot else None
    return JsonResponse(data, safe=False)


@login_required
@require_GET
def my_status_history(request):
    snapshots = get_snapshot_history(request.user)
    return JsonResponse([serialize_snapshot(s) for s in snapshots], safe=False)


@require_GET
@manager_required
def team_statuses(request):
    """All snapshots with owner name and email (Manager only)."""
    snapshots = get_team_snapshots()
    return JsonResponse(
        [serialize_snapshot(s, with_owner=True) for s in snapshots], safe=False
    )
