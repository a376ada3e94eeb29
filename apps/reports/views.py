"""
Views for reports app.

Manager-only JSON endpoints:
- Team board (who reported today, who is missing)
- Pending-work report for a range
- One employee's history for a range
"""

from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from .responses import validation_error_response
from .services import get_employee_history, get_pending_report, get_team_board
from apps.accounts.permissions import manager_required
from apps.accounts.services import user_summary


def _with_employee_summary(rows):
    """Replace user instances in report rows with their minimal identity."""
    return [dict(row, employee=user_summary(row['employee'])) for row in rows]


@require_GET
@manager_required
def team_board(request):
    """Today's board: one row per employee, present first."""
    rows = get_team_board(timezone.now())
    return JsonResponse(_with_employee_summary(rows), safe=False)


@require_GET
@manager_required
def pending_report(request):
    """Outstanding tasks grouped by employee (?range=day|week|month)."""
    rows = get_pending_report(request.GET.get('range'), timezone.now())
    return JsonResponse(_with_employee_summary(rows), safe=False)


@require_GET
@manager_required
def employee_history(request, user_id):
    """Per-day timeline of one employee (?range=day|week|month)."""
    try:
        history = get_employee_history(user_id, request.GET.get('range'), timezone.now())
    except ValidationError as e:
        return validation_error_response(e)
    return JsonResponse(history, safe=False)
