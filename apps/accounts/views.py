"""
Views for accounts app.
"""

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from .permissions import manager_required
from .services import get_employee_roster, user_summary


@require_GET
@manager_required
def employee_list(request):
    """Employee roster (Manager only)."""
    employees = [user_summary(emp) for emp in get_employee_roster()]
    return JsonResponse(employees, safe=False)
