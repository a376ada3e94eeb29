"""
Role checks shared by the request layer.

Managers may view the team board, pending reports, any employee's history
and the team's status snapshots. Everything else is open to any
authenticated user, scoped to their own records by the services.
"""

from functools import wraps

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse


def is_manager(user):
    """Check if user is an authenticated Manager."""
    return user.is_authenticated and user.role == 'manager'


def manager_required(view_func):
    """
    Restrict a JSON view to managers.

    Anonymous users are sent to the login page by ``login_required``;
    authenticated non-managers get a 403 JSON body.
    """
    @login_required
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not is_manager(request.user):
            return JsonResponse({'message': 'Not authorized as a manager'}, status=403)
        return view_func(request, *args, **kwargs)
    return _wrapped
