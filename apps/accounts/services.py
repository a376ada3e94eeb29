"""
Service layer for accounts app.

The user directory as seen by the reports: the employee roster and the
minimal identity (id, name, email) embedded in report rows.
"""

from .models import User


def get_employee_roster():
    """Active employees, ordered by name."""
    return (
        User.objects.employees()
        .only('id', 'first_name', 'last_name', 'email')
        .order_by('first_name', 'last_name')
    )


def user_summary(user):
    """Minimal owner identity for report payloads."""
    if user is None:
        return None
    return {
        'id': user.pk,
        'name': user.get_full_name(),
        'email': user.email,
    }
