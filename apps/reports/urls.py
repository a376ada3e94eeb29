"""
URL configuration for reports app.
"""

from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    path('team/', views.team_board, name='team_board'),
    path('pending/', views.pending_report, name='pending_report'),
    path('employees/<int:user_id>/history/', views.employee_history, name='employee_history'),
]
