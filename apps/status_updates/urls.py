"""
URL configuration for status_updates app.
"""

from django.urls import path
from . import views

app_name = 'status_updates'

urlpatterns = [
    path('', views.save_status, name='save_status'),
    path('today/', views.today_status, name='today_status'),
    path('history/', views.my_status_history, name='my_status_history'),
    path('team/', views.team_statuses, name='team_statuses'),
]
