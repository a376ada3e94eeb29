"""
URL configuration for tasks app.

Includes:
- Today's task board (list + create)
- Task update / delete
- Manager assignment
- Own history timeline
"""

from django.urls import path
from . import views

app_name = 'tasks'

urlpatterns = [
    path('', views.task_collection, name='task_collection'),
    path('history/', views.my_history, name='my_history'),
    path('assign/', views.task_assign, name='task_assign'),
    path('<int:pk>/', views.task_item, name='task_item'),
]
