"""
URL configuration for daily_report project.
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings

urlpatterns = [
    path('admin/', admin.site.urls),

    # App URLs
    path('accounts/', include('apps.accounts.urls', namespace='accounts')),
    path('tasks/', include('apps.tasks.urls', namespace='tasks')),
    path('status/', include('apps.status_updates.urls', namespace='status_updates')),
    path('reports/', include('apps.reports.urls', namespace='reports')),
]

if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    import debug_toolbar
    urlpatterns = [
        path('__debug__/', include(debug_toolbar.urls)),
    ] + urlpatterns

# Admin site customization
admin.site.site_header = 'Daily Report Administration'
admin.site.site_title = 'Daily Report Admin'
admin.site.index_title = 'Welcome to Daily Report Admin'
