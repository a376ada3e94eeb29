from django.apps import AppConfig


class StatusUpdatesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.status_updates'
    verbose_name = 'Status Updates'
