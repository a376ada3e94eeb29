"""
Django test settings for daily_report project.

Used by pytest-django (see [tool.pytest.ini_options] in pyproject.toml).
"""

from .base import *

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Fast hashing for test users
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# Fixed zone so calendar-day tests do not depend on the environment
TIME_ZONE = 'Asia/Kolkata'

REPORT_DEFAULT_RANGE = 'week'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': True,
        },
    },
}
