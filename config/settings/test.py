"""
Test settings - SQLite, in-memory channel layer, console-only logging
Usage: python manage.py test --settings=config.settings.test (or pytest)
"""
from .base import *

DEBUG = False

SECRET_KEY = 'django-insecure-test-key-not-for-production'

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'test_db.sqlite3',
        'ATOMIC_REQUESTS': True,
    }
}

SIMPLE_JWT['SIGNING_KEY'] = SECRET_KEY

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['null'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'django.request': {
            'handlers': ['null'],
            'level': 'ERROR',
            'propagate': False,
        },
    },
}
