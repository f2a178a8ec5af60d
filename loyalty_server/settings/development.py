"""
Development settings for loyalty_server project.
"""

from decouple import config
from .base import *

DEBUG = config('DEBUG', default=True, cast=bool)

# SQLite unless a MySQL database is configured
if not config('MYSQL_DATABASE', default=''):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
            'OPTIONS': {
                # Writers take the lock up front so balance updates serialize
                'transaction_mode': 'IMMEDIATE',
                'timeout': 20,
            },
        }
    }

LOGGING['loggers']['apps']['level'] = 'DEBUG'
