"""
Base Django settings for subway_project.
Common settings shared between development and production.
"""
import os
import sys
from pathlib import Path
import environ

# Build paths
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Check if running tests (manage.py test or pytest)
TESTING = 'test' in sys.argv or 'pytest' in sys.modules

# Environment variables
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, ['*']),
    LOG_LEVEL=(str, 'INFO'),
    TRUSTED_PROXIES=(list, []),
)
environ.Env.read_env(os.path.join(BASE_DIR, '.env'))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env('SECRET_KEY', default='django-insecure-change-me-in-production')

ALLOWED_HOSTS = env('ALLOWED_HOSTS')

# Reverse proxies whose X-Forwarded-For header is trusted for audit IPs
TRUSTED_PROXIES = env('TRUSTED_PROXIES')

# Application definition
INSTALLED_APPS = [
    # Project apps
    'core.apps.CoreConfig',
    'station.apps.StationConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    # Custom security middleware
    'core.middleware.ContentSecurityPolicyMiddleware',
    'core.middleware.ReferrerPolicyMiddleware',
    'core.middleware.PermissionsPolicyMiddleware',
]

ROOT_URLCONF = 'subway_project.urls'

WSGI_APPLICATION = 'subway_project.wsgi.application'

# Internationalization
LANGUAGE_CODE = 'ko-kr'
TIME_ZONE = 'Asia/Seoul'
USE_I18N = True
USE_TZ = True

# Static files (none are served; the live test server still needs a prefix)
STATIC_URL = 'static/'

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ==========================================================================
# STATION SETTINGS
# ==========================================================================
# Stations created by `manage.py seed_stations` when no names are given
DEFAULT_STATIONS = [
    '강남역',
    '역삼역',
    '선릉역',
    '신논현역',
    '언주역',
    '서대문역',
]

# ==========================================================================
# LOGGING
# ==========================================================================
LOG_LEVEL = 'WARNING' if TESTING else env('LOG_LEVEL')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
        'subway.audit': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'subway.api': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
