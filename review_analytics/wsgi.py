"""WSGI config for the restaurant review analytics service."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "review_analytics.settings")

application = get_wsgi_application()
