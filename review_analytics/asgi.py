"""ASGI config for the restaurant review analytics service."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "review_analytics.settings")

application = get_asgi_application()
