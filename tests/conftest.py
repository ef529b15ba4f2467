"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "review_analytics.settings_test")
django.setup()

from tests.base import silence_structlog  # noqa: E402

silence_structlog()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()

