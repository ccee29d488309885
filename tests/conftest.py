"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "admin_service.settings_test")
django.setup()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def authenticated_client():
    """Provide a test client authenticated as user 1."""
    from tests.factories import make_token

    return Client(HTTP_AUTHORIZATION=f"Bearer {make_token(1)}")
