"""
Test configuration for the loyalty points server.
"""
import os

import django
import pytest


def pytest_configure():
    """Configure Django settings for testing."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'loyalty_server.settings.test')
    django.setup()


@pytest.fixture
def api_client():
    """Unauthenticated DRF test client."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def customer():
    """A customer holding 5000 points, all backed by ledger entries."""
    from tests.factories import UserFactory, credit
    return credit(UserFactory(), 5000)


@pytest.fixture
def admin_user():
    """An enabled (non-super) admin."""
    from tests.factories import AdminFactory
    return AdminFactory()


@pytest.fixture
def super_admin():
    """An enabled super admin."""
    from tests.factories import SuperAdminFactory
    return SuperAdminFactory()


@pytest.fixture
def client_for():
    """Build an API client authenticated as the given user."""
    from rest_framework.test import APIClient

    def _client_for(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return _client_for


@pytest.fixture
def reward():
    """An available reward costing 1500 points."""
    from tests.factories import RewardFactory
    return RewardFactory(points_cost=1500)
