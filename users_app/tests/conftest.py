import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from users_app.models import UserRole


# --------------------------------------------------------------------------
# DRF test client
# --------------------------------------------------------------------------
@pytest.fixture
def api():
    """Provides a DRF APIClient instance for making HTTP requests in tests."""
    return APIClient()


# --------------------------------------------------------------------------
# User model fixture
# --------------------------------------------------------------------------
@pytest.fixture
def User():
    """Returns the active Django user model."""
    return get_user_model()


# --------------------------------------------------------------------------
# User fixtures
# --------------------------------------------------------------------------
@pytest.fixture
def user_inactive(db, User):
    """Creates an inactive administrator (must resolve to ANONYMOUS)."""
    return User.objects.create_user(
        username="inactive@example.com",
        email="inactive@example.com",
        password="pass1234",
        is_active=False,
        role=UserRole.ADMIN,
    )


@pytest.fixture
def user_active(db, User):
    """Creates an active regular user."""
    return User.objects.create_user(
        username="active@example.com",
        email="active@example.com",
        password="pass1234",
        is_active=True,
    )


@pytest.fixture
def dashboard_admin(db, User):
    """Creates an active user holding the administrator role."""
    return User.objects.create_user(
        username="admin@example.com",
        email="admin@example.com",
        password="pass1234",
        is_active=True,
        role=UserRole.ADMIN,
    )
