import datetime

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from users_app.models import UserRole
from vods_app.models import VOD, VODPiece


# -----------------------------------------------------------------------------------
# DRF API clients (anonymous, regular user, administrator)
# -----------------------------------------------------------------------------------
@pytest.fixture
def api():
    """Unauthenticated DRF API client."""
    return APIClient()


@pytest.fixture
def user(db):
    User = get_user_model()
    return User.objects.create_user(
        username="viewer@example.com",
        email="viewer@example.com",
        password="pass1234",
    )


@pytest.fixture
def admin(db):
    User = get_user_model()
    return User.objects.create_user(
        username="admin@example.com",
        email="admin@example.com",
        password="pass1234",
        role=UserRole.ADMIN,
    )


@pytest.fixture
def user_api(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def admin_api(admin):
    client = APIClient()
    client.force_authenticate(user=admin)
    return client


# -----------------------------------------------------------------------------------
# VOD factory
# -----------------------------------------------------------------------------------
@pytest.fixture
def make_vod(db):
    """
    Create a VOD directly in the store, bypassing the service.

    ``pieces`` is a list of MP4 URLs, stored in the given order.
    """
    def _make(stream_date=datetime.date(2023, 5, 1), description="", pieces=()):
        vod = VOD.objects.create(stream_date=stream_date, description=description)
        for position, mp4_url in enumerate(pieces):
            VODPiece.objects.create(vod=vod, position=position, mp4_url=mp4_url)
        return vod
    return _make
