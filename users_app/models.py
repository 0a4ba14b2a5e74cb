"""
users_app.models — Custom UserProfile model for the VOD dashboard

Extends Django's AbstractUser with the role that gates the dashboard.

Includes:
- UserRole: ADMIN / USER choices
- role: the single elevated permission level checked by the VOD service
"""

from django.db import models
from django.contrib.auth.models import AbstractUser


class UserRole(models.TextChoices):
    ADMIN = "ADMIN", "Administrator"
    USER = "USER", "User"


class UserProfile(AbstractUser):
    """
    Custom user model extending Django’s AbstractUser.

    Adds:
        role (CharField): ADMIN grants dashboard access and VOD mutations.
    """

    role = models.CharField(
        max_length=16,
        choices=UserRole.choices,
        default=UserRole.USER,
        help_text="Administrators may view the dashboard and manage VODs.",
    )
