"""
users_app.authorization — role resolution for the VOD dashboard

The caller's role is resolved once per request and then passed explicitly
into every operation that needs an authorization decision.
"""

import logging

from .models import UserRole

logger = logging.getLogger(__name__)

ANONYMOUS = "ANONYMOUS"


class AuthorizationError(Exception):
    """The caller does not hold the administrator role."""

    def __init__(self, role, message="Administrator role required."):
        super().__init__(message)
        self.role = role


def current_role(user) -> str:
    """
    Return the role carried by ``user``.

    Missing, unauthenticated and inactive users resolve to ANONYMOUS.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        return ANONYMOUS
    if not user.is_active:
        return ANONYMOUS
    return user.role


def is_administrator(role) -> bool:
    return role == UserRole.ADMIN


def require_administrator(role) -> None:
    if not is_administrator(role):
        logger.warning("Denied VOD operation for role %s", role)
        raise AuthorizationError(role)
