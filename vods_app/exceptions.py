"""
Failure kinds reported by the VOD service.

AuthorizationError lives with the role resolution in users_app and is
re-exported here so callers can import every kind from one place.
"""

from users_app.authorization import AuthorizationError

__all__ = [
    "AuthorizationError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
    "VODServiceError",
]


class VODServiceError(Exception):
    pass


class ValidationError(VODServiceError):
    """Rejected input; ``errors`` maps field keys to messages."""

    def __init__(self, errors):
        self.errors = dict(errors)
        super().__init__("; ".join(
            f"{field}: {message}" for field, message in self.errors.items()))


class NotFoundError(VODServiceError):
    def __init__(self, vod_id):
        super().__init__(f"VOD {vod_id} not found")
        self.vod_id = vod_id


class StoreError(VODServiceError):
    """The record store failed; any multi-row write was rolled back."""
