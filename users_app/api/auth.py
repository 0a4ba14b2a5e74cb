from django.conf import settings
from rest_framework_simplejwt.tokens import RefreshToken

ACCESS_MAX_AGE = 5 * 60
REFRESH_MAX_AGE = 60 * 60
REMEMBER_REFRESH_MAX_AGE = 7 * 24 * 60 * 60


def access_cookie_name():
    return getattr(settings, "JWT_ACCESS_COOKIE_NAME", "vb_access")


def refresh_cookie_name():
    return getattr(settings, "JWT_REFRESH_COOKIE_NAME", "vb_refresh")


def _set_cookie(response, key, value, max_age):
    response.set_cookie(
        key=key,
        value=value,
        max_age=max_age,
        httponly=True,
        secure=getattr(settings, "JWT_COOKIE_SECURE", True),
        samesite=getattr(settings, "JWT_COOKIE_SAMESITE", "Lax"),
        path="/",
    )


def set_access_cookie(response, access_token: str):
    """Attach a short-lived (5 minute) HttpOnly access cookie."""
    _set_cookie(response, access_cookie_name(), access_token, ACCESS_MAX_AGE)
    return response


def set_auth_cookies(response, refresh: RefreshToken, remember: bool = False):
    """
    Sets the dashboard session cookies (access + refresh) on the response.

    - Access token: 5 minutes
    - Refresh token: 1 hour by default, or 7 days if 'remember' is True
    - Both cookies are HttpOnly so the dashboard JS never sees the tokens

    Returns:
        The same response, for chaining.
    """
    set_access_cookie(response, str(refresh.access_token))
    refresh_age = REMEMBER_REFRESH_MAX_AGE if remember else REFRESH_MAX_AGE
    _set_cookie(response, refresh_cookie_name(), str(refresh), refresh_age)
    return response


def clear_auth_cookies(response):
    """Removes both session cookies (logout)."""
    response.delete_cookie(access_cookie_name(), path="/")
    response.delete_cookie(refresh_cookie_name(), path="/")
    return response
