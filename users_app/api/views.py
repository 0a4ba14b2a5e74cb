"""
Session endpoints for the VOD dashboard.

Endpoints:
-----------
POST   /users/login/    → Login and issue JWT cookies
POST   /users/refresh/  → Refresh JWT access token
POST   /users/logout/   → Logout and clear cookies
GET    /users/me/       → Resolve the caller's role (ANONYMOUS if logged out)
"""

import logging

from django.conf import settings

from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from rest_framework_simplejwt.tokens import RefreshToken, TokenError

from ..authorization import current_role
from ..models import UserProfile
from .serializers import UserPublicSerializer, LoginSerializer
from .auth import (
    REMEMBER_REFRESH_MAX_AGE,
    clear_auth_cookies,
    refresh_cookie_name,
    set_access_cookie,
    set_auth_cookies,
)

logger = logging.getLogger(__name__)


class JwtLoginView(APIView):
    """
    POST /users/login/
    Authenticates the user and sets JWT tokens in HttpOnly cookies.

    Flow:
    - Validate input with LoginSerializer (email, password).
    - On success, issue Refresh/Access tokens and set cookies.
    - Return safe public profile data (including the role).
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data["user"]
        remember = bool(request.data.get("remember", False))

        refresh = RefreshToken.for_user(user)
        response = Response(UserPublicSerializer(user).data, status=200)
        set_auth_cookies(response, refresh, remember)
        logger.info("User %s logged in with role %s", user.pk, user.role)
        return response


class JwtRefreshView(APIView):
    """
    POST /users/refresh/
    Uses the refresh cookie to issue a new access token.
    If ROTATE_REFRESH_TOKENS is enabled, mints a new refresh too (and
    blacklists the old one when BLACKLIST_AFTER_ROTATION is enabled).
    """
    permission_classes = [AllowAny]

    def post(self, request):
        raw_refresh = request.COOKIES.get(refresh_cookie_name())
        if not raw_refresh:
            return Response({"error": "Missing refresh cookie."}, status=401)

        try:
            refresh = RefreshToken(raw_refresh)
        except TokenError:
            return Response({"error": "Invalid refresh token."}, status=401)

        resp = Response({"detail": "Access token refreshed."}, status=200)
        set_access_cookie(resp, str(refresh.access_token))

        if not settings.SIMPLE_JWT.get("ROTATE_REFRESH_TOKENS", False):
            return resp

        if settings.SIMPLE_JWT.get("BLACKLIST_AFTER_ROTATION", False):
            try:
                refresh.blacklist()
            except TokenError:
                logger.warning("Refresh token was already blacklisted")

        try:
            user = UserProfile.objects.get(pk=int(refresh.get("user_id")))
        except (UserProfile.DoesNotExist, TypeError, ValueError):
            return resp

        new_refresh = RefreshToken.for_user(user)
        resp.set_cookie(
            refresh_cookie_name(),
            str(new_refresh),
            max_age=REMEMBER_REFRESH_MAX_AGE,
            httponly=True,
            secure=getattr(settings, "JWT_COOKIE_SECURE", True),
            samesite=getattr(settings, "JWT_COOKIE_SAMESITE", "Lax"),
            path="/",
        )
        return resp


class JwtLogoutView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        raw_refresh = request.COOKIES.get(refresh_cookie_name())
        if raw_refresh:
            try:
                RefreshToken(raw_refresh).blacklist()
            except TokenError:
                logger.warning("Logout with an invalid refresh token")
        resp = Response({"message": "Successfully logged out."}, status=200)
        clear_auth_cookies(resp)
        return resp


class CurrentSessionView(APIView):
    """
    GET /users/me/
    Returns: { "role": "ADMIN" | "USER" | "ANONYMOUS", "user": {...} | null }
    """
    permission_classes = [AllowAny]

    def get(self, request):
        role = current_role(request.user)
        user = request.user if request.user.is_authenticated else None
        data = UserPublicSerializer(user).data if user is not None else None
        return Response({"role": role, "user": data}, status=200)
