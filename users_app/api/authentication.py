from rest_framework_simplejwt.authentication import JWTAuthentication

from .auth import access_cookie_name


class CookieJWTAuthentication(JWTAuthentication):
    """
    Resolves the dashboard session from the HttpOnly access cookie.

    Falls back to "Authorization: Bearer <token>" when no cookie is present,
    so API tools can still talk to the VOD endpoints.
    """

    def authenticate(self, request):
        raw_token = request.COOKIES.get(access_cookie_name())
        if not raw_token:
            return super().authenticate(request)

        validated = self.get_validated_token(raw_token)
        return (self.get_user(validated), validated)
