from django.urls import path
from .views import (
    JwtLoginView,
    JwtRefreshView,
    JwtLogoutView,
    CurrentSessionView,
)
urlpatterns = [
    path("login/", JwtLoginView.as_view(), name="user-login"),
    path("refresh/", JwtRefreshView.as_view(), name="user-refresh"),
    path("logout/", JwtLogoutView.as_view(), name="user-logout"),
    path("me/", CurrentSessionView.as_view(), name="user-me"),
]
