"""
vodboard_backend_app.urls

Main URL configuration for the VOD dashboard backend:
- Health endpoint
- Admin panel
- Dashboard page payload (administrators only, 404 otherwise)
- API routes (users_app, vods_app)
- Debug toolbar (only active when DEBUG=True)
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings

from vods_app.api.views import DashboardView
from . import views


urlpatterns = [
    path("health/", views.health_check, name="health-check"),
    path("admin/", admin.site.urls),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
    path("users/", include("users_app.api.urls")),
    path("vods/", include("vods_app.api.urls")),
]

if settings.DEBUG:
    import debug_toolbar

    urlpatterns += [path("__debug__/", include(debug_toolbar.urls))]
