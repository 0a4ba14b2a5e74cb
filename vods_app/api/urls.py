"""
vods_app.api.urls — API routes for dashboard VOD management

Includes:
- Paginated listing and creation
- Total count for pagination
- Deleting a VOD with its pieces
"""

from django.urls import path
from .views import (
    VODListCreateView,
    VODCountView,
    VODDeleteView,
)

urlpatterns = [
    path("", VODListCreateView.as_view(), name="vod-list"),
    path("count/", VODCountView.as_view(), name="vod-count"),
    path("<int:pk>/", VODDeleteView.as_view(), name="vod-delete"),
]
