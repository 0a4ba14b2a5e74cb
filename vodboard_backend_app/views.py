"""
views.py — Health check for the VOD dashboard backend

Verifies that the record store answers a query against the VOD table.
Returns HTTP 200 when it does, otherwise 503.
"""

import logging

from django.db import DatabaseError
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from vods_app.models import VOD

logger = logging.getLogger(__name__)


@require_GET
def health_check(request):
    """
    Returns:
        {"status": "ok" | "error", "components": {"vod_store": "ok" | "error"}}
    """
    try:
        VOD.objects.exists()
        store_status = "ok"
    except DatabaseError:
        logger.exception("Health check could not reach the VOD store")
        store_status = "error"

    return JsonResponse(
        {
            "status": store_status,
            "components": {"vod_store": store_status},
        },
        status=200 if store_status == "ok" else 503,
    )
