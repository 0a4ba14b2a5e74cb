"""
vods_app.api.views — VOD endpoints for the dashboard.

Provides:
- VODListCreateView: paginated list (GET) and creation (POST).
- VODCountView: total VOD count and derived page count.
- VODDeleteView: delete a VOD with all of its pieces.
- DashboardView: the admin dashboard page payload; 404 for everyone else.

Role checks happen in vods_app.services; views only resolve the caller's
role and translate service failures into HTTP responses.
"""

from django.http import Http404

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from users_app.authorization import current_role, is_administrator

from .. import services
from ..exceptions import (
    AuthorizationError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .serializers import VODCreateSerializer, VODSerializer


def _parse_page(raw, default):
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError({"page": "Page must be a non-negative integer."})


def _forbidden():
    return Response(
        {"message": "You do not have permission to manage VODs."},
        status=status.HTTP_403_FORBIDDEN,
    )


def _store_failure():
    return Response(
        {"message": "The VOD store is unavailable. Please try again."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# ==========================
# LIST / CREATE
# ==========================
class VODListCreateView(APIView):
    """
    GET  /vods/?page=<n>  → one page of VODs (zero-based page, default 0)
    POST /vods/           → create a VOD with its ordered pieces

    Not cached: a page must reflect inserts and deletes immediately.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        role = current_role(request.user)
        try:
            page = _parse_page(request.query_params.get("page"), 0)
            vods = services.list_vods(role, page)
        except AuthorizationError:
            return _forbidden()
        except ValidationError as e:
            return Response(e.errors, status=status.HTTP_400_BAD_REQUEST)
        except StoreError:
            return _store_failure()

        ser = VODSerializer(vods, many=True, context={"request": request})
        return Response(ser.data)

    def post(self, request):
        """
        Expected payload:
            {
                "stream_date": "YYYY-MM-DD",
                "description": "<string>",
                "pieces": [{"mp4_url": "<url>", "json_url": "<url>" | null}]
            }
        """
        role = current_role(request.user)
        if not is_administrator(role):
            return _forbidden()

        ser = VODCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        try:
            vod = services.insert_vod(
                role,
                ser.validated_data["stream_date"],
                ser.validated_data["description"],
                ser.to_piece_inputs(),
            )
        except AuthorizationError:
            return _forbidden()
        except ValidationError as e:
            return Response(e.errors, status=status.HTTP_400_BAD_REQUEST)
        except StoreError:
            return _store_failure()

        return Response(
            VODSerializer(vod, context={"request": request}).data,
            status=status.HTTP_201_CREATED,
        )


# ==========================
# COUNT
# ==========================
class VODCountView(APIView):
    """
    GET /vods/count/

    Returns:
        {"count": <int>, "page_size": <int>, "total_pages": <int>}
    """
    permission_classes = [AllowAny]

    def get(self, request):
        try:
            count = services.count_vods(current_role(request.user))
        except AuthorizationError:
            return _forbidden()
        except StoreError:
            return _store_failure()

        page_size = services.get_page_size()
        return Response({
            "count": count,
            "page_size": page_size,
            "total_pages": services.total_pages(count, page_size),
        })


# ==========================
# DELETE
# ==========================
class VODDeleteView(APIView):
    permission_classes = [AllowAny]

    def delete(self, request, pk):
        """
        DELETE /vods/<pk>/

        Returns:
            - 204 when the VOD and its pieces were removed.
            - 404 if no VOD has this id.
        """
        try:
            services.delete_vod(current_role(request.user), pk)
        except AuthorizationError:
            return _forbidden()
        except NotFoundError:
            return Response(
                {"message": "VOD not found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        except StoreError:
            return _store_failure()

        return Response(status=status.HTTP_204_NO_CONTENT)


# ==========================
# DASHBOARD PAGE
# ==========================
class DashboardView(APIView):
    """
    GET /dashboard/?page=<n>  (one-based, default 1)

    Returns everything the dashboard page renders for one page of VODs.
    Callers without the administrator role get 404, so the page's
    existence is not revealed.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        role = current_role(request.user)
        if not is_administrator(role):
            raise Http404()

        try:
            page = _parse_page(request.query_params.get("page"), 1)
            count = services.count_vods(role)
            vods = services.list_vods(role, page - 1)
        except ValidationError as e:
            return Response(e.errors, status=status.HTTP_400_BAD_REQUEST)
        except StoreError:
            return _store_failure()

        page_size = services.get_page_size()
        return Response({
            "page": page,
            "page_size": page_size,
            "count": count,
            "total_pages": services.total_pages(count, page_size),
            "vods": VODSerializer(
                vods, many=True, context={"request": request}).data,
        })
