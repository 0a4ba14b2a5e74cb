"""
vods_app.services — the only path by which VODs are read or written.

Every operation takes the caller's resolved role (see
users_app.authorization.current_role) and requires the administrator role.

- list_vods / count_vods: paginated reads, newest stream first.
- insert_vod: VOD + ordered pieces in one transaction.
- delete_vod: VOD + pieces in one transaction, NotFoundError if missing.

Nothing is cached between calls, so counts and pages always reflect the
latest committed writes.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Union

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError, transaction
from django.db.models import Prefetch

from users_app.authorization import require_administrator

from .exceptions import NotFoundError, StoreError, ValidationError
from .models import VOD, VODPiece
from .validation import MP4_URL_REQUIRED, STREAM_DATE_REQUIRED

logger = logging.getLogger(__name__)

# Largest row offset the store accepts (signed 64-bit OFFSET)
MAX_OFFSET = 2 ** 63 - 1


@dataclass(frozen=True)
class PieceInput:
    mp4_url: str
    json_url: Optional[str] = None


def get_page_size() -> int:
    page_size = getattr(settings, "VODS_PER_PAGE", 12)
    if not isinstance(page_size, int) or page_size <= 0:
        raise ImproperlyConfigured("VODS_PER_PAGE must be a positive integer.")
    return page_size


def total_pages(count: int, page_size: Optional[int] = None) -> int:
    page_size = page_size or get_page_size()
    return (count + page_size - 1) // page_size


def _vods_queryset():
    pieces = Prefetch("pieces", queryset=VODPiece.objects.order_by("position"))
    return VOD.objects.order_by("-stream_date", "-id").prefetch_related(pieces)


# ==========================
# READS
# ==========================
def list_vods(role, page: int) -> List[VOD]:
    """
    Return one page of VODs (zero-based ``page``) with their pieces.

    A page past the end is an empty list.
    """
    require_administrator(role)

    if isinstance(page, bool) or not isinstance(page, int) or page < 0:
        raise ValidationError({"page": "Page must be a non-negative integer."})

    page_size = get_page_size()
    start = page * page_size
    if start + page_size > MAX_OFFSET:
        return []
    try:
        return list(_vods_queryset()[start:start + page_size])
    except DatabaseError as e:
        logger.exception("Listing VODs (page %s) failed", page)
        raise StoreError("Could not list VODs.") from e


def count_vods(role) -> int:
    require_administrator(role)
    try:
        return VOD.objects.count()
    except DatabaseError as e:
        logger.exception("Counting VODs failed")
        raise StoreError("Could not count VODs.") from e


# ==========================
# WRITES
# ==========================
def _coerce_piece(piece: Union[PieceInput, Mapping]) -> Optional[PieceInput]:
    if isinstance(piece, PieceInput):
        return piece
    if not isinstance(piece, Mapping):
        return None
    return PieceInput(
        mp4_url=piece.get("mp4_url") or "",
        json_url=piece.get("json_url"),
    )


def _clean_insert(stream_date, description, pieces):
    errors = {}

    if isinstance(stream_date, datetime.datetime):
        stream_date = stream_date.date()
    if stream_date is None:
        errors["stream_date"] = STREAM_DATE_REQUIRED
    elif not isinstance(stream_date, datetime.date):
        errors["stream_date"] = "Stream date must be a date."

    if not isinstance(description, str):
        errors["description"] = "Description must be a string."

    cleaned = []
    for index, piece in enumerate(_coerce_piece(p) for p in pieces or []):
        if piece is None:
            errors[f"pieces.{index}"] = "Piece must be a mapping with an mp4_url."
            continue
        if not isinstance(piece.mp4_url, str) or not piece.mp4_url.strip():
            errors[f"pieces.{index}.mp4_url"] = MP4_URL_REQUIRED
        cleaned.append(PieceInput(
            mp4_url=piece.mp4_url,
            json_url=piece.json_url or None,
        ))

    if errors:
        raise ValidationError(errors)
    return stream_date, description, cleaned


def insert_vod(role, stream_date, description: str,
               pieces: Iterable[Union[PieceInput, Mapping]] = ()) -> VOD:
    """
    Create a VOD together with its pieces, in the order given.

    Raises AuthorizationError, ValidationError (nothing written) or
    StoreError (transaction rolled back).
    """
    require_administrator(role)
    stream_date, description, pieces = _clean_insert(
        stream_date, description, pieces)

    try:
        with transaction.atomic():
            vod = VOD.objects.create(
                stream_date=stream_date,
                description=description,
            )
            VODPiece.objects.bulk_create([
                VODPiece(
                    vod=vod,
                    position=position,
                    mp4_url=piece.mp4_url,
                    json_url=piece.json_url,
                )
                for position, piece in enumerate(pieces)
            ])
        vod = _vods_queryset().get(pk=vod.pk)
    except DatabaseError as e:
        logger.exception("Inserting VOD for %s failed", stream_date)
        raise StoreError("Could not save the VOD.") from e

    logger.info("Inserted VOD %s (%s) with %d piece(s)",
                vod.pk, vod.stream_date, len(pieces))
    return vod


def delete_vod(role, vod_id) -> None:
    """Delete a VOD and all of its pieces, or raise NotFoundError."""
    require_administrator(role)

    if isinstance(vod_id, bool):
        raise NotFoundError(vod_id)
    try:
        vod_id = int(vod_id)
    except (TypeError, ValueError):
        raise NotFoundError(vod_id)
    if not 0 < vod_id <= MAX_OFFSET:
        raise NotFoundError(vod_id)

    try:
        with transaction.atomic():
            _, per_model = VOD.objects.filter(pk=vod_id).delete()
    except DatabaseError as e:
        logger.exception("Deleting VOD %s failed", vod_id)
        raise StoreError("Could not delete the VOD.") from e

    if not per_model.get(VOD._meta.label, 0):
        raise NotFoundError(vod_id)

    logger.info("Deleted VOD %s with %d piece(s)",
                vod_id, per_model.get(VODPiece._meta.label, 0))
