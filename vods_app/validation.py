"""
Field-level validation for the "Add VOD" form.

Returns messages keyed by form field (``pieces.<index>.mp4_url`` for piece
rows) so the dashboard can show them next to the inputs. The VOD service
repeats its own checks; this function only shapes feedback.
"""

from typing import Dict, Mapping

STREAM_DATE_REQUIRED = "You must specify a stream date"
MP4_URL_REQUIRED = "You must specify an MP4 URL"


def validate_vod_form(values: Mapping) -> Dict[str, str]:
    errors = {}

    if values.get("stream_date") is None:
        errors["stream_date"] = STREAM_DATE_REQUIRED

    for index, piece in enumerate(values.get("pieces") or []):
        if not (piece.get("mp4_url") or "").strip():
            errors[f"pieces.{index}.mp4_url"] = MP4_URL_REQUIRED

    return errors
