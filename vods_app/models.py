"""
vods_app.models — VOD records and their ordered media pieces.

- VOD: one archived stream (stream date + description).
- VODPiece: one media asset of a VOD; `position` keeps the authored order.

Deleting a VOD cascades to its pieces inside the same transaction.
"""

from __future__ import annotations

from django.db import models

URL_MAX_LENGTH = 2048


class VOD(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)

    stream_date = models.DateField(db_index=True)
    description = models.TextField(blank=True, default="")

    class Meta:
        verbose_name = "VOD"
        verbose_name_plural = "VODs"
        # id breaks ties between VODs streamed on the same day
        ordering = ["-stream_date", "-id"]

    def __str__(self) -> str:
        return f"({self.id}) VOD {self.stream_date.isoformat()}"


class VODPiece(models.Model):
    vod = models.ForeignKey(
        VOD,
        on_delete=models.CASCADE,
        related_name="pieces",
    )
    position = models.PositiveIntegerField(
        help_text="Zero-based order of the piece within its VOD.",
    )
    mp4_url = models.CharField(max_length=URL_MAX_LENGTH)
    json_url = models.CharField(
        max_length=URL_MAX_LENGTH,
        blank=True,
        null=True,
        help_text="Optional metadata URL; empty input is stored as NULL.",
    )

    class Meta:
        verbose_name = "VOD piece"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["vod", "position"],
                name="unique_piece_position_per_vod",
            ),
        ]

    def __str__(self) -> str:
        return f"Piece {self.position + 1} of VOD {self.vod_id}"
