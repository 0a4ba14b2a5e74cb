"""
VOD serializers for the dashboard API.

Provides:
- VODSerializer: read shape of a VOD with ordered pieces and a list preview
- VODCreateSerializer: input shape of the "Add VOD" form, with field-keyed errors
"""

from django.conf import settings
from rest_framework import serializers

from ..formatting import preview
from ..models import VOD, VODPiece
from ..services import PieceInput
from ..validation import validate_vod_form


class VODPieceSerializer(serializers.ModelSerializer):
    class Meta:
        model = VODPiece
        fields = ["id", "mp4_url", "json_url"]
        read_only_fields = fields


class VODSerializer(serializers.ModelSerializer):
    """
    Serializer for VOD objects.
    Adds description_preview, the trimmed description shown on list cards.
    """

    pieces = VODPieceSerializer(many=True, read_only=True)
    description_preview = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = VOD
        fields = [
            "id",
            "stream_date",
            "description",
            "description_preview",
            "created_at",
            "pieces",
        ]
        read_only_fields = fields

    def get_description_preview(self, obj):
        return preview(obj.description, settings.VOD_DESCRIPTION_PREVIEW_LENGTH)


class PieceInputSerializer(serializers.Serializer):
    mp4_url = serializers.CharField(allow_blank=True, trim_whitespace=False)
    json_url = serializers.CharField(
        allow_blank=True,
        allow_null=True,
        required=False,
        default=None,
        trim_whitespace=False,
    )


class VODCreateSerializer(serializers.Serializer):
    """
    Validates the "Add VOD" payload.

    Missing stream dates and empty MP4 URLs are reported with the same keys
    and messages as the dashboard form (see validate_vod_form).
    """

    stream_date = serializers.DateField(
        required=False, allow_null=True, default=None)
    description = serializers.CharField(
        required=False, allow_blank=True, default="", trim_whitespace=False)
    pieces = PieceInputSerializer(many=True, required=False, default=list)

    def validate(self, attrs):
        errors = validate_vod_form(attrs)
        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def to_piece_inputs(self):
        return [
            PieceInput(mp4_url=p["mp4_url"], json_url=p.get("json_url"))
            for p in self.validated_data["pieces"]
        ]
