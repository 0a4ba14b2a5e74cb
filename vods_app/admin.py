"""
vods_app.admin — Django admin registration for VODs

Registers VOD with its pieces inline (in authored order) and
CSV/JSON import/export of the VOD list via django-import-export.
"""

from django.contrib import admin
from import_export import resources
from import_export.admin import ImportExportModelAdmin

from .models import VOD, VODPiece


class VODResource(resources.ModelResource):
    class Meta:
        model = VOD
        fields = ("id", "stream_date", "description", "created_at")
        export_order = fields


class VODPieceInline(admin.TabularInline):
    model = VODPiece
    fields = ("position", "mp4_url", "json_url")
    ordering = ("position",)
    extra = 0


@admin.register(VOD)
class VODAdmin(ImportExportModelAdmin):
    resource_classes = [VODResource]
    list_display = ("stream_date", "id", "created_at")
    fields = ("stream_date", "description", "created_at")
    readonly_fields = ("created_at",)
    inlines = [VODPieceInline]
