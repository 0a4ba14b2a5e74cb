"""
vods_app.apps — App configuration for the VOD dashboard module
"""

from django.apps import AppConfig


class VodsAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "vods_app"
    verbose_name = "VODs"
