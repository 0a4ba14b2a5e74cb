"""
users_app.admin — Django admin configuration for UserProfile

Extends Django’s built-in UserAdmin with the dashboard role, so an
administrator can be granted or revoked from the admin interface.
"""

from django.contrib import admin
from users_app.models import UserProfile
from users_app.forms import UserProfileCreationForm
from django.contrib.auth.admin import UserAdmin


@admin.register(UserProfile)
class UserProfileAdmin(UserAdmin):
    add_form = UserProfileCreationForm
    list_display = ("username", "email", "role", "is_active")
    list_filter = ("role", "is_active")

    fieldsets = (
        *UserAdmin.fieldsets,
        ("Dashboard access", {"fields": ("role",)}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("username", "email", "role", "password1", "password2"),
            },
        ),
    )
