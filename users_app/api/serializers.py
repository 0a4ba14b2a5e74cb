"""
Serializers for dashboard sessions (JWT cookies only, no DRF Token).

- LoginSerializer: validates user credentials; JWT tokens are issued in the view.
- UserPublicSerializer: safe profile data, including the dashboard role.
"""

from django.contrib.auth import authenticate
from rest_framework import serializers

from ..models import UserProfile


class LoginSerializer(serializers.Serializer):
    """
    Validates login credentials (input-only).
    Tokens are created and set as HttpOnly cookies in the view.
    """
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True, style={"input_type": "password"})

    def validate(self, attrs):
        """
        Resolve the account by email (case-insensitive), then authenticate
        with its username, which may differ from the email for users
        created in the admin.
        """
        email = (attrs.get("email") or "").strip().lower()
        password = attrs.get("password")

        account = (
            UserProfile.objects.filter(email__iexact=email).order_by("pk").first()
        )
        user = None
        if account is not None:
            user = authenticate(username=account.username, password=password)
        if not user or not user.is_active:
            raise serializers.ValidationError(
                "Invalid credentials or inactive user.")

        attrs["user"] = user
        return attrs


class UserPublicSerializer(serializers.ModelSerializer):
    class Meta:
        model = UserProfile
        fields = ["id", "username", "email", "role"]
        read_only_fields = fields
