from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password

from apps.storage.records import UserRole


class UserSerializer(serializers.Serializer):
    """Public view of a user. The password hash is never serialized."""

    id = serializers.IntegerField(read_only=True)
    username = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True, allow_null=True)
    role = serializers.CharField(read_only=True)
    is_first_login = serializers.BooleanField(read_only=True)
    manager_id = serializers.IntegerField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)


class UserSummarySerializer(serializers.Serializer):
    """Contact details embedded in member and payment listings."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True, allow_null=True)


class CustomerCreateSerializer(serializers.Serializer):
    """Input for creating a customer account."""

    username = serializers.CharField(min_length=3, max_length=150)
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=False,
        style={'input_type': 'password'}
    )
    phone = serializers.CharField(min_length=10, max_length=32)
    name = serializers.CharField(min_length=2, max_length=200)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        """Validate password confirmation when supplied."""
        confirm = attrs.pop('password_confirm', None)
        if confirm is not None and confirm != attrs['password']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserRegistrationSerializer(CustomerCreateSerializer):
    """Serializer for user registration."""

    role = serializers.ChoiceField(choices=UserRole.choices)


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class PasswordResetSerializer(serializers.Serializer):
    """Serializer for the first-login password reset."""

    current_password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    new_password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    confirm_password = serializers.CharField(
        write_only=True,
        required=False,
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        confirm = attrs.pop('confirm_password', None)
        if confirm is not None and confirm != attrs['new_password']:
            raise serializers.ValidationError({
                'confirm_password': 'Passwords do not match'
            })
        return attrs


class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer(required=False)


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    kind = serializers.CharField()
    message = serializers.CharField()
