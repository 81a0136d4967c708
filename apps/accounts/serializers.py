from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password

from .models import User, UserRole
from .services.user_registration import SELF_SERVICE_ROLES


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'role',
            'email_verified',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'email', 'role', 'email_verified', 'created_at', 'last_login']


class UserRegistrationSerializer(serializers.Serializer):
    """Validate registration input."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    role = serializers.ChoiceField(
        choices=[(role.value, role.label) for role in UserRole if role in SELF_SERVICE_ROLES],
        default=UserRole.STUDENT,
    )

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
    portal = serializers.ChoiceField(choices=UserRole.choices, required=False)


class PasscodeSetupSerializer(serializers.Serializer):
    """Input for creating/replacing a device passcode."""

    device_id = serializers.CharField(max_length=128)
    passcode = serializers.RegexField(
        regex=r'^\d{6}$',
        write_only=True,
        error_messages={'invalid': 'Passcode must be exactly 6 digits.'},
    )


class PasscodeLoginSerializer(PasscodeSetupSerializer):
    """Input for passcode quick login."""

    email = serializers.EmailField()
