from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, UserRole, Gender


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display and update."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'role',
            'age',
            'gender',
            'country',
            'city',
            'language',
            'total_shares',
            'last_share_date',
            'created_at',
            'last_login',
        ]
        read_only_fields = [
            'id',
            'email',
            'role',
            'total_shares',
            'last_share_date',
            'created_at',
            'last_login',
        ]


class SendVerificationCodeSerializer(serializers.Serializer):
    """Serializer for requesting a signup code."""

    email = serializers.EmailField(required=True)


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration with an email code."""

    SIGNUP_ROLES = [UserRole.USER, UserRole.VENDOR]

    email = serializers.EmailField(required=True)
    verification_code = serializers.RegexField(
        r'^\d{6}$',
        required=True,
        error_messages={'invalid': 'Verification code must be 6 digits.'},
    )
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    role = serializers.ChoiceField(choices=SIGNUP_ROLES, default=UserRole.USER)
    name = serializers.CharField(max_length=100, required=True)
    age = serializers.IntegerField(min_value=1, max_value=150, required=False, allow_null=True)
    gender = serializers.ChoiceField(choices=Gender.choices, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    language = serializers.CharField(max_length=10, required=False, default='en')


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for displaying on comments, reviews, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'name', 'role']
        read_only_fields = fields
