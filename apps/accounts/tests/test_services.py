import pytest
from datetime import timedelta
from unittest.mock import patch
from django.utils import timezone
from apps.accounts.models import User, EmailVerification
from apps.vendors.models import VendorProfile
from apps.accounts.services import (
    send_verification_code,
    register_user,
    authenticate_user,
    EmailAlreadyRegisteredError,
    InvalidVerificationCodeError,
    VerificationEmailError,
    InvalidCredentialsError,
)
from apps.accounts.services.email_verification import generate_verification_code


@pytest.mark.django_db
class TestEmailVerificationService:

    def test_generated_code_is_six_digits(self):
        for _ in range(20):
            code = generate_verification_code()
            assert len(code) == 6
            assert code.isdigit()

    def test_send_failure_raises(self):
        with patch('apps.accounts.services.email_verification.send_mail', side_effect=OSError('smtp down')):
            with pytest.raises(VerificationEmailError):
                send_verification_code(email='fresh@example.com')

    def test_existing_user_rejected(self, user):
        with pytest.raises(EmailAlreadyRegisteredError):
            send_verification_code(email=user.email.upper())


@pytest.mark.django_db
class TestRegisterUserService:

    def test_register_user(self, pending_code):
        user = register_user(
            email=pending_code.email,
            verification_code=pending_code.code,
            password='SecurePass123!',
            name='Service User',
        )

        assert user.check_password('SecurePass123!')
        assert not VendorProfile.objects.filter(user=user).exists()

    def test_register_duplicate_email(self, user):
        EmailVerification.objects.create(
            email=user.email,
            code='111111',
            expires_at=timezone.now() + timedelta(minutes=5),
        )
        with pytest.raises(EmailAlreadyRegisteredError):
            register_user(
                email=user.email,
                verification_code='111111',
                password='SecurePass123!',
            )

    def test_register_invalid_code(self):
        with pytest.raises(InvalidVerificationCodeError):
            register_user(email='x@example.com', verification_code='999999', password='SecurePass123!')
        assert not User.objects.filter(email='x@example.com').exists()


@pytest.mark.django_db
class TestAuthenticateUserService:

    def test_authenticate(self, user):
        assert authenticate_user(email=user.email, password='TestPass123!') == user

    def test_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='nope')


@pytest.mark.django_db
class TestUserModel:

    def test_admin_role_sets_staff(self, admin_user):
        assert admin_user.is_staff is True
        assert admin_user.is_admin is True

    def test_create_superuser_is_admin(self):
        admin = User.objects.create_superuser(email='root@example.com', password='TestPass123!')
        assert admin.is_admin

    def test_display_name_falls_back_to_email(self):
        user = User(email='jane@example.com')
        assert user.get_display_name() == 'jane'
