"""
Auth Service - Core authentication logic.

Handles user registration and credential checks.
Decouples DB logic from Routes.
"""
from flask import current_app

from wordmap_app.core.error_handlers import AuthenticationError, ConflictError, ValidationError
from wordmap_app.core.signals import user_registered
from wordmap_app.models import User, db

from ..config import AuthDefaultConfig


class AuthService:
    """Service for Authentication related operations."""

    @staticmethod
    def normalize_email(email):
        return (email or '').strip().lower()

    @staticmethod
    def get_by_email(email):
        return User.query.filter_by(email=AuthService.normalize_email(email)).first()

    @staticmethod
    def register_user(name, email, password):
        """
        Register a new user and emit user_registered.

        Raises:
            ValidationError: a field is missing or the password is too short
            ConflictError: the email is already registered
        """
        name = (name or '').strip()
        email = AuthService.normalize_email(email)
        if not name or not email or not password:
            raise ValidationError('All fields are required')
        if len(password) < AuthDefaultConfig.MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f'Password must be at least {AuthDefaultConfig.MIN_PASSWORD_LENGTH} characters',
                errors={'password': 'too_short'},
            )
        if AuthService.get_by_email(email) is not None:
            raise ConflictError('This email is already in use', resource='user')

        user = User(name=name, email=email)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()

        current_app.logger.info(f"User registered: {email} ({user.user_id})")

        try:
            user_registered.send(current_app._get_current_object(), user=user)
        except Exception as e:
            # Registration stands even if a subscriber fails
            current_app.logger.error(f"Error emitting user_registered signal: {e}")

        return user

    @staticmethod
    def authenticate_user(email, password):
        """
        Verify credentials.

        Returns:
            User object if valid.
        Raises:
            AuthenticationError with one message for unknown email and bad password.
        """
        if not email or not password:
            raise ValidationError('Email and password are required')

        user = AuthService.get_by_email(email)
        if user is None or not user.check_password(password):
            current_app.logger.info(f"Failed login attempt for {AuthService.normalize_email(email)}")
            raise AuthenticationError('Invalid email or password')
        return user
