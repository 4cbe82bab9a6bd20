# File: wordmap_app/modules/auth/forms.py
# Form classes validating the JSON payloads of the auth endpoints.
# Flask-WTF reads request JSON as form data; API forms carry no CSRF token.

from flask_wtf import FlaskForm
from wtforms import BooleanField, PasswordField, StringField
from wtforms.validators import DataRequired, EqualTo, Length, Optional, Regexp, ValidationError

from ...models import User
from .config import AuthDefaultConfig

EMAIL_PATTERN = r'^[^@\s]+@[^@\s]+\.[^@\s]+$'


class ApiForm(FlaskForm):
    class Meta:
        csrf = False


class RegistrationForm(ApiForm):
    """
    Registration form.
    """
    name = StringField('Name', validators=[DataRequired(message="Name is required.")])
    email = StringField('Email', validators=[
        DataRequired(message="Email is required."),
        Regexp(EMAIL_PATTERN, message="Invalid email address."),
    ])
    password = PasswordField('Password', validators=[
        DataRequired(message="Password is required."),
        Length(min=AuthDefaultConfig.MIN_PASSWORD_LENGTH,
               message=f"Password must be at least {AuthDefaultConfig.MIN_PASSWORD_LENGTH} characters."),
    ])
    password2 = PasswordField('Confirm password', validators=[
        Optional(), EqualTo('password', message='Passwords do not match.'),
    ])

    def validate_email(self, email):
        """
        Reject an email that is already registered (case-insensitive).
        """
        if User.query.filter_by(email=email.data.strip().lower()).first() is not None:
            raise ValidationError('This email is already in use.')


class LoginForm(ApiForm):
    """
    Login form.
    """
    email = StringField('Email', validators=[DataRequired(message="Email is required.")])
    password = PasswordField('Password', validators=[DataRequired(message="Password is required.")])
    remember_me = BooleanField('Remember me')


class ResetRequestForm(ApiForm):
    email = StringField('Email', validators=[DataRequired(message="Email is required.")])


class ResetCodeForm(ResetRequestForm):
    code = StringField('Code', validators=[
        DataRequired(message="Code is required."),
        Regexp(r'^\d{%d}$' % AuthDefaultConfig.RESET_CODE_LENGTH, message="The code has 6 digits."),
    ])


class ResetPasswordForm(ResetCodeForm):
    new_password = PasswordField('New password', validators=[
        DataRequired(message="New password is required."),
        Length(min=AuthDefaultConfig.MIN_PASSWORD_LENGTH,
               message=f"Password must be at least {AuthDefaultConfig.MIN_PASSWORD_LENGTH} characters."),
    ])
