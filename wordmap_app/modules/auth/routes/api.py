# File: wordmap_app/modules/auth/routes/api.py
from dataclasses import asdict

from flask import Blueprint, jsonify
from flask_login import current_user, login_required, login_user, logout_user

from wordmap_app.core.error_handlers import ValidationError, success_response

from ..forms import LoginForm, RegistrationForm, ResetCodeForm, ResetPasswordForm, ResetRequestForm
from ..schemas import ResetResult, UserDTO
from ..services.auth_service import AuthService
from ..services.password_reset_service import PasswordResetService

auth_api_bp = Blueprint('auth_api', __name__)

RESET_STATUS_CODES = {
    ResetResult.STATUS_OK: 200,
    ResetResult.STATUS_USER_NOT_FOUND: 404,
    ResetResult.STATUS_INVALID_CODE: 400,
    ResetResult.STATUS_EXPIRED: 400,
    ResetResult.STATUS_INVALID_PASSWORD: 400,
}


def _validated(form):
    if not form.validate():
        raise ValidationError('Validation failed', errors=form.errors)
    return form


def _reset_response(result):
    return jsonify(result.to_dict()), RESET_STATUS_CODES.get(result.status, 400)


@auth_api_bp.route('/register', methods=['POST'])
def register():
    form = _validated(RegistrationForm())
    user = AuthService.register_user(form.name.data, form.email.data, form.password.data)
    login_user(user)
    return success_response(asdict(UserDTO.from_model(user)), message='Account created'), 201


@auth_api_bp.route('/login', methods=['POST'])
def login():
    form = _validated(LoginForm())
    user = AuthService.authenticate_user(form.email.data, form.password.data)
    login_user(user, remember=form.remember_me.data)
    return success_response(asdict(UserDTO.from_model(user)), message='Logged in')


@auth_api_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return success_response(message='Logged out')


@auth_api_bp.route('/me', methods=['GET'])
@login_required
def me():
    return success_response(asdict(UserDTO.from_model(current_user)))


@auth_api_bp.route('/password-reset/request', methods=['POST'])
def request_reset_code():
    form = _validated(ResetRequestForm())
    return _reset_response(PasswordResetService.generate_reset_code(form.email.data))


@auth_api_bp.route('/password-reset/verify', methods=['POST'])
def verify_reset_code():
    form = _validated(ResetCodeForm())
    return _reset_response(PasswordResetService.verify_reset_code(form.email.data, form.code.data))


@auth_api_bp.route('/password-reset/confirm', methods=['POST'])
def reset_password():
    form = _validated(ResetPasswordForm())
    return _reset_response(
        PasswordResetService.reset_password(form.email.data, form.code.data, form.new_password.data)
    )
