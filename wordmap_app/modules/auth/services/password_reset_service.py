"""
Password Reset Service - issue, verify and redeem 6-digit reset codes.

Delivery is not handled here: the code is announced through the
reset_code_issued signal and logged, and a mail integration can subscribe.
"""
from datetime import datetime, timezone

from flask import current_app

from wordmap_app.core.signals import reset_code_issued
from wordmap_app.models import db

from ..config import AuthDefaultConfig
from ..logics.reset_code import code_matches, expiry_from, generate_reset_code, is_expired
from ..schemas import ResetResult
from .auth_service import AuthService


class PasswordResetService:

    @staticmethod
    def _now():
        return datetime.now(timezone.utc)

    @staticmethod
    def _ttl_minutes():
        return int(current_app.config.get('RESET_CODE_TTL_MINUTES', AuthDefaultConfig.RESET_CODE_TTL_MINUTES))

    @staticmethod
    def generate_reset_code(email, now=None):
        user = AuthService.get_by_email(email)
        if user is None:
            return ResetResult(False, 'User not found', ResetResult.STATUS_USER_NOT_FOUND)

        now = now or PasswordResetService._now()
        user.reset_code = generate_reset_code()
        user.reset_code_expires = expiry_from(now, PasswordResetService._ttl_minutes())
        db.session.commit()

        current_app.logger.info(
            "Password reset code issued for %s (expires %s)", user.email, user.reset_code_expires.isoformat()
        )
        reset_code_issued.send(
            current_app._get_current_object(),
            email=user.email, code=user.reset_code, expires_at=user.reset_code_expires,
        )
        return ResetResult(True, 'Reset code sent')

    @staticmethod
    def verify_reset_code(email, code, now=None):
        user = AuthService.get_by_email(email)
        if user is None:
            return ResetResult(False, 'User not found', ResetResult.STATUS_USER_NOT_FOUND)
        if not code_matches(user.reset_code, code):
            return ResetResult(False, 'Invalid code', ResetResult.STATUS_INVALID_CODE)
        if is_expired(user.reset_code_expires, now or PasswordResetService._now()):
            return ResetResult(False, 'Code expired', ResetResult.STATUS_EXPIRED)
        return ResetResult(True, 'Code valid')

    @staticmethod
    def reset_password(email, code, new_password, now=None):
        if not new_password or len(new_password) < AuthDefaultConfig.MIN_PASSWORD_LENGTH:
            return ResetResult(
                False,
                f'Password must be at least {AuthDefaultConfig.MIN_PASSWORD_LENGTH} characters',
                ResetResult.STATUS_INVALID_PASSWORD,
            )

        verification = PasswordResetService.verify_reset_code(email, code, now)
        if not verification.success:
            return verification

        user = AuthService.get_by_email(email)
        user.set_password(new_password)
        user.reset_code = None
        user.reset_code_expires = None
        db.session.commit()
        current_app.logger.info("Password reset completed for %s", user.email)
        return ResetResult(True, 'Password changed successfully')
