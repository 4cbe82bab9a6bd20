"""
Settings Service - Read and upsert a user's preferences.
"""
from flask import current_app

from wordmap_app.core.error_handlers import ValidationError
from wordmap_app.models import UserSettings, db


class SettingsService:

    @staticmethod
    def get_settings(user_id):
        """The stored row, or an unsaved one carrying the defaults."""
        settings = UserSettings.query.filter_by(user_id=user_id).first()
        if settings is None:
            settings = UserSettings(user_id=user_id, use_all_vaults_for_links=False)
        return settings

    @staticmethod
    def update_settings(user_id, use_all_vaults_for_links):
        if not isinstance(use_all_vaults_for_links, bool):
            raise ValidationError(
                'use_all_vaults_for_links must be a boolean',
                errors={'use_all_vaults_for_links': 'invalid'},
            )

        settings = UserSettings.query.filter_by(user_id=user_id).first()
        if settings is None:
            settings = UserSettings(user_id=user_id)
            db.session.add(settings)
        settings.use_all_vaults_for_links = use_all_vaults_for_links
        db.session.commit()
        current_app.logger.info(
            "Settings saved for user %s: use_all_vaults_for_links=%s", user_id, use_all_vaults_for_links
        )
        return settings
