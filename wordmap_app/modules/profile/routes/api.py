# File: wordmap_app/modules/profile/routes/api.py
from flask import Blueprint, request
from flask_login import current_user, login_required

from wordmap_app.core.error_handlers import success_response

from ..services.settings_service import SettingsService
from ..services.stats_service import StatsService

profile_api_bp = Blueprint('profile_api', __name__)


@profile_api_bp.route('/settings', methods=['GET'])
@login_required
def get_settings():
    return success_response(SettingsService.get_settings(current_user.user_id).to_dict())


@profile_api_bp.route('/settings', methods=['PUT'])
@login_required
def update_settings():
    """Input: {"use_all_vaults_for_links": bool}"""
    data = request.get_json(silent=True) or {}
    settings = SettingsService.update_settings(
        current_user.user_id, data.get('use_all_vaults_for_links') if isinstance(data, dict) else None
    )
    return success_response(settings.to_dict(), message='Settings saved')


@profile_api_bp.route('/stats', methods=['GET'])
@login_required
def get_stats():
    return success_response(StatsService.get_user_stats(current_user.user_id))
