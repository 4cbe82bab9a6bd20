# File: wordmap_app/modules/mindmap/routes/api.py
from flask import Blueprint, request
from flask_login import current_user, login_required

from wordmap_app.core.error_handlers import ValidationError, success_response

from ..config import MindMapDefaultConfig
from ..services.mindmap_service import MindMapService, MindMapSessionManager

mindmap_api_bp = Blueprint('mindmap_api', __name__)


def _word_from_body():
    data = request.get_json(silent=True) or {}
    word = data.get('word') if isinstance(data, dict) else None
    if not isinstance(word, str) or not word.strip():
        raise ValidationError('word is required', errors={'word': 'required'})
    return word.strip()


def _view_response(vault_filter=None):
    if vault_filter is None:
        vault_filter = request.args.get('vault', MindMapDefaultConfig.ALL_VAULTS)
    view = MindMapService.get_view(current_user.user_id, vault_filter)
    return success_response(view.to_dict())


@mindmap_api_bp.route('/', methods=['GET'])
@login_required
def get_mindmap():
    """
    Compute the mind map for the current user.
    Query: vault=all|<vault_id>
    """
    return _view_response()


@mindmap_api_bp.route('/center', methods=['POST'])
@login_required
def set_center():
    """Click-to-center. Input: {"word": str, "vault": optional}"""
    word = _word_from_body()
    MindMapSessionManager.load(current_user.user_id).click(word)
    return _view_response(_vault_from_body())


@mindmap_api_bp.route('/search', methods=['POST'])
@login_required
def search_center():
    """Search-to-center. Input: {"word": str, "vault": optional}"""
    word = _word_from_body()
    MindMapSessionManager.load(current_user.user_id).search(word)
    return _view_response(_vault_from_body())


@mindmap_api_bp.route('/reset', methods=['POST'])
@login_required
def reset_center():
    MindMapSessionManager.load(current_user.user_id).reset()
    return _view_response(_vault_from_body())


@mindmap_api_bp.route('/hover', methods=['POST'])
@login_required
def hover_node():
    """Input: {"node_id": str | null}"""
    data = request.get_json(silent=True) or {}
    node_id = data.get('node_id') if isinstance(data, dict) else None
    if node_id is not None and not isinstance(node_id, str):
        raise ValidationError('node_id must be a string or null', errors={'node_id': 'invalid'})
    manager = MindMapSessionManager.load(current_user.user_id)
    manager.hover(node_id)
    return success_response({'hovered_node': manager.hovered_node})


@mindmap_api_bp.route('/suggestions', methods=['GET'])
@login_required
def suggestions():
    words, total = MindMapService.get_suggestions(current_user.user_id, request.args.get('q', ''))
    return success_response({'words': words, 'total': total})


def _vault_from_body():
    data = request.get_json(silent=True) or {}
    if isinstance(data, dict) and 'vault' in data:
        return data['vault']
    return request.args.get('vault', MindMapDefaultConfig.ALL_VAULTS)
