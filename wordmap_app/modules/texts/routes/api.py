# File: wordmap_app/modules/texts/routes/api.py
from flask import Blueprint, request
from flask_login import current_user, login_required

from wordmap_app.core.error_handlers import success_response

from ..services.text_service import TextService

texts_api_bp = Blueprint('texts_api', __name__)


def _body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@texts_api_bp.route('/', methods=['GET'])
@login_required
def list_texts():
    return success_response([text.to_dict() for text in TextService.list_texts(current_user.user_id)])


@texts_api_bp.route('/', methods=['POST'])
@login_required
def create_text():
    data = _body()
    text = TextService.create_text(current_user.user_id, data.get('title'), data.get('content'))
    return success_response(text.to_dict(), message='Text created'), 201


@texts_api_bp.route('/<int:text_id>', methods=['GET'])
@login_required
def get_text(text_id):
    return success_response(TextService.get_text(current_user.user_id, text_id).to_dict())


@texts_api_bp.route('/<int:text_id>', methods=['PATCH'])
@login_required
def update_text(text_id):
    data = _body()
    text = TextService.update_text(current_user.user_id, text_id, data.get('title'), data.get('content'))
    return success_response(text.to_dict(), message='Text updated')


@texts_api_bp.route('/<int:text_id>', methods=['DELETE'])
@login_required
def delete_text(text_id):
    TextService.delete_text(current_user.user_id, text_id)
    return success_response(message='Text deleted')


@texts_api_bp.route('/<int:text_id>/analysis', methods=['GET'])
@login_required
def analyse_text(text_id):
    text = TextService.get_text(current_user.user_id, text_id)
    return success_response(TextService.check_text_words(text.content, current_user.user_id))


@texts_api_bp.route('/analysis', methods=['POST'])
@login_required
def analyse_content():
    """Input: {"content": str}"""
    content = _body().get('content') or ''
    return success_response(TextService.check_text_words(content, current_user.user_id))
