# File: wordmap_app/modules/sentences/routes/api.py
from flask import Blueprint, request
from flask_login import current_user, login_required

from wordmap_app.core.error_handlers import success_response

from ..services.sentence_service import SentenceService

sentences_api_bp = Blueprint('sentences_api', __name__)


def _body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@sentences_api_bp.route('/', methods=['GET'])
@login_required
def list_sentences():
    sentences = SentenceService.list_sentences(current_user.user_id)
    return success_response([sentence.to_dict() for sentence in sentences])


@sentences_api_bp.route('/', methods=['POST'])
@login_required
def create_sentence():
    """Input: {"title"?, "notes"?, "words": [{"word_id" | "word_data", "position", "highlight_color"?}]}"""
    sentence = SentenceService.create_sentence(current_user.user_id, _body())
    return success_response(sentence.to_dict(), message='Sentence created'), 201


@sentences_api_bp.route('/words', methods=['GET'])
@login_required
def builder_words():
    words = SentenceService.get_words_for_builder(current_user.user_id)
    return success_response([word.to_dict() for word in words])


@sentences_api_bp.route('/<int:sentence_id>', methods=['GET'])
@login_required
def get_sentence(sentence_id):
    return success_response(SentenceService.get_sentence(current_user.user_id, sentence_id).to_dict())


@sentences_api_bp.route('/<int:sentence_id>', methods=['PATCH'])
@login_required
def update_sentence(sentence_id):
    sentence = SentenceService.update_sentence(current_user.user_id, sentence_id, _body())
    return success_response(sentence.to_dict(), message='Sentence updated')


@sentences_api_bp.route('/<int:sentence_id>', methods=['DELETE'])
@login_required
def delete_sentence(sentence_id):
    SentenceService.delete_sentence(current_user.user_id, sentence_id)
    return success_response(message='Sentence deleted')
