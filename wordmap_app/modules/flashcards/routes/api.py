# File: wordmap_app/modules/flashcards/routes/api.py
from flask import Blueprint, request
from flask_login import current_user, login_required

from wordmap_app.core.error_handlers import ValidationError, success_response

from ..logics.confidence import calculate_next_review
from ..services.flashcard_service import FlashcardService

flashcards_api_bp = Blueprint('flashcards_api', __name__)


@flashcards_api_bp.route('/overview', methods=['GET'])
@login_required
def overview():
    return success_response(FlashcardService.get_overview(current_user.user_id))


@flashcards_api_bp.route('/vaults/<int:vault_id>/words', methods=['GET'])
@login_required
def deck(vault_id):
    words = FlashcardService.get_flashcard_words(current_user.user_id, vault_id)
    return success_response([word.to_dict() for word in words])


@flashcards_api_bp.route('/vaults/<int:vault_id>/session', methods=['POST'])
@login_required
def start_session(vault_id):
    return success_response(FlashcardService.create_session_summary(current_user.user_id, vault_id))


@flashcards_api_bp.route('/words/<int:word_id>/progress', methods=['POST'])
@login_required
def update_progress(word_id):
    """
    Record a flashcard answer.
    Input: {"confidence": int (1-4), "review_count": int (optional)}
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict) or 'confidence' not in data:
        raise ValidationError('confidence is required', errors={'confidence': 'required'})

    try:
        review_count = max(int(data.get('review_count', 1)), 0)
    except (TypeError, ValueError):
        raise ValidationError('review_count must be an integer', errors={'review_count': 'invalid'})

    word = FlashcardService.update_word_progress(current_user.user_id, word_id, data['confidence'])
    next_review = calculate_next_review(word.confidence, review_count)
    return success_response({'word': word.to_dict(), 'next_review': next_review.isoformat()})
