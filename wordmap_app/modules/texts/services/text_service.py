"""
Text Service - CRUD for texts and vocabulary analysis.
"""
from flask import current_app

from wordmap_app.core.error_handlers import AuthorizationError, NotFoundError, ValidationError
from wordmap_app.models import Text, db
from wordmap_app.modules.vaults.services.vault_service import VaultService

from ..logics.text_analysis import extract_unique_words, match_vocabulary


def _require_text(value, field_name):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{field_name} is required', errors={field_name: 'required'})
    return value.strip()


class TextService:

    @staticmethod
    def list_texts(user_id):
        return Text.query.filter_by(user_id=user_id).order_by(Text.text_id.desc()).all()

    @staticmethod
    def get_text(user_id, text_id):
        text = db.session.get(Text, text_id)
        if text is None:
            raise NotFoundError('Text not found', resource='text')
        if text.user_id != user_id:
            raise AuthorizationError('You do not have access to this text')
        return text

    @staticmethod
    def create_text(user_id, title, content):
        text = Text(
            title=_require_text(title, 'title'),
            content=_require_text(content, 'content'),
            user_id=user_id,
        )
        db.session.add(text)
        db.session.commit()
        current_app.logger.info("Text created: %s (%s)", text.title, text.text_id)
        return text

    @staticmethod
    def update_text(user_id, text_id, title=None, content=None):
        text = TextService.get_text(user_id, text_id)
        if title is not None:
            text.title = _require_text(title, 'title')
        if content is not None:
            text.content = _require_text(content, 'content')
        db.session.commit()
        return text

    @staticmethod
    def delete_text(user_id, text_id):
        text = TextService.get_text(user_id, text_id)
        db.session.delete(text)
        db.session.commit()
        current_app.logger.info("Text %s deleted", text_id)

    @staticmethod
    def check_text_words(content, user_id):
        tokens = extract_unique_words(content)
        found = match_vocabulary(tokens, VaultService.list_vaults(user_id))
        current_app.logger.debug("Text analysis: %d tokens, %d known", len(tokens), len(found))
        return found
