"""
Sentence Service - Build, list and edit sentences made of vocabulary words.

Words typed into a sentence that are not in any vault yet go to the user's
builder vault, unsaved, so they can be reviewed and moved later.
"""
from flask import current_app
from sqlalchemy import func

from wordmap_app.core.error_handlers import AuthorizationError, NotFoundError
from wordmap_app.models import Sentence, SentenceWord, Vault, Word, db
from wordmap_app.modules.vaults.services.word_service import WordService

from ..config import SentencesDefaultConfig
from ..logics.sentence_rules import parse_sentence_input


class SentenceService:

    @staticmethod
    def list_sentences(user_id):
        """Newest first; each sentence's words come ordered by position."""
        return (
            Sentence.query.filter_by(user_id=user_id)
            .order_by(Sentence.created_at.desc(), Sentence.sentence_id.desc())
            .all()
        )

    @staticmethod
    def get_sentence(user_id, sentence_id):
        sentence = db.session.get(Sentence, sentence_id)
        if sentence is None:
            raise NotFoundError('Sentence not found', resource='sentence')
        if sentence.user_id != user_id:
            raise AuthorizationError('You do not have access to this sentence')
        return sentence

    @staticmethod
    def _builder_vault(user_id):
        vault = Vault.query.filter_by(
            user_id=user_id, name=SentencesDefaultConfig.BUILDER_VAULT_NAME
        ).first()
        if vault is None:
            vault = Vault(name=SentencesDefaultConfig.BUILDER_VAULT_NAME, user_id=user_id)
            db.session.add(vault)
            db.session.flush()
            current_app.logger.info("Builder vault created for user %s", user_id)
        return vault

    @staticmethod
    def _new_word(user_id, word_data):
        vault = SentenceService._builder_vault(user_id)
        # a builder vault keeps one word per name, like any other vault
        existing = Word.query.filter(
            func.lower(Word.name) == word_data.name.lower(),
            Word.vault_id == vault.vault_id,
        ).first()
        if existing is not None:
            return existing

        word = Word(
            name=word_data.name,
            grammatical_class=word_data.grammatical_class,
            translations=word_data.translations,
            category=word_data.category,
            confidence=SentencesDefaultConfig.NEW_WORD_CONFIDENCE,
            is_saved=False,
            vault_id=vault.vault_id,
        )
        db.session.add(word)
        db.session.flush()
        return word

    @staticmethod
    def _build_entries(user_id, entries):
        built = []
        for entry in entries:
            if entry.word_id is not None:
                word = WordService.get_word(user_id, entry.word_id)
            else:
                word = SentenceService._new_word(user_id, entry.word_data)
            built.append(SentenceWord(
                word_id=word.word_id,
                position=entry.position,
                highlight_color=entry.highlight_color,
            ))
        return built

    @staticmethod
    def create_sentence(user_id, data):
        payload = parse_sentence_input(data)
        try:
            sentence = Sentence(title=payload.title, notes=payload.notes, user_id=user_id)
            sentence.words = SentenceService._build_entries(user_id, payload.words)
            db.session.add(sentence)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        current_app.logger.info(
            "Sentence %s created for user %s with %d words", sentence.sentence_id, user_id, len(payload.words)
        )
        return sentence

    @staticmethod
    def update_sentence(user_id, sentence_id, data):
        """Replace title, notes and every word of the sentence."""
        sentence = SentenceService.get_sentence(user_id, sentence_id)
        payload = parse_sentence_input(data)
        try:
            sentence.title = payload.title
            sentence.notes = payload.notes
            sentence.words = SentenceService._build_entries(user_id, payload.words)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        current_app.logger.info("Sentence %s updated", sentence_id)
        return sentence

    @staticmethod
    def delete_sentence(user_id, sentence_id):
        sentence = SentenceService.get_sentence(user_id, sentence_id)
        db.session.delete(sentence)
        db.session.commit()
        current_app.logger.info("Sentence %s deleted", sentence_id)

    @staticmethod
    def get_words_for_builder(user_id):
        """Every word of the user, any vault, by name."""
        return (
            Word.query.join(Vault, Word.vault_id == Vault.vault_id)
            .filter(Vault.user_id == user_id)
            .order_by(Word.name.asc(), Word.word_id.asc())
            .all()
        )
