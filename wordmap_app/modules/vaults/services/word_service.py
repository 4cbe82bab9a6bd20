"""
Word Service - CRUD and search for words inside the user's vaults.
"""
from flask import current_app
from sqlalchemy import func, or_

from wordmap_app.core.error_handlers import AuthorizationError, ConflictError, NotFoundError
from wordmap_app.models import Vault, Word, db, word_links

from ..logics.word_rules import normalize_name, parse_word_input, parse_word_update
from .vault_service import VaultService


class WordService:
    """Service for word related operations."""

    @staticmethod
    def get_word(user_id, word_id):
        word = db.session.get(Word, word_id)
        if word is None:
            raise NotFoundError('Word not found', resource='word')
        if word.vault.user_id != user_id:
            raise AuthorizationError('You do not have access to this word')
        return word

    @staticmethod
    def word_exists_in_vault(name, vault_id, exclude_word_id=None):
        """Case-insensitive name check inside one vault."""
        if not name:
            return False
        query = Word.query.filter(
            func.lower(Word.name) == name.strip().lower(),
            Word.vault_id == vault_id,
        )
        if exclude_word_id is not None:
            query = query.filter(Word.word_id != exclude_word_id)
        return db.session.query(query.exists()).scalar()

    @staticmethod
    def create_word(user_id, data):
        payload = parse_word_input(data)
        VaultService.get_vault(user_id, payload.vault_id)

        if WordService.word_exists_in_vault(payload.name, payload.vault_id):
            raise ConflictError('Word already exists in this vault', resource='word')

        word = Word(
            name=payload.name,
            grammatical_class=payload.grammatical_class,
            category=payload.category,
            translations=payload.translations,
            confidence=payload.confidence,
            is_saved=payload.is_saved,
            vault_id=payload.vault_id,
        )
        db.session.add(word)
        db.session.commit()
        current_app.logger.info("Word created: %s (%s) in vault %s", word.name, word.word_id, word.vault_id)
        return word

    @staticmethod
    def update_word(user_id, word_id, data):
        word = WordService.get_word(user_id, word_id)
        changes = parse_word_update(data).changes()

        if 'name' in changes and WordService.word_exists_in_vault(
            changes['name'], word.vault_id, exclude_word_id=word.word_id
        ):
            raise ConflictError('Word already exists in this vault', resource='word')

        for attr, value in changes.items():
            setattr(word, attr, value)
        db.session.commit()
        current_app.logger.info("Word %s updated: %s", word_id, sorted(changes))
        return word

    @staticmethod
    def delete_word(user_id, word_id):
        word = WordService.get_word(user_id, word_id)
        db.session.execute(
            word_links.delete().where(
                or_(word_links.c.word_a_id == word.word_id, word_links.c.word_b_id == word.word_id)
            )
        )
        db.session.delete(word)
        db.session.commit()
        current_app.logger.info("Word %s deleted", word_id)

    @staticmethod
    def remove_word_from_vault(user_id, word_name, vault_id):
        """Delete the word called `word_name` (case-insensitive) from a vault."""
        VaultService.get_vault(user_id, vault_id)
        name = normalize_name(word_name)
        word = Word.query.filter(
            func.lower(Word.name) == name.lower(),
            Word.vault_id == vault_id,
        ).first()
        if word is None:
            raise NotFoundError('Word not found in vault', resource='word')
        WordService.delete_word(user_id, word.word_id)

    @staticmethod
    def move_word_to_vault(user_id, word_id, new_vault_id):
        word = WordService.get_word(user_id, word_id)
        target = VaultService.get_vault(user_id, new_vault_id)

        if WordService.word_exists_in_vault(word.name, target.vault_id, exclude_word_id=word.word_id):
            raise ConflictError('Word already exists in the target vault', resource='word')

        word.vault_id = target.vault_id
        word.is_saved = True
        db.session.commit()
        current_app.logger.info("Word %s moved to vault %s", word_id, new_vault_id)
        return word

    @staticmethod
    def unsave_word(user_id, word_id):
        word = WordService.get_word(user_id, word_id)
        word.is_saved = False
        db.session.commit()
        return word

    @staticmethod
    def search_words(user_id, term):
        """
        Words whose name or category contains `term`, or with a translation
        equal to it. Case-insensitive. Returns (word, vault) pairs.
        """
        if not term or not term.strip():
            return []
        needle = term.strip().lower()

        rows = (
            db.session.query(Word, Vault)
            .join(Vault, Word.vault_id == Vault.vault_id)
            .filter(Vault.user_id == user_id)
            .order_by(Word.word_id)
            .all()
        )

        results = []
        for word, vault in rows:
            name_hit = needle in word.name.lower()
            category_hit = bool(word.category) and needle in word.category.lower()
            translation_hit = any(t.lower() == needle for t in (word.translations or []))
            if name_hit or category_hit or translation_hit:
                results.append((word, vault))
        return results
