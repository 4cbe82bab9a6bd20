"""
Flashcard Service - deck loading, session summary and progress updates.
"""
from datetime import datetime, timezone

from flask import current_app

from wordmap_app.core.signals import word_progress_updated
from wordmap_app.models import Word, db
from wordmap_app.modules.vaults.logics.word_rules import normalize_confidence
from wordmap_app.modules.vaults.services.vault_service import VaultService
from wordmap_app.modules.vaults.services.word_service import WordService

from ..logics.confidence import bucket_counts


class FlashcardService:

    @staticmethod
    def get_flashcard_words(user_id, vault_id):
        """Saved words of a vault, oldest first."""
        VaultService.get_vault(user_id, vault_id)
        return (
            Word.query.filter_by(vault_id=vault_id, is_saved=True)
            .order_by(Word.word_id.asc())
            .all()
        )

    @staticmethod
    def create_session_summary(user_id, vault_id):
        vault = VaultService.get_vault(user_id, vault_id)
        words = FlashcardService.get_flashcard_words(user_id, vault_id)
        counts = bucket_counts(word.confidence for word in words)
        return {
            'session_id': f"session_{int(datetime.now(timezone.utc).timestamp() * 1000)}_{vault_id}",
            'vault_id': vault.vault_id,
            'vault_name': vault.name,
            'total_words': counts['total'],
            'words_to_review': counts['for_review'],
            'new_words': counts['new'],
            'mastered_words': counts['mastered'],
            'completed_words': 0,
            'start_time': datetime.now(timezone.utc).isoformat(),
        }

    @staticmethod
    def get_overview(user_id):
        """Per-vault bucket counts for every vault of the user."""
        overview = []
        for vault in VaultService.list_vaults(user_id):
            counts = bucket_counts(word.confidence for word in vault.words if word.is_saved)
            overview.append({'vault_id': vault.vault_id, 'vault_name': vault.name, **counts})
        return overview

    @staticmethod
    def update_word_progress(user_id, word_id, confidence):
        confidence = normalize_confidence(confidence)
        word = WordService.get_word(user_id, word_id)
        word.confidence = confidence
        db.session.commit()
        current_app.logger.info("Word %s confidence set to %s", word_id, confidence)

        word_progress_updated.send(
            current_app._get_current_object(),
            user_id=user_id, word_id=word.word_id, confidence=confidence,
        )
        return word
