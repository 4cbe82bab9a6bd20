"""
Stats Service - Vocabulary counts for one user, grouped in SQL.
"""
from flask import current_app
from sqlalchemy import func, select

from wordmap_app.models import Vault, Word, db, word_links

from ..logics.stats import build_stats


class StatsService:

    @staticmethod
    def _grouped(column, user_id):
        return db.session.execute(
            select(column, func.count(Word.word_id))
            .join(Vault, Word.vault_id == Vault.vault_id)
            .where(Vault.user_id == user_id)
            .group_by(column)
        ).all()

    @staticmethod
    def get_user_stats(user_id):
        user_words = (
            select(Word.word_id)
            .join(Vault, Word.vault_id == Vault.vault_id)
            .where(Vault.user_id == user_id)
        )
        total_words = db.session.execute(
            select(func.count()).select_from(user_words.subquery())
        ).scalar()
        total_vaults = db.session.execute(
            select(func.count(Vault.vault_id)).where(Vault.user_id == user_id)
        ).scalar()

        # words with at least one link, on either side of the pair
        linked_ids = select(word_links.c.word_a_id).union(select(word_links.c.word_b_id)).subquery()
        total_connections = db.session.execute(
            select(func.count()).select_from(
                user_words.where(Word.word_id.in_(select(linked_ids.c.word_a_id))).subquery()
            )
        ).scalar()

        stats = build_stats(
            total_words=total_words,
            total_vaults=total_vaults,
            by_confidence=StatsService._grouped(Word.confidence, user_id),
            by_category=StatsService._grouped(Word.category, user_id),
            by_grammatical_class=StatsService._grouped(Word.grammatical_class, user_id),
            total_connections=total_connections,
        )
        current_app.logger.debug("Stats for user %s: %s words", user_id, stats['total_words'])
        return stats
