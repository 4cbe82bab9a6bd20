"""
Link Service - Undirected links between words.

A link is one row in `word_links`; either column may hold either word, so
every lookup checks both directions.
"""
from flask import current_app
from sqlalchemy import and_, or_, select
from sqlalchemy.orm import aliased

from wordmap_app.core.error_handlers import ConflictError, ValidationError
from wordmap_app.core.signals import words_linked
from wordmap_app.models import Vault, Word, db, word_links
from wordmap_app.modules.profile.services.settings_service import SettingsService

from ..logics.word_rules import relation_key
from ..schemas import WordRelation
from .word_service import WordService


def _pair_clause(word_a_id, word_b_id):
    return or_(
        and_(word_links.c.word_a_id == word_a_id, word_links.c.word_b_id == word_b_id),
        and_(word_links.c.word_a_id == word_b_id, word_links.c.word_b_id == word_a_id),
    )


class LinkService:
    """Service for linking words."""

    @staticmethod
    def are_linked(word_a_id, word_b_id):
        row = db.session.execute(
            select(word_links.c.link_id).where(_pair_clause(word_a_id, word_b_id))
        ).first()
        return row is not None

    @staticmethod
    def link_words(user_id, word_a_id, word_b_id):
        if word_a_id == word_b_id:
            raise ValidationError('A word cannot be linked to itself', errors={'word_b_id': 'self_link'})

        word_a = WordService.get_word(user_id, word_a_id)
        word_b = WordService.get_word(user_id, word_b_id)

        if LinkService.are_linked(word_a.word_id, word_b.word_id):
            raise ConflictError('The words are already linked', resource='word_link')

        db.session.execute(word_links.insert().values(word_a_id=word_a.word_id, word_b_id=word_b.word_id))
        db.session.commit()
        current_app.logger.info("Linked words %s and %s", word_a.word_id, word_b.word_id)

        words_linked.send(
            current_app._get_current_object(),
            user_id=user_id, word_a_id=word_a.word_id, word_b_id=word_b.word_id, linked=True,
        )

    @staticmethod
    def unlink_words(user_id, word_a_id, word_b_id):
        WordService.get_word(user_id, word_a_id)
        WordService.get_word(user_id, word_b_id)

        result = db.session.execute(word_links.delete().where(_pair_clause(word_a_id, word_b_id)))
        db.session.commit()
        current_app.logger.info("Unlinked words %s and %s (%s rows)", word_a_id, word_b_id, result.rowcount)

        if result.rowcount:
            words_linked.send(
                current_app._get_current_object(),
                user_id=user_id, word_a_id=word_a_id, word_b_id=word_b_id, linked=False,
            )
        return result.rowcount > 0

    @staticmethod
    def _related_ids(word_id):
        rows = db.session.execute(
            select(word_links.c.word_a_id, word_links.c.word_b_id).where(
                or_(word_links.c.word_a_id == word_id, word_links.c.word_b_id == word_id)
            ).order_by(word_links.c.link_id)
        ).all()
        return [b if a == word_id else a for a, b in rows]

    @staticmethod
    def get_related_words(user_id, word_id):
        word = WordService.get_word(user_id, word_id)
        related_ids = LinkService._related_ids(word.word_id)
        if not related_ids:
            return []
        by_id = {w.word_id: w for w in Word.query.filter(Word.word_id.in_(related_ids)).all()}
        return [by_id[i] for i in related_ids if i in by_id]

    @staticmethod
    def get_linkable_words(user_id, word_id, all_vaults=None):
        """
        The user's words that are neither `word_id` nor already linked to it,
        by name. Limited to the word's own vault unless `all_vaults` (default:
        the user's use_all_vaults_for_links setting) is set.
        """
        word = WordService.get_word(user_id, word_id)
        if all_vaults is None:
            all_vaults = SettingsService.get_settings(user_id).use_all_vaults_for_links

        excluded = set(LinkService._related_ids(word.word_id))
        excluded.add(word.word_id)

        query = (
            Word.query.join(Vault, Word.vault_id == Vault.vault_id)
            .filter(Vault.user_id == user_id, Word.word_id.notin_(excluded))
        )
        if not all_vaults:
            query = query.filter(Word.vault_id == word.vault_id)
        return query.order_by(Word.name.asc(), Word.word_id.asc()).all()

    @staticmethod
    def get_all_relations(user_id):
        """
        Every link between the user's words, one entry per unordered pair,
        in link creation order.
        """
        word_a, word_b = aliased(Word), aliased(Word)
        vault_a, vault_b = aliased(Vault), aliased(Vault)

        rows = db.session.execute(
            select(word_a, word_b, vault_a.name, vault_b.name)
            .select_from(word_links)
            .join(word_a, word_a.word_id == word_links.c.word_a_id)
            .join(vault_a, vault_a.vault_id == word_a.vault_id)
            .join(word_b, word_b.word_id == word_links.c.word_b_id)
            .join(vault_b, vault_b.vault_id == word_b.vault_id)
            .where(vault_a.user_id == user_id, vault_b.user_id == user_id)
            .order_by(word_links.c.link_id)
        ).all()

        relations = []
        seen = set()
        for first, second, first_vault, second_vault in rows:
            key = relation_key(first.word_id, second.word_id)
            if key in seen:
                continue
            seen.add(key)
            relations.append(WordRelation(
                word_a=first,
                word_b=second,
                vault_a=first_vault,
                vault_b=second_vault,
            ))
        return relations
