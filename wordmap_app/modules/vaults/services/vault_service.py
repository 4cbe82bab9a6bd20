"""
Vault Service - CRUD for vaults.

All methods take the acting user's id and refuse to touch vaults owned by
someone else.
"""
from flask import current_app
from sqlalchemy import or_

from wordmap_app.core.error_handlers import AuthorizationError, NotFoundError, ValidationError
from wordmap_app.models import Vault, db, word_links


class VaultService:
    """Service for vault related operations."""

    @staticmethod
    def list_vaults(user_id):
        """Vaults of the user, newest first (their words newest first too)."""
        return (
            Vault.query.filter_by(user_id=user_id)
            .order_by(Vault.vault_id.desc())
            .all()
        )

    @staticmethod
    def get_vault(user_id, vault_id):
        vault = db.session.get(Vault, vault_id)
        if vault is None:
            raise NotFoundError('Vault not found', resource='vault')
        if vault.user_id != user_id:
            raise AuthorizationError('You do not have access to this vault')
        return vault

    @staticmethod
    def create_vault(user_id, name):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError('Vault name is required', errors={'name': 'required'})

        vault = Vault(name=name.strip(), user_id=user_id)
        db.session.add(vault)
        db.session.commit()
        current_app.logger.info("Vault created: %s (%s) for user %s", vault.name, vault.vault_id, user_id)
        return vault

    @staticmethod
    def rename_vault(user_id, vault_id, new_name):
        if not isinstance(new_name, str) or not new_name.strip():
            raise ValidationError('Vault name is required', errors={'name': 'required'})

        vault = VaultService.get_vault(user_id, vault_id)
        vault.name = new_name.strip()
        db.session.commit()
        current_app.logger.info("Vault %s renamed to %s", vault_id, vault.name)
        return vault

    @staticmethod
    def delete_vault(user_id, vault_id):
        """Delete a vault, its words and every link touching those words."""
        vault = VaultService.get_vault(user_id, vault_id)
        word_ids = [word.word_id for word in vault.words]

        if word_ids:
            result = db.session.execute(
                word_links.delete().where(
                    or_(word_links.c.word_a_id.in_(word_ids), word_links.c.word_b_id.in_(word_ids))
                )
            )
            current_app.logger.info(
                "Removed %s links before deleting vault %s", result.rowcount, vault_id
            )

        db.session.delete(vault)
        db.session.commit()
        current_app.logger.info("Vault %s deleted with %s words", vault_id, len(word_ids))
