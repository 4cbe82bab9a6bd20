# File: wordmap_app/modules/vaults/routes/api.py
# Vaults, words and links - JSON endpoints

from flask import Blueprint, request
from flask_login import current_user, login_required

from wordmap_app.core.error_handlers import ValidationError, success_response

from ..logics.word_rules import normalize_id
from ..services.link_service import LinkService
from ..services.vault_service import VaultService
from ..services.word_service import WordService

vaults_api_bp = Blueprint('vaults_api', __name__)


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Expected a JSON object')
    return data


# ---------------------------------------------------------------------------
# Vaults
# ---------------------------------------------------------------------------

@vaults_api_bp.route('/vaults', methods=['GET'])
@login_required
def list_vaults():
    vaults = VaultService.list_vaults(current_user.user_id)
    return success_response([vault.to_dict() for vault in vaults])


@vaults_api_bp.route('/vaults', methods=['POST'])
@login_required
def create_vault():
    vault = VaultService.create_vault(current_user.user_id, _json_body().get('name'))
    return success_response(vault.to_dict(), message='Vault created'), 201


@vaults_api_bp.route('/vaults/<int:vault_id>', methods=['GET'])
@login_required
def get_vault(vault_id):
    vault = VaultService.get_vault(current_user.user_id, vault_id)
    return success_response(vault.to_dict())


@vaults_api_bp.route('/vaults/<int:vault_id>', methods=['PATCH'])
@login_required
def rename_vault(vault_id):
    vault = VaultService.rename_vault(current_user.user_id, vault_id, _json_body().get('name'))
    return success_response(vault.to_dict(), message='Vault renamed')


@vaults_api_bp.route('/vaults/<int:vault_id>', methods=['DELETE'])
@login_required
def delete_vault(vault_id):
    VaultService.delete_vault(current_user.user_id, vault_id)
    return success_response(message='Vault deleted')


@vaults_api_bp.route('/vaults/<int:vault_id>/words/exists', methods=['GET'])
@login_required
def word_exists(vault_id):
    VaultService.get_vault(current_user.user_id, vault_id)
    exists = WordService.word_exists_in_vault(request.args.get('name', ''), vault_id)
    return success_response({'exists': bool(exists)})


@vaults_api_bp.route('/vaults/<int:vault_id>/words', methods=['DELETE'])
@login_required
def remove_word_from_vault(vault_id):
    name = request.args.get('name') or _json_body().get('name')
    WordService.remove_word_from_vault(current_user.user_id, name, vault_id)
    return success_response(message='Word removed from vault')


# ---------------------------------------------------------------------------
# Words
# ---------------------------------------------------------------------------

@vaults_api_bp.route('/words', methods=['POST'])
@login_required
def create_word():
    word = WordService.create_word(current_user.user_id, _json_body())
    return success_response(word.to_dict(), message='Word created'), 201


@vaults_api_bp.route('/words/search', methods=['GET'])
@login_required
def search_words():
    results = WordService.search_words(current_user.user_id, request.args.get('q', ''))
    return success_response([
        {'word': word.to_dict(), 'vault': vault.to_dict(include_words=False)}
        for word, vault in results
    ])


@vaults_api_bp.route('/words/<int:word_id>', methods=['GET'])
@login_required
def get_word(word_id):
    return success_response(WordService.get_word(current_user.user_id, word_id).to_dict())


@vaults_api_bp.route('/words/<int:word_id>', methods=['PATCH'])
@login_required
def update_word(word_id):
    word = WordService.update_word(current_user.user_id, word_id, _json_body())
    return success_response(word.to_dict(), message='Word updated')


@vaults_api_bp.route('/words/<int:word_id>', methods=['DELETE'])
@login_required
def delete_word(word_id):
    WordService.delete_word(current_user.user_id, word_id)
    return success_response(message='Word deleted')


@vaults_api_bp.route('/words/<int:word_id>/move', methods=['POST'])
@login_required
def move_word(word_id):
    vault_id = normalize_id(_json_body().get('vault_id'), 'vault_id')
    word = WordService.move_word_to_vault(current_user.user_id, word_id, vault_id)
    return success_response(word.to_dict(), message='Word moved')


@vaults_api_bp.route('/words/<int:word_id>/unsave', methods=['POST'])
@login_required
def unsave_word(word_id):
    word = WordService.unsave_word(current_user.user_id, word_id)
    return success_response(word.to_dict())


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------

@vaults_api_bp.route('/words/<int:word_id>/links', methods=['POST'])
@login_required
def link_words(word_id):
    other_id = normalize_id(_json_body().get('word_id'), 'word_id')
    LinkService.link_words(current_user.user_id, word_id, other_id)
    return success_response(message='Words linked'), 201


@vaults_api_bp.route('/words/<int:word_id>/links/<int:other_id>', methods=['DELETE'])
@login_required
def unlink_words(word_id, other_id):
    removed = LinkService.unlink_words(current_user.user_id, word_id, other_id)
    return success_response({'removed': removed})


@vaults_api_bp.route('/words/<int:word_id>/related', methods=['GET'])
@login_required
def related_words(word_id):
    words = LinkService.get_related_words(current_user.user_id, word_id)
    return success_response([word.to_dict() for word in words])


@vaults_api_bp.route('/words/<int:word_id>/linkable', methods=['GET'])
@login_required
def linkable_words(word_id):
    words = LinkService.get_linkable_words(current_user.user_id, word_id)
    return success_response([word.to_dict() for word in words])


@vaults_api_bp.route('/relations', methods=['GET'])
@login_required
def all_relations():
    relations = LinkService.get_all_relations(current_user.user_id)
    return success_response([relation.to_dict() for relation in relations])
