# File: wordmap_app/modules/vaults/__init__.py
"""Vaults, words and the links between words."""

module_metadata = {
    'name': 'Vaults',
    'icon': 'book-open',
    'category': 'Vocabulary',
    'url_prefix': '/api',
    'enabled': True
}
