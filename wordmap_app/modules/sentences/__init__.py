# File: wordmap_app/modules/sentences/__init__.py
"""Sentences assembled from the user's words."""

module_metadata = {
    'name': 'Sentences',
    'icon': 'align-left',
    'category': 'Learning',
    'url_prefix': '/api/sentences',
    'enabled': True
}
