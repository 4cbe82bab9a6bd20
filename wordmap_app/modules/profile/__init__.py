# File: wordmap_app/modules/profile/__init__.py
"""Per-user settings and vocabulary statistics."""

module_metadata = {
    'name': 'Profile',
    'icon': 'user',
    'category': 'Account',
    'url_prefix': '/api/profile',
    'enabled': True
}
