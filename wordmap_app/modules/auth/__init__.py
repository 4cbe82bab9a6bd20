# File: wordmap_app/modules/auth/__init__.py
"""Accounts, session login and the password reset code flow."""

module_metadata = {
    'name': 'Authentication',
    'icon': 'lock',
    'category': 'System',
    'url_prefix': '/api/auth',
    'enabled': True
}
