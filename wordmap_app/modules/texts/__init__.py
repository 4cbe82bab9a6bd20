# File: wordmap_app/modules/texts/__init__.py
# File: wordmap_app/modules/texts/__init__.py
"""Free-form texts checked against the user's vocabulary."""

module_metadata = {
    'name': 'Texts',
    'icon': 'file-text',
    'category': 'Learning',
    'url_prefix': '/api/texts',
    'enabled': True
}
