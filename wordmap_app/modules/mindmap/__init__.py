# File: wordmap_app/modules/mindmap/__init__.py
"""Connection mind map: radial layout of linked words around a center word."""

module_metadata = {
    'name': 'Mind Map',
    'icon': 'share-2',
    'category': 'Vocabulary',
    'url_prefix': '/api/mindmap',
    'enabled': True
}
