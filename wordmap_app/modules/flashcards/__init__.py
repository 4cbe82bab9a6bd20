# File: wordmap_app/modules/flashcards/__init__.py
"""Flashcard study grouped by confidence level."""

module_metadata = {
    'name': 'Flashcards',
    'icon': 'layers',
    'category': 'Learning',
    'url_prefix': '/api/flashcards',
    'enabled': True
}
