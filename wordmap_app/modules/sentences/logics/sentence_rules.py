"""
Sentence Rules - Validate sentence payloads.

A sentence needs at least one word. Each entry either points at an existing
word (``word_id``) or carries the data for a new one (``word_data``).
"""

from typing import Any, Dict, List, Optional

from wordmap_app.core.error_handlers import ValidationError
from wordmap_app.modules.vaults.logics.word_rules import (
    normalize_id,
    normalize_name,
    normalize_translations,
)

from ..config import SentencesDefaultConfig
from ..schemas import NewWordData, SentenceInput, SentenceWordInput


def _optional_text(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f'{field_name} must be a string', errors={field_name: 'invalid'})
    return value.strip() or None


def parse_word_data(data: Any, index: int) -> NewWordData:
    if not isinstance(data, dict):
        raise ValidationError('word_data must be an object', errors={f'words[{index}]': 'invalid'})
    return NewWordData(
        name=normalize_name(data.get('name')),
        grammatical_class=normalize_name(data.get('grammatical_class'), 'grammatical_class'),
        translations=normalize_translations(data.get('translations')),
        category=_optional_text(data.get('category'), 'category'),
    )


def parse_sentence_word(item: Any, index: int) -> SentenceWordInput:
    key = f'words[{index}]'
    if not isinstance(item, dict):
        raise ValidationError('Each word must be an object', errors={key: 'invalid'})

    has_id = item.get('word_id') is not None
    has_data = item.get('word_data') is not None
    if has_id == has_data:
        raise ValidationError('Give either word_id or word_data', errors={key: 'word_id_or_word_data'})

    color = _optional_text(item.get('highlight_color'), 'highlight_color')
    if color and len(color) > SentencesDefaultConfig.HIGHLIGHT_COLOR_MAX_LENGTH:
        raise ValidationError('highlight_color is too long', errors={'highlight_color': 'too_long'})

    return SentenceWordInput(
        position=normalize_id(item.get('position'), 'position'),
        word_id=normalize_id(item['word_id'], 'word_id') if has_id else None,
        word_data=parse_word_data(item['word_data'], index) if has_data else None,
        highlight_color=color,
    )


def parse_sentence_input(data: Optional[Dict[str, Any]]) -> SentenceInput:
    data = data or {}
    words = data.get('words')
    if not isinstance(words, list) or not words:
        raise ValidationError('A sentence needs at least one word', errors={'words': 'required'})

    entries: List[SentenceWordInput] = [parse_sentence_word(item, i) for i, item in enumerate(words)]
    return SentenceInput(
        words=entries,
        title=_optional_text(data.get('title'), 'title'),
        notes=_optional_text(data.get('notes'), 'notes'),
    )
