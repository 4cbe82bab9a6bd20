"""
Word Rules - Pure validation and normalization for word payloads.

No database access. Raises ValidationError with a per-field error map so the
API can answer 400 with details.
"""

from typing import Any, Dict, List, Optional

from wordmap_app.core.error_handlers import ValidationError
from wordmap_app.models.vault import Word

from ..schemas import WordInput, WordUpdate


def normalize_name(value: Any, field_name: str = 'name') -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required", errors={field_name: 'required'})
    return value.strip()


def normalize_translations(value: Any) -> List[str]:
    """Accept a list or a comma separated string; drop blanks, keep order."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(',')
    if not isinstance(value, (list, tuple)):
        raise ValidationError('translations must be a list', errors={'translations': 'invalid'})
    cleaned = []
    for item in value:
        if not isinstance(item, str):
            raise ValidationError('translations must be strings', errors={'translations': 'invalid'})
        item = item.strip()
        if item:
            cleaned.append(item)
    return cleaned


def normalize_confidence(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError('confidence must be an integer', errors={'confidence': 'invalid'})
    try:
        confidence = int(value)
    except (TypeError, ValueError):
        raise ValidationError('confidence must be an integer', errors={'confidence': 'invalid'})
    if not Word.CONFIDENCE_MIN <= confidence <= Word.CONFIDENCE_MAX:
        raise ValidationError(
            f'confidence must be between {Word.CONFIDENCE_MIN} and {Word.CONFIDENCE_MAX}',
            errors={'confidence': 'out_of_range'},
        )
    return confidence


def normalize_id(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f'{field_name} must be an integer', errors={field_name: 'invalid'})
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{field_name} must be an integer', errors={field_name: 'invalid'})


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError('category must be a string', errors={'category': 'invalid'})
    return value.strip() or None


def parse_word_input(data: Optional[Dict[str, Any]]) -> WordInput:
    data = data or {}
    return WordInput(
        name=normalize_name(data.get('name')),
        grammatical_class=normalize_name(data.get('grammatical_class'), 'grammatical_class'),
        vault_id=normalize_id(data.get('vault_id'), 'vault_id'),
        translations=normalize_translations(data.get('translations')),
        confidence=normalize_confidence(data.get('confidence', Word.CONFIDENCE_MIN)),
        category=_optional_text(data.get('category')),
        is_saved=bool(data.get('is_saved', True)),
    )


def parse_word_update(data: Optional[Dict[str, Any]]) -> WordUpdate:
    data = data or {}
    update = WordUpdate()
    if 'name' in data:
        update.name = normalize_name(data['name'])
    if 'grammatical_class' in data:
        update.grammatical_class = normalize_name(data['grammatical_class'], 'grammatical_class')
    if 'translations' in data:
        update.translations = normalize_translations(data['translations'])
    if 'confidence' in data:
        update.confidence = normalize_confidence(data['confidence'])
    if 'category' in data:
        update.category = _optional_text(data['category'])
        update.category_set = True
    return update


def relation_key(word_a_id: int, word_b_id: int) -> tuple:
    """Order-independent key for an undirected link."""
    return (min(word_a_id, word_b_id), max(word_a_id, word_b_id))
