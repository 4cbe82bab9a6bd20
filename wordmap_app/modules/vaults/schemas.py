# File: wordmap_app/modules/vaults/schemas.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class WordInput:
    """Validated payload for creating a word."""
    name: str
    grammatical_class: str
    vault_id: int
    translations: List[str] = field(default_factory=list)
    confidence: int = 1
    category: Optional[str] = None
    is_saved: bool = True


@dataclass
class WordUpdate:
    """Partial update; None means 'leave unchanged' except for `category`."""
    name: Optional[str] = None
    grammatical_class: Optional[str] = None
    translations: Optional[List[str]] = None
    confidence: Optional[int] = None
    category: Optional[str] = None
    category_set: bool = False

    def changes(self) -> Dict[str, Any]:
        data = {}
        for attr in ('name', 'grammatical_class', 'translations', 'confidence'):
            value = getattr(self, attr)
            if value is not None:
                data[attr] = value
        if self.category_set:
            data['category'] = self.category
        return data


@dataclass
class WordRelation:
    """A deduplicated link with the vault names of both ends."""
    word_a: Any
    word_b: Any
    vault_a: str
    vault_b: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word_a': self.word_a.to_dict(),
            'word_b': self.word_b.to_dict(),
            'vault_a': self.vault_a,
            'vault_b': self.vault_b,
        }
