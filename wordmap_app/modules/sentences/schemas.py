# File: wordmap_app/modules/sentences/schemas.py
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class NewWordData:
    """A word that does not exist yet; it is created in the builder vault."""
    name: str
    grammatical_class: str
    translations: List[str] = field(default_factory=list)
    category: Optional[str] = None


@dataclass
class SentenceWordInput:
    """One slot: exactly one of `word_id` and `word_data` is set."""
    position: int
    word_id: Optional[int] = None
    word_data: Optional[NewWordData] = None
    highlight_color: Optional[str] = None


@dataclass
class SentenceInput:
    words: List[SentenceWordInput]
    title: Optional[str] = None
    notes: Optional[str] = None
