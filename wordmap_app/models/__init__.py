"""Database models package for Word Map."""

from ..db_instance import db

from .user import User, UserSettings
from .vault import Vault, Word, word_links
from .text import Text
from .sentence import Sentence, SentenceWord

__all__ = [
    'db',
    'User',
    'UserSettings',
    'Vault',
    'Word',
    'word_links',
    'Text',
    'Sentence',
    'SentenceWord',
]
