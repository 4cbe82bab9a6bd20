"""Vault, word and word-link models."""

from __future__ import annotations

from sqlalchemy.sql import func
from sqlalchemy.types import JSON

from ..db_instance import db

# Undirected link between two words. A pair is stored once, in whichever
# order it was created; readers must look at both columns.
word_links = db.Table(
    'word_links',
    db.Column('link_id', db.Integer, primary_key=True),
    db.Column('word_a_id', db.Integer, db.ForeignKey('words.word_id', ondelete='CASCADE'), nullable=False),
    db.Column('word_b_id', db.Integer, db.ForeignKey('words.word_id', ondelete='CASCADE'), nullable=False),
    db.UniqueConstraint('word_a_id', 'word_b_id', name='_word_link_uc'),
    db.CheckConstraint('word_a_id <> word_b_id', name='_word_link_no_self_loop'),
)


class Vault(db.Model):
    """A named collection of words owned by a user."""

    __tablename__ = 'vaults'

    vault_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    words = db.relationship(
        'Word', backref='vault', lazy=True, cascade='all, delete-orphan',
        order_by='Word.word_id.desc()',
    )

    def to_dict(self, include_words: bool = True) -> dict[str, object]:
        data = {
            'id': self.vault_id,
            'name': self.name,
            'user_id': self.user_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_words:
            data['words'] = [word.to_dict() for word in self.words]
        return data


class Word(db.Model):
    """A vocabulary entry inside a vault."""

    __tablename__ = 'words'

    CONFIDENCE_MIN = 1
    CONFIDENCE_MAX = 4

    word_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    grammatical_class = db.Column(db.String(50), nullable=False)
    category = db.Column(db.String(100), nullable=True)
    translations = db.Column(JSON, nullable=False, default=list)
    confidence = db.Column(db.Integer, nullable=False, default=1)
    is_saved = db.Column(db.Boolean, nullable=False, default=True)
    vault_id = db.Column(
        db.Integer, db.ForeignKey('vaults.vault_id', ondelete='CASCADE'), nullable=False, index=True
    )
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def to_dict(self) -> dict[str, object]:
        return {
            'id': self.word_id,
            'name': self.name,
            'grammatical_class': self.grammatical_class,
            'category': self.category,
            'translations': list(self.translations or []),
            'confidence': self.confidence,
            'is_saved': self.is_saved,
            'vault_id': self.vault_id,
        }
