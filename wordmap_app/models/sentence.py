"""Sentences assembled from vocabulary words."""

from __future__ import annotations

from sqlalchemy.sql import func

from ..db_instance import db


class Sentence(db.Model):
    __tablename__ = 'sentences'

    sentence_id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=True)
    notes = db.Column(db.Text, nullable=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    words = db.relationship(
        'SentenceWord', backref='sentence', lazy=True, cascade='all, delete-orphan',
        order_by='SentenceWord.position',
    )

    def to_dict(self) -> dict[str, object]:
        return {
            'id': self.sentence_id,
            'title': self.title,
            'notes': self.notes,
            'user_id': self.user_id,
            'words': [entry.to_dict() for entry in self.words],
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


class SentenceWord(db.Model):
    """One slot of a sentence: a word at a position, optionally highlighted."""

    __tablename__ = 'sentence_words'

    sentence_word_id = db.Column(db.Integer, primary_key=True)
    sentence_id = db.Column(
        db.Integer, db.ForeignKey('sentences.sentence_id', ondelete='CASCADE'), nullable=False, index=True
    )
    word_id = db.Column(
        db.Integer, db.ForeignKey('words.word_id', ondelete='CASCADE'), nullable=False, index=True
    )
    position = db.Column(db.Integer, nullable=False)
    highlight_color = db.Column(db.String(30), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    word = db.relationship(
        'Word',
        backref=db.backref('sentence_entries', cascade='all', passive_deletes=True),
    )

    def to_dict(self) -> dict[str, object]:
        return {
            'id': self.sentence_word_id,
            'word_id': self.word_id,
            'position': self.position,
            'highlight_color': self.highlight_color,
            'word': self.word.to_dict() if self.word else None,
        }
