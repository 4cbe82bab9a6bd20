"""User account model."""

from __future__ import annotations

from flask_login import UserMixin
from sqlalchemy.sql import func
from werkzeug.security import check_password_hash, generate_password_hash

from ..db_instance import db


class User(UserMixin, db.Model):
    """Application user model."""

    __tablename__ = 'users'

    user_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)

    # Password reset flow: 6-digit code and its expiry
    reset_code = db.Column(db.String(6), nullable=True)
    reset_code_expires = db.Column(db.DateTime(timezone=True), nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    vaults = db.relationship(
        'Vault', backref='owner', lazy=True, cascade='all, delete-orphan',
        order_by='Vault.vault_id.desc()',
    )
    texts = db.relationship('Text', backref='owner', lazy=True, cascade='all, delete-orphan')
    sentences = db.relationship('Sentence', backref='owner', lazy=True, cascade='all, delete-orphan')
    settings = db.relationship('UserSettings', backref='user', uselist=False, cascade='all, delete-orphan')

    def get_id(self):
        return str(self.user_id)

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def to_dict(self) -> dict[str, object]:
        return {
            'id': self.user_id,
            'name': self.name,
            'email': self.email,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


class UserSettings(db.Model):
    """Per-user preferences; a user without a row gets the column defaults."""

    __tablename__ = 'user_settings'

    settings_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), unique=True, nullable=False
    )
    # False: words can only be linked inside their own vault
    use_all_vaults_for_links = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def to_dict(self) -> dict[str, object]:
        return {
            'user_id': self.user_id,
            'use_all_vaults_for_links': bool(self.use_all_vaults_for_links),
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
