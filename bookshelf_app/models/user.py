"""Account that owns shelves and reading goals."""

from __future__ import annotations

from flask_login import UserMixin
from sqlalchemy.sql import func
from werkzeug.security import check_password_hash, generate_password_hash

from ..core.extensions import db


class User(UserMixin, db.Model):
    __tablename__ = 'users'

    user_id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, nullable=True)
    password_hash = db.Column(db.String(256), nullable=False)
    # pytz zone name, decides which calendar day (and week) it is for the user
    timezone = db.Column(db.String(50), nullable=False, default='UTC')
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    shelves = db.relationship(
        'PredefinedShelf', backref='user', lazy=True,
        cascade='all, delete-orphan', order_by='PredefinedShelf.shelf_id',
    )
    reading_goals = db.relationship(
        'ReadingGoal', backref='user', lazy=True,
        cascade='all, delete-orphan', order_by='ReadingGoal.year',
    )

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return bool(self.password_hash) and check_password_hash(self.password_hash, password)

    def get_id(self) -> str:
        # Flask-Login stores this in the session; the primary key is not named ``id``
        return str(self.user_id)

    def __repr__(self):
        return f'<User {self.user_id}:{self.username}>'
