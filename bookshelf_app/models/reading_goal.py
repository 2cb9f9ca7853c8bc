"""Yearly reading goal model."""

from __future__ import annotations

from sqlalchemy.sql import func

from ..core.extensions import db


class ReadingGoal(db.Model):
    """
    How many books (or pages) a user wants to read in a given year.
    """
    __tablename__ = 'reading_goals'

    goal_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False)

    goal_type = db.Column(db.String(20), nullable=False, default='books')  # books, pages
    target = db.Column(db.Integer, nullable=False)
    year = db.Column(db.Integer, nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        db.UniqueConstraint('user_id', 'year', name='_user_goal_year_uc'),
    )

    def __repr__(self):
        return f'<ReadingGoal {self.user_id}/{self.year}: {self.target} {self.goal_type}>'
