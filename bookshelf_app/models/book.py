"""Shelf and book models."""

from __future__ import annotations

from sqlalchemy.sql import func

from ..core.extensions import db


class PredefinedShelf(db.Model):
    """
    One of the four fixed shelves every user owns.
    A book lives on exactly one shelf, the shelf encodes its reading state.
    """
    __tablename__ = 'predefined_shelves'

    TO_READ = 'to_read'
    READING = 'reading'
    READ = 'read'
    DID_NOT_FINISH = 'did_not_finish'
    SHELF_NAMES = (TO_READ, READING, READ, DID_NOT_FINISH)
    SHELF_LABELS = {
        TO_READ: 'To read',
        READING: 'Reading',
        READ: 'Read',
        DID_NOT_FINISH: 'Did not finish',
    }

    shelf_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False)
    shelf_name = db.Column(db.String(30), nullable=False)

    books = db.relationship('Book', backref='shelf', lazy=True, cascade='all, delete-orphan')

    __table_args__ = (
        db.UniqueConstraint('user_id', 'shelf_name', name='_user_shelf_name_uc'),
    )

    @property
    def label(self) -> str:
        return self.SHELF_LABELS.get(self.shelf_name, self.shelf_name)

    def to_dict(self, include_books: bool = False) -> dict:
        data = {
            'shelf_id': self.shelf_id,
            'shelf_name': self.shelf_name,
            'label': self.label,
            'book_count': len(self.books),
        }
        if include_books:
            data['books'] = [book.to_dict() for book in self.books]
        return data

    def __repr__(self):
        return f'<PredefinedShelf {self.user_id}:{self.shelf_name}>'


class Book(db.Model):
    """A book on one of the user's shelves."""
    __tablename__ = 'books'

    book_id = db.Column(db.Integer, primary_key=True)
    shelf_id = db.Column(db.Integer, db.ForeignKey('predefined_shelves.shelf_id'), nullable=False)

    title = db.Column(db.String(255), nullable=False)
    author_name = db.Column(db.String(255))
    number_of_pages = db.Column(db.Integer, nullable=True)
    pages_read = db.Column(db.Integer, nullable=True)
    rating = db.Column(db.Integer, nullable=True)  # 0-10

    date_started_reading = db.Column(db.Date, nullable=True)
    date_finished_reading = db.Column(db.Date, nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        db.Index('ix_books_date_finished', 'date_finished_reading'),
    )

    def to_dict(self) -> dict:
        return {
            'book_id': self.book_id,
            'shelf_id': self.shelf_id,
            'title': self.title,
            'author_name': self.author_name,
            'number_of_pages': self.number_of_pages,
            'pages_read': self.pages_read,
            'rating': self.rating,
            'date_started_reading': self.date_started_reading.isoformat() if self.date_started_reading else None,
            'date_finished_reading': self.date_finished_reading.isoformat() if self.date_finished_reading else None,
        }

    def __repr__(self):
        return f'<Book {self.book_id} - {self.title}>'
