"""
Book Service
Adds, moves and removes books on a user's shelves and announces finished books.
"""

import logging
from datetime import date
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from bookshelf_app.core.error_handlers import NotFoundError, ValidationError
from bookshelf_app.core.extensions import db
from bookshelf_app.core.signals import book_finished
from bookshelf_app.models import Book, PredefinedShelf
from ..schemas import BookPayload
from .shelf_service import PredefinedShelfService

logger = logging.getLogger(__name__)


class BookService:

    @staticmethod
    def get_book(user_id: int, book_id: int) -> Book:
        book = (
            Book.query.join(PredefinedShelf, Book.shelf_id == PredefinedShelf.shelf_id)
            .filter(Book.book_id == book_id, PredefinedShelf.user_id == user_id)
            .first()
        )
        if book is None:
            raise NotFoundError(f"Book {book_id} not found", resource='book')
        return book

    @staticmethod
    def add_book(user_id: int, shelf_name: str = PredefinedShelf.TO_READ, **fields) -> Book:
        try:
            payload = BookPayload(shelf_name=shelf_name, **fields)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc, 'Invalid book data') from exc

        shelf = PredefinedShelfService.get_shelf(user_id, payload.shelf_name)
        book = Book(shelf_id=shelf.shelf_id, **payload.model_dump(exclude={'shelf_name'}))
        db.session.add(book)
        db.session.commit()
        logger.info("User %s added book %s to shelf %s", user_id, book.book_id, shelf.shelf_name)

        if shelf.shelf_name == PredefinedShelf.READ and book.date_finished_reading:
            BookService._announce_finished(user_id, book)
        return book

    @staticmethod
    def move_book(
        user_id: int,
        book_id: int,
        shelf_name: str,
        date_finished: Optional[date] = None,
    ) -> Book:
        """
        Move a book to another shelf. ``book_finished`` is emitted only when
        the book newly counts as read for its finish year, so re-filing a book
        that was already read that year stays silent.
        """
        book = BookService.get_book(user_id, book_id)
        target = PredefinedShelfService.get_shelf(user_id, shelf_name)
        if date_finished and book.date_started_reading and date_finished < book.date_started_reading:
            raise ValidationError(
                'Invalid book data',
                errors={'date_finished_reading': 'must not be before date_started_reading'},
            )
        previous = book.shelf.shelf_name
        previous_finished = book.date_finished_reading
        already_counted = previous == PredefinedShelf.READ and previous_finished is not None

        book.shelf = target
        if date_finished is not None:
            book.date_finished_reading = date_finished
        db.session.commit()
        logger.info("User %s moved book %s from %s to %s", user_id, book_id, previous, target.shelf_name)

        finished = book.date_finished_reading
        if target.shelf_name == PredefinedShelf.READ and finished:
            if already_counted and previous_finished.year == finished.year:
                logger.debug("Book %s already counted for %s", book_id, finished.year)
            else:
                BookService._announce_finished(user_id, book)
        return book

    @staticmethod
    def delete_book(user_id: int, book_id: int) -> None:
        book = BookService.get_book(user_id, book_id)
        db.session.delete(book)
        db.session.commit()
        logger.info("User %s deleted book %s", user_id, book_id)

    @staticmethod
    def _announce_finished(user_id: int, book: Book) -> None:
        book_finished.send(
            'book_service',
            user_id=user_id,
            book_id=book.book_id,
            date_finished=book.date_finished_reading,
            number_of_pages=book.number_of_pages,
        )
