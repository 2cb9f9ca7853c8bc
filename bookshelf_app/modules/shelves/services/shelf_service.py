"""
Predefined Shelf Service
CRUD helpers for the four fixed shelves every user owns.
"""

import logging
from typing import List, Optional

from bookshelf_app.core.error_handlers import NotFoundError, ValidationError
from bookshelf_app.core.extensions import db
from bookshelf_app.models import PredefinedShelf

logger = logging.getLogger(__name__)


class PredefinedShelfService:

    @staticmethod
    def validate_shelf_name(shelf_name: str) -> str:
        if shelf_name not in PredefinedShelf.SHELF_NAMES:
            raise ValidationError(
                f"Unknown shelf '{shelf_name}'",
                errors={'shelf_name': f"must be one of {', '.join(PredefinedShelf.SHELF_NAMES)}"},
            )
        return shelf_name

    @staticmethod
    def save(shelf: Optional[PredefinedShelf]) -> Optional[PredefinedShelf]:
        """Persist ``shelf``. ``None`` is ignored."""
        if shelf is None:
            logger.warning("Refusing to save a null shelf")
            return None
        db.session.add(shelf)
        db.session.commit()
        return shelf

    @staticmethod
    def count() -> int:
        return db.session.query(db.func.count(PredefinedShelf.shelf_id)).scalar() or 0

    @staticmethod
    def create_default_shelves(user_id: int) -> List[PredefinedShelf]:
        """Ensure ``user_id`` owns all predefined shelves. Caller must commit."""
        existing = {
            shelf.shelf_name: shelf
            for shelf in PredefinedShelf.query.filter_by(user_id=user_id).all()
        }
        shelves = []
        for name in PredefinedShelf.SHELF_NAMES:
            shelf = existing.get(name)
            if shelf is None:
                shelf = PredefinedShelf(user_id=user_id, shelf_name=name)
                db.session.add(shelf)
                logger.debug("Created shelf %s for user %s", name, user_id)
            shelves.append(shelf)
        return shelves

    @staticmethod
    def get_shelf(user_id: int, shelf_name: str) -> PredefinedShelf:
        PredefinedShelfService.validate_shelf_name(shelf_name)
        shelf = PredefinedShelf.query.filter_by(user_id=user_id, shelf_name=shelf_name).first()
        if shelf is None:
            raise NotFoundError(f"Shelf '{shelf_name}' not found", resource='shelf')
        return shelf

    @staticmethod
    def get_read_shelf(user_id: int) -> Optional[PredefinedShelf]:
        return PredefinedShelf.query.filter_by(user_id=user_id, shelf_name=PredefinedShelf.READ).first()

    @staticmethod
    def get_shelves(user_id: int) -> List[PredefinedShelf]:
        order = {name: index for index, name in enumerate(PredefinedShelf.SHELF_NAMES)}
        shelves = PredefinedShelf.query.filter_by(user_id=user_id).all()
        return sorted(shelves, key=lambda shelf: order.get(shelf.shelf_name, len(order)))
