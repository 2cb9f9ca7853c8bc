from .book_service import BookService
from .shelf_service import PredefinedShelfService

__all__ = ['BookService', 'PredefinedShelfService']
