from flask import jsonify, request
from flask_login import current_user, login_required
from pydantic import ValidationError as PydanticValidationError

from bookshelf_app.core.error_handlers import ValidationError, success_response
from bookshelf_app.core.extensions import csrf_protect
from .. import shelves_bp
from ..schemas import MoveBookPayload
from ..services import BookService, PredefinedShelfService


@shelves_bp.route('/api/shelves', methods=['GET'])
@login_required
def list_shelves():
    """All of the current user's shelves with their books."""
    include_books = request.args.get('books', '1') != '0'
    shelves = PredefinedShelfService.get_shelves(current_user.user_id)
    return jsonify(success_response([shelf.to_dict(include_books=include_books) for shelf in shelves]))


@shelves_bp.route('/api/books', methods=['POST'])
@login_required
@csrf_protect.exempt
def add_book():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ValidationError('Expected a JSON object')
    data.pop('user_id', None)
    book = BookService.add_book(current_user.user_id, **data)
    return jsonify(success_response(book.to_dict(), message='Book added')), 201


@shelves_bp.route('/api/books/<int:book_id>/move', methods=['POST'])
@login_required
@csrf_protect.exempt
def move_book(book_id: int):
    try:
        payload = MoveBookPayload.model_validate(request.get_json(silent=True) or {})
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc, 'Invalid move request') from exc

    book = BookService.move_book(
        current_user.user_id,
        book_id,
        payload.shelf_name,
        date_finished=payload.date_finished_reading,
    )
    return jsonify(success_response(book.to_dict(), message='Book moved'))


@shelves_bp.route('/api/books/<int:book_id>', methods=['DELETE'])
@login_required
@csrf_protect.exempt
def delete_book(book_id: int):
    BookService.delete_book(current_user.user_id, book_id)
    return jsonify(success_response(message='Book deleted'))
