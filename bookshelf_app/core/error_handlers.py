"""
Application errors and the JSON envelope used by every ``/api/`` endpoint.

Services raise ``BookshelfError`` subclasses; the handlers registered here
turn them into ``{"success": false, "message", "code", "details"}`` bodies
with the matching status code.
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request
from pydantic import ValidationError as PydanticValidationError


class BookshelfError(Exception):
    """Base class for errors that carry an HTTP status and a machine readable code."""

    status_code = 500
    code = 'SERVER_ERROR'

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        body = {'success': False, 'message': self.message, 'code': self.code}
        if self.details:
            body['details'] = self.details
        return body


class NotFoundError(BookshelfError):
    status_code = 404
    code = 'NOT_FOUND'

    def __init__(self, message: str = 'Resource not found', resource: Optional[str] = None):
        super().__init__(message, {'resource': resource} if resource else None)


class ValidationError(BookshelfError):
    """Rejected input. ``errors`` maps field names to messages."""

    status_code = 400
    code = 'VALIDATION_ERROR'

    def __init__(self, message: str = 'Validation failed', errors: Optional[Dict[str, str]] = None):
        super().__init__(message, {'errors': errors} if errors else None)

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError, message: str = 'Validation failed'):
        errors = {
            '.'.join(str(part) for part in err['loc']) or 'payload': err['msg']
            for err in exc.errors()
        }
        return cls(message, errors=errors)


def error_response(message: str, code: str, status_code: int):
    return jsonify({'success': False, 'message': message, 'code': code}), status_code


def success_response(data: Any = None, message: Optional[str] = None) -> dict:
    response = {'success': True}
    if data is not None:
        response['data'] = data
    if message:
        response['message'] = message
    return response


def _wants_json() -> bool:
    return '/api/' in request.path


def register_error_handlers(app):

    @app.errorhandler(BookshelfError)
    def handle_bookshelf_error(error):
        current_app.logger.warning("%s %s: %s", request.path, error.code, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if _wants_json():
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception("Unhandled error on %s", request.path)
        if _wants_json():
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
