"""
Journal Errors

Every error is request-local: it maps to exactly one status code and an
``{"error": message}`` body.
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException


class JournalError(HTTPException):
    """Base class for errors surfaced to API callers."""
    code = 500
    description = 'Internal server error'

    def __init__(self, description=None):
        super().__init__(description=description or self.description)

    def get_response(self, environ=None, scope=None):
        response = jsonify({'error': self.description})
        response.status_code = self.code
        return response


class Unauthorized(JournalError):
    """No session token was sent."""
    code = 401
    description = 'Unauthorized'


class InvalidSession(JournalError):
    """A token was sent but matches no accepted session."""
    code = 401
    description = 'Invalid session'


class WrongPassword(JournalError):
    code = 401
    description = 'Incorrect password'


class ValidationError(JournalError):
    """Malformed input, rejected before any store mutation."""
    code = 400
    description = 'Invalid request'


class NotFound(JournalError):
    code = 404
    description = 'Not found'


def register_error_handlers(app):
    """Render journal and framework errors as JSON.
    
    Args:
        app: Flask application instance
    """
    from coffeebeans.extensions import db

    @app.errorhandler(JournalError)
    def handle_journal_error(error):
        return error.get_response()

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        response = jsonify({'error': error.description or error.name})
        response.status_code = error.code
        return response

    @app.errorhandler(404)
    def handle_not_found(error):
        return NotFound().get_response()

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        app.logger.exception('Unhandled error while serving request')
        return JournalError().get_response()
