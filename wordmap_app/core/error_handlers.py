"""
JSON error taxonomy for the Word Map API.

Services raise a WordMapError subclass; the handlers registered here render it
as ``{"success": false, "message", "code", "details"}`` with the error's HTTP
status. Werkzeug 404/405/500 errors get the same shape under ``/api/``.
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request

API_PREFIX = '/api/'


class WordMapError(Exception):
    """Base exception class for Word Map."""

    default_message = 'Unexpected error'
    default_code = 'UNKNOWN_ERROR'
    default_status = 500

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.status_code = status_code or self.default_status
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details,
        }


class NotFoundError(WordMapError):
    default_message = 'Resource not found'
    default_code = 'NOT_FOUND'
    default_status = 404

    def __init__(self, message: Optional[str] = None, resource: Optional[str] = None):
        super().__init__(message, details={'resource': resource} if resource else None)


class ValidationError(WordMapError):
    """Input validation failed; `errors` maps field names to reasons."""

    default_message = 'Validation failed'
    default_code = 'VALIDATION_ERROR'
    default_status = 400

    def __init__(self, message: Optional[str] = None, errors: Optional[Dict] = None):
        super().__init__(message, details={'errors': errors} if errors else None)


class AuthenticationError(WordMapError):
    default_message = 'Authentication required'
    default_code = 'UNAUTHENTICATED'
    default_status = 401

    def __init__(self, message: Optional[str] = None):
        super().__init__(message)


class AuthorizationError(WordMapError):
    """The resource exists but belongs to another user."""

    default_message = 'Access denied'
    default_code = 'UNAUTHORIZED'
    default_status = 403

    def __init__(self, message: Optional[str] = None):
        super().__init__(message)


class ConflictError(WordMapError):
    default_message = 'Conflict'
    default_code = 'CONFLICT'
    default_status = 409

    def __init__(self, message: Optional[str] = None, resource: Optional[str] = None):
        super().__init__(message, details={'resource': resource} if resource else None)


def error_response(message: str, code: str = 'ERROR', status_code: int = 400, details: Dict = None) -> tuple:
    body = {'success': False, 'message': message, 'code': code}
    if details:
        body['details'] = details
    return jsonify(body), status_code


def success_response(data: Any = None, message: str = None) -> dict:
    body = {'success': True}
    if data is not None:
        body['data'] = data
    if message:
        body['message'] = message
    return body


def register_error_handlers(app):
    """Install the WordMapError handler and JSON fallbacks for API paths."""

    @app.errorhandler(WordMapError)
    def handle_wordmap_error(error):
        log = current_app.logger.error if error.status_code >= 500 else current_app.logger.info
        log("%s: %s", error.code, error.message)
        return jsonify(error.to_dict()), error.status_code

    def api_json(status_code, code, message):
        def handler(error):
            if status_code >= 500:
                current_app.logger.exception('Internal server error')
            if not request.path.startswith(API_PREFIX):
                return error
            return error_response(message, code, status_code)

        app.register_error_handler(status_code, handler)

    api_json(404, 'NOT_FOUND', 'Endpoint not found')
    api_json(405, 'METHOD_NOT_ALLOWED', 'Method not allowed')
    api_json(500, 'SERVER_ERROR', 'Internal server error')
