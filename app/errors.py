from flask import jsonify
from werkzeug.exceptions import HTTPException
import logging

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    """Base for errors that map onto an HTTP status and a client message."""

    status_code = 500
    message = GENERIC_ERROR_MESSAGE

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(ApiError):
    status_code = 400
    message = "Invalid request"


class Conflict(ApiError):
    status_code = 409
    message = "Conflict"


class Unauthorized(ApiError):
    status_code = 401
    message = "Invalid credentials"


class InternalError(ApiError):
    status_code = 500
    message = GENERIC_ERROR_MESSAGE


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.error(f"Unhandled error: {str(error)}", exc_info=True)
        return jsonify({"error": GENERIC_ERROR_MESSAGE}), 500
