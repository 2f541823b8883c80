import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class SiteCMSError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message=None, **extra):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.extra = extra


class NotFound(SiteCMSError):
    status_code = 404
    default_message = "Not found"


class ValidationFailure(SiteCMSError):
    status_code = 400
    default_message = "Invalid data"


class AuthorizationDenied(SiteCMSError):
    status_code = 403
    default_message = "Access denied"


class ExternalServiceFailure(SiteCMSError):
    status_code = 502
    default_message = "External service failed"


def failure(message, status_code, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    response = jsonify(body)
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(SiteCMSError)
    def handle_site_error(error):
        return failure(
            error.message,
            error.status_code,
            error=type(error).__name__,
            **error.extra,
        )

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return failure(error.description, error.code or 500, error=error.name)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.exception("Unhandled error: %s", error)
        return failure("Something went wrong", 500, error="InternalError")
