import logging

from flask import Flask, jsonify
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from src.routes.auth import AuthenticationFailed
from src.scheduling.errors import AlreadyCancelled, NotFound, SchedulingError


logger = logging.getLogger("routes.errors")


def _error(code: str, message: str, status: int, **extra):
    body = {"error": code, "message": message}
    body.update(extra)
    return jsonify(body), status


def register_error_handlers(app: Flask):
    """Translate domain and validation failures into JSON error responses."""

    @app.errorhandler(SchedulingError)
    def handle_scheduling_error(e: SchedulingError):
        status = 409 if isinstance(e, AlreadyCancelled) else 400
        return _error(e.code, e.message, status)

    @app.errorhandler(NotFound)
    def handle_not_found(e: NotFound):
        return _error("NOT_FOUND", str(e), 404)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        fields = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        return _error("INVALID_PAYLOAD", "Request payload is invalid.", 400, fields=fields)

    @app.errorhandler(AuthenticationFailed)
    def handle_auth_failed(e: AuthenticationFailed):
        return _error("UNAUTHORIZED", e.message, 401)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(e: IntegrityError):
        logger.warning(f"[integrity] {e.orig}")
        return _error("CONFLICT", "Record conflicts with existing data.", 409)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        return _error(e.name.upper().replace(" ", "_"), e.description, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception(f"[unhandled] {e}")
        return _error("INTERNAL_ERROR", "Internal error", 500)
