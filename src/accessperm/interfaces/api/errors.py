"""Map domain exceptions to HTTP responses."""

import falcon
import falcon.asgi

from accessperm.domain.exceptions import (
    DuplicateEntity,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from accessperm.logging import get_logger

logger = get_logger(__name__)


async def _handle_validation_error(req, resp, ex: ValidationError, params) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(ex), "argument": ex.argument}


async def _handle_permission_denied(req, resp, ex: PermissionDenied, params) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {"error": "Permission denied"}


async def _handle_not_found(req, resp, ex: NotFound, params) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": str(ex)}


async def _handle_duplicate(req, resp, ex: DuplicateEntity, params) -> None:
    resp.status = falcon.HTTP_409
    resp.media = {"error": str(ex)}


async def _handle_unexpected(req, resp, ex: Exception, params) -> None:
    logger.error("request.failed", method=req.method, path=req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Register domain exception handlers on app."""
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_error_handler(ValidationError, _handle_validation_error)
    app.add_error_handler(PermissionDenied, _handle_permission_denied)
    app.add_error_handler(NotFound, _handle_not_found)
    app.add_error_handler(DuplicateEntity, _handle_duplicate)
