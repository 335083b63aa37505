import functools
import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.config import settings

logger = logging.getLogger(__name__)


class StatusCategory(str, Enum):
    CLIENT_INPUT = "client-input"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not-found"
    CONFLICT = "conflict"
    SERVER = "server"


HTTP_STATUS = {
    StatusCategory.CLIENT_INPUT: status.HTTP_400_BAD_REQUEST,
    StatusCategory.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    StatusCategory.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StatusCategory.CONFLICT: status.HTTP_409_CONFLICT,
    StatusCategory.SERVER: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    """Base for every failure the service reports to callers."""

    category = StatusCategory.SERVER
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return HTTP_STATUS[self.category]


class ClientInputError(AppError):
    category = StatusCategory.CLIENT_INPUT
    default_message = "Validation failed"

    def __init__(self, message: str | None = None, details: list[dict] | None = None):
        super().__init__(message)
        self.details = details or []


class Unauthenticated(AppError):
    category = StatusCategory.UNAUTHENTICATED
    default_message = "Not authenticated"


class NotFound(AppError):
    category = StatusCategory.NOT_FOUND
    default_message = "Not found"


class UserNotFound(NotFound):
    default_message = "User not found"


class ProjectNotFound(NotFound):
    default_message = "Project not found"


class BoardNotFound(NotFound):
    default_message = "Board not found"


class ListNotFound(NotFound):
    default_message = "List not found"


class TaskNotFound(NotFound):
    default_message = "Task not found"


class TargetListNotFound(NotFound):
    default_message = "Target list not found"


class Conflict(AppError):
    category = StatusCategory.CONFLICT
    default_message = "Conflict"


class ServerFailure(AppError):
    category = StatusCategory.SERVER
    default_message = "Operation failed"

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


def guarded(message: str):
    """Wrap an engine operation so untagged failures become ServerFailure(message)."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except AppError:
                raise
            except Exception as exc:
                logger.exception("%s in %s", message, func.__qualname__)
                raise ServerFailure(message, cause=exc) from exc

        return wrapper

    return decorator


def report(exc: BaseException) -> tuple[str, StatusCategory]:
    """Normalize any exception to the message and category shown to callers."""
    if isinstance(exc, AppError):
        return exc.message, exc.category
    return ServerFailure.default_message, StatusCategory.SERVER


def _body(exc: BaseException) -> dict:
    message, category = report(exc)
    body = {"detail": message}
    if isinstance(exc, ClientInputError):
        body["details"] = exc.details
    if category is StatusCategory.SERVER and settings.is_development:
        cause = exc.cause if isinstance(exc, ServerFailure) else exc
        if cause is not None:
            body["error"] = str(cause)
    return body


def _validation_details(exc: RequestValidationError) -> list[dict]:
    details = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err.get("loc", ()))
        details.append({"path": path, "message": err.get("msg", "")})
    return details


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=_body(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        err = ClientInputError(details=_validation_details(exc))
        return JSONResponse(status_code=err.status_code, content=_body(err))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=HTTP_STATUS[StatusCategory.SERVER], content=_body(exc))
