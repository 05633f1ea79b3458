"""Application exception classes and handlers."""

import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger()


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str, status_code: int = 400) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


# --- Bad Request (400) ---


class InvalidMessageError(AppException):
    """Chat message is empty or too long after trimming."""

    def __init__(self, message: str = "Message cannot be empty") -> None:
        super().__init__(message=message, code="INVALID_ARGUMENT", status_code=400)


# --- Authentication (401) ---


class AuthenticationError(AppException):
    """Base authentication error."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message=message, code="AUTHENTICATION_ERROR", status_code=401)


# --- Not Found (404) ---


class UserNotFoundError(AppException):
    """The caller's identity has never been synchronized into the users table."""

    def __init__(self) -> None:
        super().__init__(
            message="User account not found in database. Please log in again.",
            code="USER_NOT_FOUND",
            status_code=404,
        )


class JournalEntryNotFoundError(AppException):
    """Journal entry missing or owned by someone else."""

    def __init__(self) -> None:
        super().__init__(
            message="Journal entry not found",
            code="JOURNAL_ENTRY_NOT_FOUND",
            status_code=404,
        )


# --- Conflict (409) ---


class ChatSendInProgressError(AppException):
    """Another send for the same user has not finished yet."""

    def __init__(self) -> None:
        super().__init__(
            message="A message is already being sent. Please wait for the reply.",
            code="CHAT_SEND_IN_PROGRESS",
            status_code=409,
        )


# --- Service Unavailable (503) ---


class AIServiceUnavailableError(AppException):
    """The language model call failed or timed out."""

    def __init__(self) -> None:
        super().__init__(
            message="AI service is temporarily unavailable. Please try again.",
            code="AI_SERVICE_UNAVAILABLE",
            status_code=503,
        )


# --- Exception Handlers ---


def _error_body(status: int, message: str, code: str) -> dict:
    return {"status": status, "message": message, "code": code}


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Central exception handler for AppException."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, exc.message, exc.code),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Flatten request validation errors into the common error shape."""
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(
        status_code=422,
        content=_error_body(422, message, "VALIDATION_ERROR"),
    )


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Report storage failures as a retryable 503."""
    logger.exception("Database error", path=request.url.path)
    return JSONResponse(
        status_code=503,
        content=_error_body(
            503,
            "Storage is temporarily unavailable. Please try again.",
            "STORAGE_UNAVAILABLE",
        ),
    )
