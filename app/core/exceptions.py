import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, RedirectResponse

logger = logging.getLogger(__name__)


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(AppException):
    """Missing or malformed form input."""

    def __init__(self, message: str = "All fields are required."):
        super().__init__(message, status_code=400)


class DuplicateEmail(AppException):
    def __init__(self, message: str = "This email is already registered."):
        super().__init__(message, status_code=409)


class InvalidCredentials(AppException):
    def __init__(self, message: str = "Invalid email or password."):
        super().__init__(message, status_code=401)


class NotFound(AppException):
    def __init__(self, message: str = "Not found"):
        super().__init__(message, status_code=404)


class LoginRequired(Exception):
    """Raised by route guards; answered with a redirect to the login page."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(location)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(LoginRequired)
    async def _login_required_handler(_: Request, exc: LoginRequired):
        return RedirectResponse(exc.location, status_code=303)

    @app.exception_handler(AppException)
    async def _app_exception_handler(_: Request, exc: AppException):
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return PlainTextResponse("Internal server error", status_code=500)
