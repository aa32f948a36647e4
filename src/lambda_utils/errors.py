"""
HTTP-aware exceptions for Lambda handlers.

`HttpError` carries everything needed to render an error response: the status
code, a short label (the HTTP reason phrase), a client-facing message and
optional data. Server errors (5xx) never expose their message to the client;
it stays on the exception for logging.

Usage:
    from lambda_utils.errors import HttpError

    raise HttpError.bad_request("Missing booking id")
"""

from http import HTTPStatus
from typing import Any

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"
INVALID_FUNCTION_NAME_MESSAGE = "Please provide a valid function name"


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown"


class HttpError(Exception):
    """Error with an HTTP status code and a renderable payload."""

    def __init__(
        self,
        status_code: int = 500,
        message: str | None = None,
        error: str | None = None,
        data: Any = None,
    ):
        self.status_code = status_code
        self.error = error or _reason_phrase(status_code)
        self.message = message or self.error
        self.data = data
        super().__init__(self.message)

    @property
    def is_server(self) -> bool:
        return self.status_code >= 500

    @property
    def payload(self) -> dict[str, Any]:
        """Handled error payload as returned to clients."""
        payload: dict[str, Any] = {
            "statusCode": self.status_code,
            "error": self.error,
            "message": INTERNAL_ERROR_MESSAGE if self.is_server else self.message,
        }
        if self.data is not None:
            payload["data"] = self.data
        return payload

    @classmethod
    def bad_request(cls, message: str | None = None, data: Any = None) -> "HttpError":
        return cls(400, message, data=data)

    @classmethod
    def unauthorized(cls, message: str | None = None, data: Any = None) -> "HttpError":
        return cls(401, message, data=data)

    @classmethod
    def forbidden(cls, message: str | None = None, data: Any = None) -> "HttpError":
        return cls(403, message, data=data)

    @classmethod
    def not_found(cls, message: str | None = None, data: Any = None) -> "HttpError":
        return cls(404, message, data=data)

    @classmethod
    def bad_implementation(cls, message: str | None = None, data: Any = None) -> "HttpError":
        return cls(500, message, data=data)


class InvalidFunctionNameError(HttpError):
    """Target function name could not be parsed; raised before any invocation."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(500, INVALID_FUNCTION_NAME_MESSAGE)
