"""
Response envelope encoding and decoding.

A handler's result travels as an API Gateway proxy response whose ``body`` is
itself a JSON string. When one Lambda invokes another, the raw result can be
one of three things:

1. success - a response envelope whose body holds the handler's value.
2. handled error - a response envelope whose body holds an error payload
   ``{"error": ..., "statusCode": ..., "message": ..., "data": ...}`` produced
   by the callee's error handler.
3. unhandled exception - no envelope at all, just the Lambda runtime's error
   object ``{"errorMessage": ..., "errorType": ..., "stackTrace": [...]}``.

`decode` tells these apart. Parsing is tolerant: malformed JSON at either
level is treated as an empty success rather than an error, so a garbled
response can surface as ``Success(value=None)``.
"""

import json
from collections.abc import Callable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from lambda_utils.errors import HttpError
from lambda_utils.http import HTTP_HEADERS, ApiResponse, HttpStatusCode


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    value: Any = None


class HandledError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["handled_error"] = "handled_error"
    error: str
    status_code: int
    message: str | None = None
    data: Any = None

    def to_exception(self) -> HttpError:
        return HttpError(self.status_code, self.message, error=self.error, data=self.data)


class UnhandledException(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["unhandled_exception"] = "unhandled_exception"
    error_message: str
    raw: dict[str, Any] = Field(default_factory=dict)


Outcome = Annotated[Success | HandledError | UnhandledException, Field(discriminator="kind")]


def encode_success(value: Any, status_code: int = HttpStatusCode.OK) -> ApiResponse:
    return {
        "statusCode": int(status_code),
        "headers": dict(HTTP_HEADERS),
        "body": json.dumps(value) if value is not None else "",
    }


def response_builder(fn: Callable[[], Any], status_code: int | None = None) -> ApiResponse:
    """Call ``fn`` and wrap its result in a response envelope."""
    return encode_success(fn(), status_code or HttpStatusCode.OK)


def encode_error(error: BaseException) -> ApiResponse:
    payload = error.payload if isinstance(error, HttpError) else HttpError().payload
    return {
        "statusCode": payload["statusCode"],
        "headers": dict(HTTP_HEADERS),
        "body": json.dumps(payload),
    }


def _loads(raw: str | bytes | bytearray) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return None


def _status_code(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return HttpStatusCode.INTERNAL_SERVER_ERROR


def decode(raw: str | bytes | bytearray | None) -> Outcome:
    """Classify a raw invocation result as success, handled error or unhandled exception."""
    envelope = _loads(raw) if raw else None
    if isinstance(envelope, dict) and envelope.get("body"):
        payload = _loads(envelope["body"])
    else:
        payload = envelope

    if not isinstance(payload, dict):
        return Success(value=payload)

    if payload.get("errorMessage"):
        return UnhandledException(error_message=str(payload["errorMessage"]), raw=payload)

    if payload.get("error") and payload.get("statusCode"):
        message = payload.get("message")
        return HandledError(
            error=str(payload["error"]),
            status_code=_status_code(payload["statusCode"]),
            message=None if message is None else str(message),
            data=payload.get("data"),
        )

    return Success(value=payload)
