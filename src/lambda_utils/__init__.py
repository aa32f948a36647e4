"""
Helpers for API Gateway Lambda handlers.

Response envelopes, centralized error handling, and Lambda-to-Lambda
invocation live here. Handlers stay thin and import what they need:

    from lambda_utils import HttpError, encode_success, error_handler

    @error_handler
    def handler(event, context):
        return encode_success({"ok": True})
"""

from lambda_utils.envelope import (
    HandledError,
    Success,
    UnhandledException,
    decode,
    encode_error,
    encode_success,
    response_builder,
)
from lambda_utils.errors import HttpError, InvalidFunctionNameError
from lambda_utils.handler import error_handler, route, unrecognized_operation_handler
from lambda_utils.http import HTTP_HEADERS, ApiResponse, HttpMethod, HttpStatusCode
from lambda_utils.invoke import LambdaInvoker, lambda_invoke, lambda_invoke_async
from lambda_utils.log import configure_logging, logger
from lambda_utils.models import InvokeEvent
from lambda_utils.naming import LambdaName, parse_lambda_name

__all__ = [
    "HTTP_HEADERS",
    "ApiResponse",
    "HandledError",
    "HttpError",
    "HttpMethod",
    "HttpStatusCode",
    "InvalidFunctionNameError",
    "InvokeEvent",
    "LambdaInvoker",
    "LambdaName",
    "Success",
    "UnhandledException",
    "configure_logging",
    "decode",
    "encode_error",
    "encode_success",
    "error_handler",
    "lambda_invoke",
    "lambda_invoke_async",
    "logger",
    "parse_lambda_name",
    "response_builder",
    "route",
    "unrecognized_operation_handler",
]
