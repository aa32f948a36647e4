"""
Error handling wrapper for API Gateway Lambda handlers.

Every handler decorated with `error_handler` tags the observability scope with
the caller and the Lambda context, and turns exceptions into response
envelopes:

- `HttpError` is rendered with its own status code and payload.
- An exception whose message is exactly ``"Unauthorized"`` is re-raised. API
  Gateway custom authorizers can only deny a request by failing with that bare
  string, so it must not be wrapped.
- Any other exception is logged, reported, and rendered as a generic 500.
"""

import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any

from lambda_utils.config import get_config
from lambda_utils.envelope import encode_error
from lambda_utils.errors import HttpError
from lambda_utils.http import ApiResponse
from lambda_utils.observability import ObservabilitySink, configure_scope, get_sink, report_exception

logger = logging.getLogger(__name__)

UNAUTHORIZED = "Unauthorized"

Handler = Callable[[dict[str, Any], Any], ApiResponse]

_CONTEXT_EXTRAS = {
    "awsRequestId": "aws_request_id",
    "logGroupName": "log_group_name",
    "logStreamName": "log_stream_name",
    "invokedFunctionArn": "invoked_function_arn",
    "memoryLimitInMB": "memory_limit_in_mb",
    "clientContext": "client_context",
}


def _authorizer(event: Any) -> dict[str, Any] | None:
    if not isinstance(event, dict):
        return None
    request_context = event.get("requestContext") or {}
    return request_context.get("authorizer") or None


def _context_extras(context: Any) -> dict[str, Any]:
    extras = {key: getattr(context, attr, None) for key, attr in _CONTEXT_EXTRAS.items()}

    remaining = getattr(context, "get_remaining_time_in_millis", None)
    extras["remainingTimeInMillis"] = remaining() if callable(remaining) else None
    return extras


def _scope_mutator(event: Any, context: Any) -> Callable[[Any], None]:
    def mutate(scope: Any) -> None:
        authorizer = _authorizer(event)
        if authorizer is None:
            scope.set_user(None)
        elif authorizer.get("userId"):
            scope.set_user(
                {
                    "accountId": authorizer.get("principalId"),
                    "id": authorizer["userId"],
                    "role": authorizer.get("userRole"),
                }
            )
        else:
            scope.set_user({"accountId": authorizer.get("principalId")})

        scope.set_tag("lambda", getattr(context, "function_name", None))
        for key, value in _context_extras(context).items():
            scope.set_extra(key, value)

    return mutate


def error_handler(
    fn: Handler | None = None,
    *,
    sink: ObservabilitySink | None = None,
) -> Any:
    """Decorate ``handler(event, context)`` with scope tagging and error conversion.

    Usable bare (``@error_handler``) or with a sink (``@error_handler(sink=fake)``).
    The sink defaults to the process-wide Sentry sink, resolved on first call.
    """

    def decorator(lambda_handler: Handler) -> Handler:
        @functools.wraps(lambda_handler)
        def wrapper(event: dict[str, Any], context: Any) -> ApiResponse:
            active_sink = sink or get_sink()
            configure_scope(active_sink, _scope_mutator(event, context))

            try:
                return lambda_handler(event, context)
            except HttpError as error:
                return encode_error(error)
            except Exception as error:
                if str(error) == UNAUTHORIZED:
                    raise

                logger.exception("Unhandled error in %s", getattr(context, "function_name", lambda_handler.__name__))
                report_exception(active_sink, error, get_config().sentry_flush_timeout)
                return encode_error(HttpError.bad_implementation(str(error)))
            except (KeyboardInterrupt, SystemExit):
                raise
            except BaseException as error:
                logger.error("Non-exception raised in %s: %r", lambda_handler.__name__, error)
                return encode_error(HttpError.bad_implementation())

        return wrapper

    if fn is not None:
        return decorator(fn)
    return decorator


def unrecognized_operation_handler(event: dict[str, Any], context: Any = None) -> ApiResponse:
    raise HttpError.bad_request(f"Unrecognized action command {event.get('resource')}")


def _method_key(method: Any) -> str:
    return str(getattr(method, "value", method)).upper()


def route(routes: Mapping[tuple[str, Any], Handler]) -> Handler:
    """Build a handler dispatching on ``(resource, httpMethod)``.

    Unknown routes fall through to `unrecognized_operation_handler`, so wrap the
    result with `error_handler` to answer them with a 400.
    """
    table = {(resource, _method_key(method)): handler for (resource, method), handler in routes.items()}

    def dispatch(event: dict[str, Any], context: Any) -> ApiResponse:
        handler = table.get((event.get("resource"), _method_key(event.get("httpMethod", ""))))
        if handler is None:
            return unrecognized_operation_handler(event, context)
        return handler(event, context)

    return dispatch
