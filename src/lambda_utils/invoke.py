"""
Invoke one Lambda function from another.

`LambdaInvoker.invoke` waits for the callee and turns its result back into
either a value or an `HttpError`; `LambdaInvoker.invoke_async` only submits the
event and returns the acknowledgement.
"""

import json
import logging
from functools import lru_cache
from typing import Any, TypeVar, cast

from pydantic import BaseModel

from lambda_utils.clients import get_lambda_client
from lambda_utils.config import get_config
from lambda_utils.envelope import HandledError, UnhandledException, decode
from lambda_utils.errors import HttpError, InvalidFunctionNameError
from lambda_utils.naming import LambdaName, parse_lambda_name
from lambda_utils.observability import ObservabilitySink, get_sink, report_exception

logger = logging.getLogger(__name__)

T = TypeVar("T")

Payload = dict[str, Any] | BaseModel


def _serialize(payload: Payload) -> str:
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(by_alias=True, exclude_none=True)
    return json.dumps(payload)


def _read_payload(response: dict[str, Any]) -> bytes | str:
    body = response.get("Payload")
    if body is None:
        return b""
    if hasattr(body, "read"):
        return body.read()
    return body


class LambdaInvoker:
    def __init__(self, client: Any, sink: ObservabilitySink, flush_timeout: float = 2.0):
        self.client = client
        self.sink = sink
        self.flush_timeout = flush_timeout

    def _build_params(self, name: str, invocation_type: str, payload: Payload) -> tuple[LambdaName, dict[str, Any]]:
        parsed = parse_lambda_name(name)
        if parsed is None:
            raise InvalidFunctionNameError(name)

        params: dict[str, Any] = {
            "FunctionName": parsed.function_name,
            "InvocationType": invocation_type,
            "Payload": _serialize(payload),
        }
        if parsed.qualifier:
            params["Qualifier"] = parsed.qualifier

        return parsed, params

    def invoke(self, name: str, payload: Payload, result_type: type[T] | None = None) -> T:
        """Call the function synchronously and return the body of its response.

        ``result_type`` only informs type checkers; the value is not validated.

        Raises:
            InvalidFunctionNameError: ``name`` is not a valid function identifier.
            HttpError: the callee returned an error payload (its status code is
                kept) or crashed (500).
        """
        parsed, params = self._build_params(name, "RequestResponse", payload)
        logger.debug("Invoking %s", parsed.function_name)

        response = self.client.invoke(**params)
        outcome = decode(_read_payload(response))

        if isinstance(outcome, UnhandledException):
            logger.error(
                "APPLICATION EXCEPTION FROM INVOKED LAMBDA::%s MESSAGE::%s",
                parsed.function_name,
                outcome.error_message,
            )
            report_exception(self.sink, outcome.raw, self.flush_timeout)
            raise HttpError.bad_implementation(outcome.error_message)

        if isinstance(outcome, HandledError):
            raise outcome.to_exception()

        return cast(T, outcome.value)

    def invoke_async(self, name: str, payload: Payload) -> dict[str, Any]:
        """Submit an event invocation; the callee's result is never awaited."""
        parsed, params = self._build_params(name, "Event", payload)
        logger.debug("Invoking %s asynchronously", parsed.function_name)
        return self.client.invoke(**params)


@lru_cache(maxsize=1)
def get_lambda_invoker() -> LambdaInvoker:
    return LambdaInvoker(
        client=get_lambda_client(),
        sink=get_sink(),
        flush_timeout=get_config().sentry_flush_timeout,
    )


def lambda_invoke(name: str, payload: Payload, result_type: type[T] | None = None) -> T:
    return get_lambda_invoker().invoke(name, payload, result_type)


def lambda_invoke_async(name: str, payload: Payload) -> dict[str, Any]:
    return get_lambda_invoker().invoke_async(name, payload)
