"""
Error reporting to Sentry.

Handlers talk to an `ObservabilitySink` rather than to ``sentry_sdk``
directly so tests can substitute a fake. Reporting is best effort: a failing
sink is logged and never changes the outcome of a request.
"""

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Protocol

import sentry_sdk

from lambda_utils.config import Config, get_config
from lambda_utils.log import configure_logging

logger = logging.getLogger(__name__)


class ObservabilitySink(Protocol):
    def capture_exception(self, error: Any) -> None: ...

    def flush(self, timeout: float) -> None: ...

    def configure_scope(self, mutator: Callable[[Any], None]) -> None: ...


class SentrySink:
    def capture_exception(self, error: Any) -> None:
        if isinstance(error, BaseException):
            sentry_sdk.capture_exception(error)
        else:
            # Raw payloads (e.g. a callee's errorMessage object) are not exceptions
            with sentry_sdk.new_scope() as scope:
                scope.set_extra("payload", error)
                sentry_sdk.capture_message(str(error), level="error")

    def flush(self, timeout: float) -> None:
        sentry_sdk.flush(timeout=timeout)

    def configure_scope(self, mutator: Callable[[Any], None]) -> None:
        mutator(sentry_sdk.get_isolation_scope())


def init_sentry(config: Config) -> None:
    sentry_sdk.init(
        dsn=config.sentry_dsn or None,
        environment=config.stage,
        debug=config.debug,
    )


@lru_cache(maxsize=1)
def get_sink() -> ObservabilitySink:
    """Process-wide sink; also applies the logging config on first use."""
    config = get_config()
    configure_logging(config)
    try:
        init_sentry(config)
    except Exception:
        # An uninitialised client turns every capture into a no-op
        logger.exception("Failed to initialize Sentry, error reporting disabled")
    return SentrySink()


def report_exception(sink: ObservabilitySink, error: Any, timeout: float) -> None:
    """Capture ``error`` and wait up to ``timeout`` seconds for delivery."""
    try:
        sink.capture_exception(error)
        sink.flush(timeout)
    except Exception:
        logger.exception("Failed to report exception to observability sink")


def configure_scope(sink: ObservabilitySink, mutator: Callable[[Any], None]) -> None:
    try:
        sink.configure_scope(mutator)
    except Exception:
        logger.exception("Failed to configure observability scope")
