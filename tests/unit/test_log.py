import logging

import pytest

from lambda_utils.config import Config
from lambda_utils.log import configure_logging, logger


@pytest.fixture(autouse=True)
def _restore_logger():
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _config(**overrides) -> Config:
    return Config(aws_region="us-east-1", stage="local", **overrides)


def test_debug_level():
    configure_logging(_config(logger_level="DEBUG"))
    assert logger.level == logging.DEBUG


def test_default_level_is_info():
    configure_logging(_config())
    assert logger.level == logging.INFO


def test_offline_adds_single_stream_handler():
    logger.handlers.clear()

    configure_logging(_config(is_offline=True))
    configure_logging(_config(is_offline=True))

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_online_adds_no_handler():
    logger.handlers.clear()

    configure_logging(_config())

    assert logger.handlers == []
