"""Shared test fixtures for lambda-utils."""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE so boto3 never reaches for real credentials
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Drop cached config and clients so each test sees its own environment."""
    from lambda_utils.clients import get_lambda_client
    from lambda_utils.config import _reset_config
    from lambda_utils.invoke import get_lambda_invoker
    from lambda_utils.observability import get_sink

    _reset_config()
    for cached in (get_lambda_client, get_lambda_invoker, get_sink):
        cached.cache_clear()
    yield
    _reset_config()
    for cached in (get_lambda_client, get_lambda_invoker, get_sink):
        cached.cache_clear()


@pytest.fixture
def sink():
    """Observability sink double; scope mutators run against ``sink.scope``."""
    fake = MagicMock()
    fake.scope = MagicMock()
    fake.configure_scope.side_effect = lambda mutator: mutator(fake.scope)
    return fake


@pytest.fixture
def lambda_context():
    context = MagicMock()
    context.function_name = "orders-api-dev-getOrder"
    context.aws_request_id = "req-123"
    context.log_group_name = "/aws/lambda/orders-api-dev-getOrder"
    context.log_stream_name = "2026/10/19/[$LATEST]abc"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:orders-api-dev-getOrder"
    context.memory_limit_in_mb = 256
    context.client_context = None
    context.get_remaining_time_in_millis.return_value = 2900
    return context


@pytest.fixture
def api_event():
    return {
        "resource": "/orders/{id}",
        "httpMethod": "GET",
        "pathParameters": {"id": "ord-1"},
        "requestContext": {
            "authorizer": {"principalId": "acct-1", "userId": "user-9", "userRole": "admin"},
        },
    }
