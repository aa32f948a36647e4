"""Lazy-initialized boto3 clients, reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3

from lambda_utils.config import get_config


@lru_cache(maxsize=1)
def get_lambda_client() -> Any:
    config = get_config()
    return boto3.client(
        "lambda",
        region_name=config.aws_region,
        endpoint_url=config.lambda_endpoint,
    )
