"""Parse Lambda function identifiers.

Accepted forms, each with an optional ``:qualifier`` (version or alias):

    my-function
    123456789012:function:my-function
    arn:aws:lambda:us-east-1:123456789012:function:my-function
"""

import re

from pydantic import BaseModel, ConfigDict

_LAMBDA_NAME = re.compile(
    r"(?:arn:(?P<partition>aws[a-zA-Z-]*):lambda:(?P<region>[a-z]{2}(?:-gov)?-[a-z]+-\d):)?"
    r"(?:(?P<account_id>\d{12}):function:)?"
    r"(?P<function_name>[a-zA-Z0-9_-]{1,64})"
    r"(?::(?P<qualifier>\$LATEST|[a-zA-Z0-9_-]{1,128}))?"
)


class LambdaName(BaseModel):
    model_config = ConfigDict(frozen=True)

    function_name: str
    qualifier: str | None = None
    region: str | None = None
    account_id: str | None = None


def parse_lambda_name(name: str) -> LambdaName | None:
    """Return the parsed name, or None when ``name`` is not a valid identifier."""
    if not name:
        return None

    match = _LAMBDA_NAME.fullmatch(name)
    if match is None:
        return None

    # A full ARN always names the account
    if match.group("region") and not match.group("account_id"):
        return None

    return LambdaName(
        function_name=match.group("function_name"),
        qualifier=match.group("qualifier"),
        region=match.group("region"),
        account_id=match.group("account_id"),
    )
