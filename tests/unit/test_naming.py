import pytest

from lambda_utils.naming import parse_lambda_name


def test_plain_name():
    parsed = parse_lambda_name("myFn")
    assert parsed.function_name == "myFn"
    assert parsed.qualifier is None


def test_name_with_qualifier():
    parsed = parse_lambda_name("myFn:v2")
    assert parsed.function_name == "myFn"
    assert parsed.qualifier == "v2"


def test_latest_qualifier():
    assert parse_lambda_name("orders-api_dev:$LATEST").qualifier == "$LATEST"


def test_full_arn():
    parsed = parse_lambda_name("arn:aws:lambda:eu-west-1:123456789012:function:orders:live")
    assert parsed.function_name == "orders"
    assert parsed.qualifier == "live"
    assert parsed.region == "eu-west-1"
    assert parsed.account_id == "123456789012"


def test_gov_cloud_arn():
    parsed = parse_lambda_name("arn:aws-us-gov:lambda:us-gov-west-1:123456789012:function:orders")
    assert parsed.region == "us-gov-west-1"
    assert parsed.qualifier is None


def test_partial_arn():
    parsed = parse_lambda_name("123456789012:function:orders:3")
    assert parsed.function_name == "orders"
    assert parsed.account_id == "123456789012"
    assert parsed.qualifier == "3"


@pytest.mark.parametrize(
    "name",
    [
        "",
        "my fn",
        "myFn:",
        "myFn:v1:v2",
        "a" * 65,
        "arn:aws:lambda:us-east-1:function:orders",
        "myFn\n",
    ],
)
def test_invalid_names(name):
    assert parse_lambda_name(name) is None
