"""HTTP constants shared by every API Gateway handler."""

from enum import Enum, IntEnum
from typing import TypedDict

HTTP_HEADERS: dict[str, str | bool] = {
    "Access-Control-Allow-Origin": "*",  # Required for CORS support to work
    "Access-Control-Allow-Credentials": True,  # Required for cookies, authorization headers with HTTPS
}


class HttpStatusCode(IntEnum):
    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500


class HttpMethod(str, Enum):
    DELETE = "DELETE"
    GET = "GET"
    POST = "POST"
    UPDATE = "PUT"
    PATCH = "PATCH"


class ApiResponse(TypedDict):
    """API Gateway proxy integration result."""

    statusCode: int
    headers: dict[str, str | bool]
    body: str
