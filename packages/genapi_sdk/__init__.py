"""Public genapi runtime interface imported by generated API clients."""

from packages.genapi_sdk.errors import ResponseError, ResponseFailedError, raise_for_failure
from packages.genapi_sdk.http import data_response_from_http, decode_json, response_from_http
from packages.genapi_sdk.parsing import parse_error_line, parse_errors
from packages.genapi_sdk.response import DataResponse, Response, is_success_status

__all__ = [
    "DataResponse",
    "Response",
    "ResponseError",
    "ResponseFailedError",
    "data_response_from_http",
    "decode_json",
    "is_success_status",
    "parse_error_line",
    "parse_errors",
    "raise_for_failure",
    "response_from_http",
]
