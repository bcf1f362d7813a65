"""Adapters from received ``httpx`` responses into genapi result wrappers.

These helpers never issue requests. Callers run the request with their own
client and hand the received ``httpx.Response`` over for wrapping. Log records
emitted while wrapping carry the HTTP status under the ``status_code`` context
field.
"""

from __future__ import annotations

from typing import Callable, TypeVar

import httpx

from packages.genapi_sdk.response import DataResponse, Response, is_success_status
from packages.genapi_shared.logging import fields, get_logger, log_context

logger = get_logger(__name__)

T = TypeVar("T")


def _response_text(response: httpx.Response) -> str:
    """Return response text without raising secondary decode errors."""
    try:
        return response.text
    except Exception:
        return ""


def response_from_http(http_response: httpx.Response) -> Response:
    """Wrap one received HTTP response as a payload-less ``Response``."""
    with log_context({fields.STATUS_CODE: http_response.status_code}):
        result = Response(http_response.status_code, _response_text(http_response))
        logger.debug("wrapped HTTP response (succeeded=%s)", result.succeeded)
    return result


def data_response_from_http(
    http_response: httpx.Response,
    decode: Callable[[httpx.Response], T],
) -> DataResponse[T | None]:
    """Wrap one received HTTP response, decoding the payload on success.

    Failure statuses carry the body text as message and no data. A success
    status whose body cannot be decoded keeps its status code but is marked
    failed, with the decoder's error text as message. Decoder exceptions never
    propagate.
    """
    status_code = http_response.status_code
    with log_context({fields.STATUS_CODE: status_code}):
        if not is_success_status(status_code):
            result: DataResponse[T | None] = DataResponse(
                None, status_code, _response_text(http_response)
            )
        else:
            try:
                result = DataResponse(decode(http_response), status_code)
            except Exception as exc:
                logger.warning(
                    "failed to decode response body: %s: %s", type(exc).__name__, exc
                )
                result = DataResponse(
                    None, status_code, _decode_error_text(exc), succeeded=False
                )

        logger.debug("wrapped HTTP response (succeeded=%s)", result.succeeded)
    return result


def _decode_error_text(exc: Exception) -> str:
    """Return a non-empty message describing one decoder failure."""
    detail = str(exc)
    return detail if detail else type(exc).__name__


def decode_json(http_response: httpx.Response) -> object:
    """Default payload decoder returning the parsed JSON body."""
    return http_response.json()
