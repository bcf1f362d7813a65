"""Error records and opt-in failure raising for genapi responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from packages.genapi_sdk.response import DataResponse, Response


@dataclass(frozen=True, slots=True)
class ResponseError:
    """One error line parsed out of a response message."""

    code: int
    message: str


@dataclass(frozen=True)
class ResponseFailedError(Exception):
    """Raised by ``raise_for_failure`` for a response that did not succeed."""

    message: str
    status_code: int
    errors: tuple[ResponseError, ...] = ()

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.message


def raise_for_failure(response: Response | DataResponse[object]) -> None:
    """Raise ``ResponseFailedError`` when ``response`` is not succeeded.

    The raised error carries the response display string as its message and the
    error lines parsed from the response message.
    """
    if response.succeeded:
        return

    raise ResponseFailedError(
        message=response.display(),
        status_code=response.status_code,
        errors=tuple(response.get_errors()),
    )
