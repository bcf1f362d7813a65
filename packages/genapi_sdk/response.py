"""Immutable result wrappers for genapi client calls.

``Response`` describes the outcome of a call without a payload and
``DataResponse`` additionally carries the decoded response data. Both derive
``succeeded`` from the HTTP status code unless an explicit flag is supplied, in
which case the flag wins even when it disagrees with the status range.

Truthiness of either variant means "succeeded". Prefer ``is_ok()``,
``unwrap()`` and ``to_response()`` at call sites where the payload itself may be
falsy, so the intended view of the result stays visible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

from packages.genapi_sdk.errors import ResponseError
from packages.genapi_sdk.parsing import parse_errors

T = TypeVar("T")


def is_success_status(status_code: int) -> bool:
    """Return ``True`` for status codes in the 2xx range."""
    return 200 <= status_code < 300


class _ResponseView:
    """Behavior shared by ``Response`` and ``DataResponse``."""

    __slots__ = ()

    succeeded: bool
    status_code: int
    message: str | None

    @property
    def failed(self) -> bool:
        """Return ``True`` when the call did not succeed."""
        return not self.succeeded

    def is_ok(self) -> bool:
        """Return the success flag."""
        return self.succeeded

    def get_errors(self) -> Iterator[ResponseError]:
        """Parse error lines out of the message; recomputed on every call."""
        return parse_errors(self.message)

    def display(self) -> str:
        """Return ``(<status>): <message>`` trimmed of spaces and colons."""
        return f"({self.status_code}): {self.message or ''}".strip(" :")

    def _resolve_succeeded(self) -> None:
        if self.succeeded is None:
            succeeded = is_success_status(self.status_code)
        else:
            succeeded = bool(self.succeeded)
        object.__setattr__(self, "succeeded", succeeded)

    def __bool__(self) -> bool:
        return self.succeeded

    def __str__(self) -> str:
        return self.message or ""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.display()}>"


@dataclass(frozen=True, slots=True, repr=False)
class Response(_ResponseView):
    """Outcome of a call that returns no payload."""

    status_code: int
    message: str | None = None
    succeeded: bool = field(default=None, kw_only=True)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        self._resolve_succeeded()


@dataclass(frozen=True, repr=False)
class DataResponse(_ResponseView, Generic[T]):
    """Outcome of a call that returns a payload of type ``T``."""

    data: T
    status_code: int = 200
    message: str | None = None
    succeeded: bool = field(default=None, kw_only=True)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        self._resolve_succeeded()

    def unwrap(self) -> T:
        """Return the payload regardless of the success flag."""
        return self.data

    def to_response(self) -> Response:
        """Return a plain ``Response`` with the same flag, status and message."""
        return Response(self.status_code, self.message, succeeded=self.succeeded)
