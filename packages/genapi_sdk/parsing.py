"""Line-oriented parser for error codes embedded in response messages.

Servers report one error per line. A line may start with a fixed-width numeric
code followed by a colon, for example ``1234:bad request``. The prefix is exactly
four characters wide; ``12:foo`` and ``12345:foo`` carry no code.
"""

from __future__ import annotations

import re
from typing import Iterator

from packages.genapi_sdk.errors import ResponseError
from packages.genapi_shared.logging import get_logger

logger = get_logger(__name__)

CODE_WIDTH = 4

_LINE_BREAK = re.compile(r"\r\n|\n")
_CODE_PREFIX = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+[ \t\n\v\f\r]*")


def parse_errors(message: str | None) -> Iterator[ResponseError]:
    """Yield one ``ResponseError`` per non-empty line of ``message``.

    ``None`` and empty messages yield nothing. Lines without a recognizable
    ``NNNN:`` prefix are yielded whole with code ``0``.
    """
    if not message:
        return

    for line in _LINE_BREAK.split(message):
        if line == "":
            continue
        yield parse_error_line(line)


def parse_error_line(line: str) -> ResponseError:
    """Parse one error line into a ``ResponseError``."""
    if len(line) > CODE_WIDTH + 1 and line[CODE_WIDTH] == ":":
        return ResponseError(
            code=_parse_code(line[:CODE_WIDTH]),
            message=line[CODE_WIDTH + 1 :],
        )
    return ResponseError(code=0, message=line)


def _parse_code(prefix: str) -> int:
    """Return the integer value of ``prefix`` or ``0`` when it is not numeric."""
    if _CODE_PREFIX.fullmatch(prefix) is None:
        logger.debug("non-numeric error code prefix %r; using 0", prefix)
        return 0
    return int(prefix)
