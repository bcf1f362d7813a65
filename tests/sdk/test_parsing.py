"""Tests for the response message error-line parser."""

from __future__ import annotations

import types

import pytest

from packages.genapi_sdk import ResponseError, parse_error_line, parse_errors


@pytest.mark.parametrize("message", [None, ""])
def test_parse_errors_yields_nothing_for_absent_or_empty_message(
    message: str | None,
) -> None:
    """None and empty messages should produce no error entries."""
    assert list(parse_errors(message)) == []


def test_parse_errors_reads_four_digit_code_prefix() -> None:
    """A ``NNNN:`` prefix should become the error code."""
    assert list(parse_errors("1234:bad request")) == [
        ResponseError(code=1234, message="bad request")
    ]


def test_parse_errors_uses_zero_code_without_prefix() -> None:
    """Lines without a code prefix should be kept whole with code 0."""
    assert list(parse_errors("no code here")) == [
        ResponseError(code=0, message="no code here")
    ]


def test_parse_errors_preserves_line_order() -> None:
    """Each line should yield one entry in input order."""
    assert list(parse_errors("1234:first\n5678:second")) == [
        ResponseError(code=1234, message="first"),
        ResponseError(code=5678, message="second"),
    ]


def test_parse_errors_splits_on_crlf_and_drops_empty_lines() -> None:
    """CRLF and LF breaks should both split, and blank lines should be dropped."""
    errors = list(parse_errors("\r\n1001:one\r\n\n\ntwo\n"))

    assert errors == [
        ResponseError(code=1001, message="one"),
        ResponseError(code=0, message="two"),
    ]


def test_parse_errors_strips_non_numeric_prefix_with_zero_code() -> None:
    """A non-numeric four-character prefix should default the code to 0."""
    assert list(parse_errors("abcd:oops")) == [ResponseError(code=0, message="oops")]


@pytest.mark.parametrize(
    "line",
    [
        "12:foo",
        "12345:foo",
        "1234:",
        "1234",
        "abc",
        "1234-foo",
    ],
)
def test_parse_error_line_requires_fixed_width_prefix(line: str) -> None:
    """Only lines longer than five characters with a colon at index 4 carry a code."""
    assert parse_error_line(line) == ResponseError(code=0, message=line)


def test_parse_error_line_keeps_text_after_colon_verbatim() -> None:
    """Everything after index 5 should be the message, including extra colons."""
    assert parse_error_line("4040: not found: /users/7") == ResponseError(
        code=4040, message=" not found: /users/7"
    )


@pytest.mark.parametrize(
    ("line", "code"),
    [
        (" 404:missing", 404),
        ("-001:negative", -1),
        ("+012:signed", 12),
        ("1_23:underscored", 0),
        ("12 3:spaced", 0),
        ("\u00a0123:no-break space", 0),
        ("\u2003123:em space", 0),
        ("\t123:tab", 123),
    ],
)
def test_parse_error_line_accepts_signed_and_padded_integers(line: str, code: int) -> None:
    """The prefix should parse as a plain signed integer or default to 0."""
    assert parse_error_line(line).code == code


def test_parse_errors_is_lazy_generator() -> None:
    """The parser should produce a one-shot generator."""
    errors = parse_errors("1234:first\n5678:second")

    assert isinstance(errors, types.GeneratorType)
    assert next(errors) == ResponseError(code=1234, message="first")
    assert list(errors) == [ResponseError(code=5678, message="second")]
    assert list(errors) == []


def test_parse_errors_logs_non_numeric_prefix(caplog: pytest.LogCaptureFixture) -> None:
    """Unparsable prefixes should be reported at DEBUG level only."""
    with caplog.at_level("DEBUG", logger="packages.genapi_sdk.parsing"):
        list(parse_errors("abcd:oops"))

    assert [record.levelname for record in caplog.records] == ["DEBUG"]
    assert "'abcd'" in caplog.records[0].getMessage()
