"""Tests for iCalendar text and date encoding."""

import re
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from transformer import escape_text, format_timestamp


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", lambda m: "\n" if m.group(1) == "n" else m.group(1), text)


@pytest.mark.parametrize("instant, expected", [
    (datetime(2024, 3, 1, tzinfo=timezone.utc), "20240301T000000Z"),
    (datetime(1999, 12, 31, 23, 59, 59, tzinfo=timezone.utc), "19991231T235959Z"),
    (datetime(2024, 3, 1, 9, 30, tzinfo=ZoneInfo("Asia/Bangkok")), "20240301T023000Z"),
    (datetime(2024, 7, 4, 5, 6, 7), "20240704T050607Z"),
])
def test_format_timestamp(instant: datetime, expected: str) -> None:
    assert format_timestamp(instant) == expected


def test_format_timestamp_drops_fractional_seconds() -> None:
    instant = datetime(2024, 3, 1, 12, 0, 0, 999999, tzinfo=timezone.utc)
    assert format_timestamp(instant) == "20240301T120000Z"


def test_format_timestamp_round_trips() -> None:
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)
    for hours in range(0, 24 * 400, 37):
        instant = start + timedelta(hours=hours, seconds=hours % 60)
        text = format_timestamp(instant)

        assert re.fullmatch(r"\d{8}T\d{6}Z", text)
        parsed = datetime.strptime(text, "%Y%m%dT%H%M%SZ").replace(tzinfo=timezone.utc)
        assert parsed == instant


def test_escape_text_plain_text_unchanged() -> None:
    assert escape_text("Homework 1") == "Homework 1"
    assert escape_text(escape_text("Homework 1")) == "Homework 1"


def test_escape_text_reserved_characters() -> None:
    assert escape_text("a\\b;c,d\ne") == r"a\\b\;c\,d\ne"


def test_escape_text_does_not_double_escape() -> None:
    assert escape_text(";") == r"\;"
    assert escape_text(r"\;") == r"\\\;"


def test_escape_text_crlf_is_single_newline() -> None:
    assert escape_text("one\r\ntwo") == "one\\ntwo"


@pytest.mark.parametrize("text", [
    "Read ch. 1, 2; skip 3",
    "C:\\path\\to\\file",
    "literal \\n is not a newline",
    "line one\nline two\n",
])
def test_escape_text_is_reversible(text: str) -> None:
    escaped = escape_text(text)

    assert "\n" not in escaped
    assert re.search(r"(?<!\\)(\\\\)*[;,]", escaped) is None
    assert _unescape(escaped) == text
