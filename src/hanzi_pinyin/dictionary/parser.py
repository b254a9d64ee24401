"""Parsing utilities for pinyin-data style dictionary sources.

Each data line has the shape ``U+4F60: nǐ  # 你``: a code point, a comma
separated list of readings, and a comment echoing the literal character.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from hanzi_pinyin.errors import DictionaryFormatError
from hanzi_pinyin.models import READING_DELIMITER, RawDictionaryEntry

COMMENT_PREFIX = "#"
CODE_POINT_PREFIX = "U+"
HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]{1,6}")


def _parse_code_point(key: str, line_number: int, line: str) -> str:
    """Decode a ``U+XXXX`` specifier into its character."""

    if not key.startswith(CODE_POINT_PREFIX):
        raise DictionaryFormatError(
            f"code point must start with '{CODE_POINT_PREFIX}'", line_number, line
        )
    digits = key[len(CODE_POINT_PREFIX) :]
    if not HEX_DIGITS_RE.fullmatch(digits):
        raise DictionaryFormatError(f"invalid code point '{key}'", line_number, line)
    try:
        return chr(int(digits, 16))
    except ValueError:
        raise DictionaryFormatError(
            f"invalid code point '{key}'", line_number, line
        ) from None


def _parse_readings(payload: str, line_number: int, line: str) -> tuple[str, ...]:
    """Split the reading payload on commas, keeping declaration order."""

    readings = tuple(item.strip() for item in payload.split(READING_DELIMITER))
    if any(not item for item in readings):
        raise DictionaryFormatError("empty reading", line_number, line)
    return readings


def parse_dictionary_line(line: str, line_number: int = 0) -> RawDictionaryEntry | None:
    """Parse one source line.

    Args:
        line: Raw source line.
        line_number: 1-based position of the line, for diagnostics.

    Returns:
        Parsed entry, or ``None`` for comment and blank lines.

    Raises:
        DictionaryFormatError: If the line is malformed or its verification
            comment does not echo the decoded character.
    """

    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    key, colon, value = stripped.partition(":")
    if not colon:
        raise DictionaryFormatError("missing ':' after code point", line_number, line)
    char = _parse_code_point(key.strip(), line_number, line)

    payload, hash_mark, comment = value.partition(COMMENT_PREFIX)
    if not hash_mark:
        raise DictionaryFormatError(
            f"missing '{COMMENT_PREFIX}' verification comment", line_number, line
        )
    readings = _parse_readings(payload, line_number, line)

    comment = comment.strip()
    if not comment:
        raise DictionaryFormatError("empty verification comment", line_number, line)
    if comment[0] != char:
        raise DictionaryFormatError(
            f"verification comment '{comment[0]}' does not match U+{ord(char):04X} '{char}'",
            line_number,
            line,
        )

    return RawDictionaryEntry(
        line_number=line_number,
        char=char,
        readings=readings,
        line=stripped,
    )


def parse_dictionary_lines(lines: Iterable[str]) -> Iterator[RawDictionaryEntry]:
    """Parse source lines into entries, skipping comments and blank lines.

    Args:
        lines: Iterable of raw dictionary lines.

    Yields:
        Parsed entries in source order.
    """

    for line_number, line in enumerate(lines, start=1):
        entry = parse_dictionary_line(line, line_number)
        if entry is not None:
            yield entry
