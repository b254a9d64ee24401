"""Compile raw dictionary sources into sorted, deduplicated tables."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from hanzi_pinyin.dictionary.parser import parse_dictionary_lines
from hanzi_pinyin.errors import DictionaryConsistencyError
from hanzi_pinyin.models import (
    READING_DELIMITER,
    CompiledDictionary,
    PronunciationEntry,
    RawDictionaryEntry,
    ToneMarkEntry,
)
from hanzi_pinyin.tones import TONE_MARK_DATA, ToneMarkTable
from hanzi_pinyin.validation import validate_compiled_dictionary

logger = logging.getLogger(__name__)

TONE_CODE_RE = re.compile(r"[a-z][0-4]")


def compile_tone_marks(
    pairs: Iterable[tuple[str, str]] = TONE_MARK_DATA,
) -> tuple[ToneMarkEntry, ...]:
    """Validate and sort the hand-authored tone-mark pairs.

    Args:
        pairs: ``(diacritic, code)`` pairs.

    Returns:
        Entries sorted by diacritic character.

    Raises:
        DictionaryConsistencyError: If a diacritic repeats or a code is not a
            lowercase letter followed by a digit ``0``-``4``.
    """

    entries = [ToneMarkEntry(mark=mark, code=code) for mark, code in pairs]
    marks = {entry.mark for entry in entries}
    if len(marks) != len(entries):
        raise DictionaryConsistencyError(
            "Tone-mark table has duplicate diacritics: "
            f"{len(entries)} entries, {len(marks)} distinct."
        )
    for entry in entries:
        if len(entry.mark) != 1 or not TONE_CODE_RE.fullmatch(entry.code):
            raise DictionaryConsistencyError(
                f"Invalid tone-mark entry {entry.mark!r} -> {entry.code!r}."
            )

    entries.sort(key=lambda entry: entry.mark)
    return tuple(entries)


def compile_pronunciations(
    entries: Iterable[RawDictionaryEntry],
) -> tuple[tuple[PronunciationEntry, ...], tuple[RawDictionaryEntry, ...]]:
    """Deduplicate parsed entries and sort them by character.

    The first declaration of a character wins; later ones are logged and
    returned separately so callers can report them.

    Args:
        entries: Parsed source entries in source order.

    Returns:
        ``(pronunciations, duplicates)`` with pronunciations sorted by character.

    Raises:
        DictionaryConsistencyError: If the deduplicated key count does not match
            the table size.
    """

    pronunciations: list[PronunciationEntry] = []
    duplicates: list[RawDictionaryEntry] = []
    seen: set[str] = set()

    for entry in entries:
        if entry.char in seen:
            logger.warning("Duplicate entry discarded at line %d: %s", entry.line_number, entry.line)
            duplicates.append(entry)
            continue
        seen.add(entry.char)
        pronunciations.append(
            PronunciationEntry(char=entry.char, pinyin=READING_DELIMITER.join(entry.readings))
        )

    if len(pronunciations) != len(seen):
        raise DictionaryConsistencyError(
            f"Pronunciation table size {len(pronunciations)} != distinct characters {len(seen)}."
        )

    # list.sort is stable
    pronunciations.sort(key=lambda entry: entry.char)
    return tuple(pronunciations), tuple(duplicates)


def compile_dictionary(
    lines: Iterable[str],
    tone_mark_pairs: Iterable[tuple[str, str]] = TONE_MARK_DATA,
) -> CompiledDictionary:
    """Run the full compile: parse, deduplicate, sort and validate.

    Args:
        lines: Raw dictionary source lines.
        tone_mark_pairs: Hand-authored tone-mark pairs.

    Returns:
        Compiled dictionary with both tables sorted.

    Raises:
        DictionaryFormatError: If any source line is malformed.
        DictionaryConsistencyError: If compiled data violates an invariant or a
            stored syllable cannot be decoded.
    """

    source = list(lines)
    tone_marks = compile_tone_marks(tone_mark_pairs)
    pronunciations, duplicates = compile_pronunciations(parse_dictionary_lines(source))

    compiled = CompiledDictionary(
        tone_marks=tone_marks,
        pronunciations=pronunciations,
        duplicates=duplicates,
        source_lines=len(source),
    )
    validate_compiled_dictionary(compiled, ToneMarkTable(tone_marks))

    logger.info(
        "Compiled %d characters and %d tone marks from %d lines (%d duplicates discarded)",
        len(pronunciations),
        len(tone_marks),
        len(source),
        len(duplicates),
    )
    return compiled
