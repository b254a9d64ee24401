"""Validation helpers for compiled dictionary integrity."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from hanzi_pinyin.errors import DictionaryConsistencyError
from hanzi_pinyin.models import CompiledDictionary, PronunciationEntry
from hanzi_pinyin.tones import ToneMarkTable, decode_syllable


def _raise_if_errors(errors: list[str], label: str) -> None:
    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise DictionaryConsistencyError(
            f"{label} validation failed with {len(errors)} errors:\n{preview}{more}"
        )


def validate_pronunciations(
    entries: Sequence[PronunciationEntry],
    tone_marks: ToneMarkTable,
) -> None:
    """Validate key order, key uniqueness and syllable decodability.

    Args:
        entries: Pronunciation table entries, expected sorted by character.
        tone_marks: Tone-mark table every stored syllable must decode under.

    Raises:
        DictionaryConsistencyError: If any entry violates the table contract.
    """

    errors: list[str] = []
    for prev, current in zip(entries, entries[1:]):
        if prev.char >= current.char:
            errors.append(
                f"U+{ord(current.char):04X}: key out of order or repeated after "
                f"U+{ord(prev.char):04X}"
            )

    for entry in entries:
        if len(entry.char) != 1:
            errors.append(f"{entry.char!r}: key must be a single code point")
            continue
        for syllable in entry.readings:
            try:
                decode_syllable(syllable, tone_marks)
            except DictionaryConsistencyError as exc:
                errors.append(f"U+{ord(entry.char):04X} '{entry.char}': {exc}")

    _raise_if_errors(errors, "Pronunciation table")


def validate_compiled_dictionary(compiled: CompiledDictionary, tone_marks: ToneMarkTable) -> None:
    """Validate both compiled tables before they are handed to lookups.

    Args:
        compiled: Compiler output.
        tone_marks: Tone-mark table built from ``compiled.tone_marks``.

    Raises:
        DictionaryConsistencyError: If either table violates its contract.
    """

    errors: list[str] = []
    marks = [entry.mark for entry in compiled.tone_marks]
    if marks != sorted(set(marks)):
        errors.append("tone-mark table is not sorted by unique diacritic")
    _raise_if_errors(errors, "Tone-mark table")

    validate_pronunciations(compiled.pronunciations, tone_marks)


def collect_reading_counts(entries: Sequence[PronunciationEntry]) -> dict[int, int]:
    """Count characters by number of declared readings.

    Args:
        entries: Pronunciation table entries.

    Returns:
        Dictionary of reading count to number of characters.
    """

    counter: Counter[int] = Counter()
    for entry in entries:
        counter[len(entry.readings)] += 1
    return dict(counter)


def collect_heteronyms(entries: Sequence[PronunciationEntry]) -> list[PronunciationEntry]:
    """Return entries declaring more than one reading, in table order."""

    return [entry for entry in entries if len(entry.readings) > 1]
