"""Unit tests for compiled-table validation helpers."""

from __future__ import annotations

import pytest

from hanzi_pinyin.dictionary.compiler import compile_tone_marks
from hanzi_pinyin.errors import DictionaryConsistencyError
from hanzi_pinyin.models import CompiledDictionary, PronunciationEntry, ToneMarkEntry
from hanzi_pinyin.tones import ToneMarkTable
from hanzi_pinyin.validation import (
    collect_heteronyms,
    collect_reading_counts,
    validate_compiled_dictionary,
    validate_pronunciations,
)


@pytest.fixture(scope="module")
def tone_marks() -> ToneMarkTable:
    return ToneMarkTable(entries=compile_tone_marks())


def _entries(*pairs: tuple[str, str]) -> tuple[PronunciationEntry, ...]:
    return tuple(PronunciationEntry(char=char, pinyin=pinyin) for char, pinyin in pairs)


def test_validate_pronunciations_accepts_sorted_decodable_table(tone_marks: ToneMarkTable) -> None:
    validate_pronunciations(_entries(("你", "nǐ"), ("好", "hǎo,hao4")), tone_marks)


def test_validate_pronunciations_rejects_out_of_order_keys(tone_marks: ToneMarkTable) -> None:
    with pytest.raises(DictionaryConsistencyError, match="out of order"):
        validate_pronunciations(_entries(("好", "hǎo"), ("你", "nǐ")), tone_marks)


def test_validate_pronunciations_rejects_repeated_keys(tone_marks: ToneMarkTable) -> None:
    with pytest.raises(DictionaryConsistencyError, match="repeated"):
        validate_pronunciations(_entries(("你", "nǐ"), ("你", "ni3")), tone_marks)


def test_validate_pronunciations_rejects_multi_character_keys(tone_marks: ToneMarkTable) -> None:
    with pytest.raises(DictionaryConsistencyError, match="single code point"):
        validate_pronunciations(_entries(("你好", "nǐ")), tone_marks)


def test_validate_pronunciations_reports_every_bad_syllable(tone_marks: ToneMarkTable) -> None:
    entries = _entries(("你", "n?i3"), ("好", "hǎò"))

    with pytest.raises(DictionaryConsistencyError, match="failed with 2 errors") as excinfo:
        validate_pronunciations(entries, tone_marks)

    message = str(excinfo.value)
    assert "U+4F60 '你'" in message
    assert "U+597D '好'" in message


def test_validate_compiled_dictionary_rejects_unsorted_tone_marks(
    tone_marks: ToneMarkTable,
) -> None:
    compiled = CompiledDictionary(
        tone_marks=(ToneMarkEntry("ā", "a1"), ToneMarkEntry("á", "a2")),
        pronunciations=(),
    )

    with pytest.raises(DictionaryConsistencyError, match="Tone-mark table"):
        validate_compiled_dictionary(compiled, tone_marks)


def test_collect_reading_counts_and_heteronyms() -> None:
    entries = _entries(("你", "nǐ"), ("好", "hǎo,hào"), ("的", "de,dí,dì"), ("中", "zhōng,zhòng"))

    assert collect_reading_counts(entries) == {1: 1, 2: 2, 3: 1}
    assert [entry.char for entry in collect_heteronyms(entries)] == ["好", "的", "中"]
