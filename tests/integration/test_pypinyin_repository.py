"""Integration tests against the default pypinyin-backed dictionary."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from pypinyin import constants as pypinyin_constants

from hanzi_pinyin import convert, convert_to_string, default_repository
from hanzi_pinyin.config import ConversionConfig, ToneStyle

SAMPLE = "中文拼音行长乐的了你好"


def test_default_repository_is_shared() -> None:
    assert default_repository() is default_repository()


def test_default_repository_is_shared_across_threads() -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        repositories = list(pool.map(lambda _: default_repository(), range(16)))

    assert all(repository is repositories[0] for repository in repositories)


def test_default_conversion_uses_pypinyin_readings() -> None:
    assert convert_to_string("你") == "nǐ"
    assert convert_to_string("你", ConversionConfig(style=ToneStyle.TONE_NUMBER)) == "ni3"


def test_readings_match_pypinyin_table_order() -> None:
    repository = default_repository()

    for char in SAMPLE:
        expected = tuple(pypinyin_constants.PINYIN_DICT[ord(char)].split(","))
        assert repository.readings(char) == expected


def test_primary_reading_is_first_heteronym() -> None:
    heteronym = ConversionConfig(heteronym=True)
    primary = ConversionConfig(heteronym=False)

    for on, off in zip(convert(SAMPLE, heteronym), convert(SAMPLE, primary)):
        assert on.matched and off.matched
        assert off.readings == on.readings[:1]
        assert on.primary == off.primary


def test_every_pypinyin_reading_decodes() -> None:
    """Compilation validated every stored syllable, so rendering never fails."""

    repository = default_repository()
    config = ConversionConfig(style=ToneStyle.TONE_NUMBER, heteronym=True)
    text = "".join(entry.char for entry in repository.compiled.pronunciations[:2000])

    results = convert(text, config, repository)

    assert all(result.matched for result in results)
