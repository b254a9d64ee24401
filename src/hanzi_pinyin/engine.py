"""Convert text to pinyin one character at a time."""

from __future__ import annotations

from hanzi_pinyin.config import Casing, ConversionConfig
from hanzi_pinyin.dictionary.repository import PinyinRepository, default_repository
from hanzi_pinyin.models import ConversionResult
from hanzi_pinyin.tones import render_syllable

DEFAULT_CONFIG = ConversionConfig()


def _apply_case(syllable: str, case: Casing) -> str:
    if case is Casing.UPPER:
        return syllable.upper()
    if case is Casing.LOWER:
        return syllable.lower()
    return syllable


def convert_char(
    char: str,
    config: ConversionConfig,
    repository: PinyinRepository,
) -> ConversionResult:
    """Convert one character.

    Args:
        char: Single input character.
        config: Conversion options.
        repository: Loaded dictionary repository.

    Returns:
        Rendered readings on a hit; the character itself on a miss.

    Raises:
        DictionaryConsistencyError: If a stored syllable cannot be decoded.
    """

    readings = repository.readings(char)
    if readings is None:
        return ConversionResult(char=char, readings=(char,), matched=False)

    if not config.heteronym:
        readings = readings[:1]

    tone_marks = repository.tone_marks
    rendered = tuple(
        _apply_case(render_syllable(syllable, config.style, tone_marks), config.case)
        for syllable in readings
    )
    return ConversionResult(char=char, readings=rendered, matched=True)


def convert(
    text: str,
    config: ConversionConfig | None = None,
    repository: PinyinRepository | None = None,
) -> list[ConversionResult]:
    """Convert text into one result per input character.

    Args:
        text: Input text; iterated per code point.
        config: Conversion options, defaulting to diacritic tones and primary
            readings only.
        repository: Dictionary to look characters up in, defaulting to the
            process-wide pypinyin-backed repository.

    Returns:
        Results in input order.
    """

    if config is None:
        config = DEFAULT_CONFIG
    if repository is None:
        repository = default_repository()

    return [convert_char(char, config, repository) for char in text]


def join_results(results: list[ConversionResult], config: ConversionConfig) -> str:
    """Flatten results into one string.

    Readings of one character are joined by ``config.heteronym_separator`` and
    segments by ``config.separator``. Consecutive pass-through characters form
    a single segment.
    """

    segments: list[str] = []
    passthrough: list[str] = []
    for result in results:
        if not result.matched:
            passthrough.append(result.char)
            continue
        if passthrough:
            segments.append("".join(passthrough))
            passthrough.clear()
        segments.append(config.heteronym_separator.join(result.readings))
    if passthrough:
        segments.append("".join(passthrough))
    return config.separator.join(segments)


def convert_to_string(
    text: str,
    config: ConversionConfig | None = None,
    repository: PinyinRepository | None = None,
) -> str:
    """Convert text and flatten the results into one string.

    Args:
        text: Input text.
        config: Conversion options.
        repository: Dictionary repository.

    Returns:
        Flattened conversion, e.g. ``"ni3 hao3"`` for ``"你好"``.
    """

    if config is None:
        config = DEFAULT_CONFIG
    return join_results(convert(text, config, repository), config)
