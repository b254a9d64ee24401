"""Data models shared by the dictionary compiler and the conversion engine.

Compiled tables are made of immutable entries so they can be shared across
threads once built. Per-call values (``ConversionResult``) are immutable too.
"""

from __future__ import annotations

from dataclasses import dataclass, field

READING_DELIMITER = ","


@dataclass(frozen=True)
class RawDictionaryEntry:
    """One parsed line of the raw dictionary source.

    ``readings`` keeps the declaration order of the source line, which upstream
    dictionaries use to list the most common reading first.
    """

    line_number: int
    char: str
    readings: tuple[str, ...]
    line: str


@dataclass(frozen=True)
class ToneMarkEntry:
    """Diacritic character paired with its two-character tone code.

    The code is a base Latin letter followed by a tone digit, e.g. ``a3`` for
    ``ǎ``. Digit ``0`` marks the toneless ``ü`` (``v0``).
    """

    mark: str
    code: str

    @property
    def base(self) -> str:
        """Return the base letter of the tone code."""

        return self.code[0]

    @property
    def tone(self) -> int:
        """Return the numeric tone of the tone code."""

        return int(self.code[1])


@dataclass(frozen=True)
class PronunciationEntry:
    """Character paired with its comma-joined pinyin readings."""

    char: str
    pinyin: str

    @property
    def readings(self) -> tuple[str, ...]:
        """Return readings split in declaration order."""

        return tuple(self.pinyin.split(READING_DELIMITER))


@dataclass(frozen=True)
class CompiledDictionary:
    """Output of one compiler run, ready to be loaded into lookup tables.

    Both tables are sorted by key. ``duplicates`` keeps the raw entries that were
    discarded because an earlier line already declared the same character.
    """

    tone_marks: tuple[ToneMarkEntry, ...]
    pronunciations: tuple[PronunciationEntry, ...]
    duplicates: tuple[RawDictionaryEntry, ...] = field(default_factory=tuple)
    source_lines: int = 0


@dataclass(frozen=True)
class ConversionResult:
    """Conversion outcome for one input character.

    On a dictionary hit ``readings`` holds the rendered syllables in dictionary
    order and ``matched`` is true. On a miss the character passes through as the
    single element of ``readings``.
    """

    char: str
    readings: tuple[str, ...]
    matched: bool

    @property
    def primary(self) -> str:
        return self.readings[0]
