"""Tone-mark table and syllable rendering between diacritic and numbered pinyin."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType
import unicodedata
from typing import Mapping

from hanzi_pinyin.config import ToneStyle
from hanzi_pinyin.dictionary.tables import LookupTable, build_table
from hanzi_pinyin.errors import DictionaryConsistencyError
from hanzi_pinyin.models import ToneMarkEntry

# Hand-curated diacritic -> (base letter + tone digit) pairs. ``ü`` is spelled
# ``v`` in codes; ``v0`` is the toneless ``ü``.
TONE_MARK_DATA: tuple[tuple[str, str], ...] = (
    ("ā", "a1"),
    ("á", "a2"),
    ("ǎ", "a3"),
    ("à", "a4"),
    ("ē", "e1"),
    ("é", "e2"),
    ("ě", "e3"),
    ("è", "e4"),
    ("ō", "o1"),
    ("ó", "o2"),
    ("ǒ", "o3"),
    ("ò", "o4"),
    ("ī", "i1"),
    ("í", "i2"),
    ("ǐ", "i3"),
    ("ì", "i4"),
    ("ū", "u1"),
    ("ú", "u2"),
    ("ǔ", "u3"),
    ("ù", "u4"),
    ("ü", "v0"),
    ("ǖ", "v1"),
    ("ǘ", "v2"),
    ("ǚ", "v3"),
    ("ǜ", "v4"),
    ("ń", "n2"),
    ("ň", "n3"),
    ("ḿ", "m2"),
)

COMBINING_TONE_MARKS = {
    "\u0304": 1,  # macron
    "\u0301": 2,  # acute
    "\u030c": 3,  # caron
    "\u0300": 4,  # grave
}
TONE_COMBINING_MARKS = {tone: mark for mark, tone in COMBINING_TONE_MARKS.items()}
NUMBERED_TONE_DIGITS = "012345"


@dataclass(frozen=True)
class ToneMarkTable:
    """Compiled tone-mark entries with forward and reverse lookups.

    The forward table maps a diacritic character to its code; the reverse map
    rebuilds the diacritic from ``base letter + tone digit``.
    """

    entries: tuple[ToneMarkEntry, ...]
    strategy: str = "sorted"

    @cached_property
    def forward(self) -> LookupTable:
        return build_table(((entry.mark, entry.code) for entry in self.entries), self.strategy)

    @cached_property
    def reverse(self) -> Mapping[str, str]:
        return MappingProxyType({entry.code: entry.mark for entry in self.entries})

    def code_for(self, mark: str) -> str | None:
        return self.forward.lookup(mark)

    def mark_for(self, base: str, tone: int) -> str | None:
        return self.reverse.get(f"{base}{tone}")

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class DecodedSyllable:
    """Syllable split into tone-free letters and a tone (``0`` when toneless).

    ``ü`` is carried as ``v`` in ``letters``.
    """

    letters: str
    tone: int

    @property
    def numbered(self) -> str:
        """Return letters with the tone digit appended when a tone is present."""

        return f"{self.letters}{self.tone}" if self.tone else self.letters


def _decompose(char: str, syllable: str) -> tuple[str, int]:
    """Split a character absent from the tone table into base letter and tone.

    Args:
        char: One NFC character, e.g. ``ǹ`` or ``ê``.
        syllable: Enclosing syllable, used for diagnostics.

    Returns:
        ``(base_letter, tone)`` with tone ``0`` when no tone mark is present.

    Raises:
        DictionaryConsistencyError: If the character is not a letter with at
            most one tone mark.
    """

    decomposed = unicodedata.normalize("NFD", char)
    tones = [COMBINING_TONE_MARKS[ch] for ch in decomposed if ch in COMBINING_TONE_MARKS]
    base = unicodedata.normalize(
        "NFC", "".join(ch for ch in decomposed if ch not in COMBINING_TONE_MARKS)
    )
    if len(tones) > 1 or len(base) != 1 or not base.isalpha():
        raise DictionaryConsistencyError(
            f"Cannot decode {char!r} in syllable {syllable!r}: no tone-mark entry."
        )
    if base == "ü":
        base = "v"
    elif base == "Ü":
        base = "V"
    return base, tones[0] if tones else 0


def decode_syllable(syllable: str, tone_marks: ToneMarkTable) -> DecodedSyllable:
    """Decode a diacritic or numbered syllable into letters and tone.

    Both ``nǐ`` and ``ni3`` decode to ``DecodedSyllable("ni", 3)``. Tone digits
    ``0`` and ``5`` are treated as toneless.

    Args:
        syllable: Stored syllable in diacritic or numbered form.
        tone_marks: Compiled tone-mark table.

    Returns:
        Decoded syllable.

    Raises:
        DictionaryConsistencyError: If the syllable is empty, carries more than
            one tone, or contains a character that cannot be decoded.
    """

    text = unicodedata.normalize("NFC", syllable.strip())
    tone = 0
    if text and text[-1] in NUMBERED_TONE_DIGITS:
        tone = int(text[-1]) if text[-1] in "1234" else 0
        text = text[:-1]
    if not text:
        raise DictionaryConsistencyError(f"Empty syllable {syllable!r}.")

    letters: list[str] = []
    for char in text:
        code = tone_marks.code_for(char)
        if code is not None:
            entry = ToneMarkEntry(mark=char, code=code)
            base, mark_tone = entry.base, entry.tone
        elif char in COMBINING_TONE_MARKS:
            if not letters:
                raise DictionaryConsistencyError(
                    f"Dangling tone mark at start of syllable {syllable!r}."
                )
            base, mark_tone = "", COMBINING_TONE_MARKS[char]
        else:
            base, mark_tone = _decompose(char, syllable)

        if mark_tone:
            if tone:
                raise DictionaryConsistencyError(f"Multiple tones in syllable {syllable!r}.")
            tone = mark_tone
        letters.append(base)

    return DecodedSyllable(letters="".join(letters), tone=tone)


def _tone_mark_index(letters: str) -> int | None:
    """Return the index of the letter that carries the tone mark.

    ``a``/``e``/``ê`` win, then the ``o`` of ``ou``, then the last of
    ``i o u v``; syllabic nasals fall back to the first ``m``/``n``.
    """

    lower = letters.lower()
    for vowel in ("a", "e", "ê"):
        idx = lower.find(vowel)
        if idx >= 0:
            return idx
    idx = lower.find("ou")
    if idx >= 0:
        return idx
    for idx in range(len(lower) - 1, -1, -1):
        if lower[idx] in "iouv":
            return idx
    for idx, char in enumerate(lower):
        if char in "mn":
            return idx
    return None


def _restore_u_umlaut(letters: str) -> str:
    return letters.replace("v", "ü").replace("V", "Ü")


def to_tone_marks(syllable: str, tone_marks: ToneMarkTable) -> str:
    """Rebuild the diacritic form of a numbered syllable.

    Args:
        syllable: Numbered syllable such as ``lv3`` or ``zhong1``.
        tone_marks: Compiled tone-mark table providing the reverse mapping.

    Returns:
        Diacritic syllable such as ``lǚ`` or ``zhōng``.

    Raises:
        DictionaryConsistencyError: If no letter can carry the tone.
    """

    decoded = decode_syllable(syllable, tone_marks)
    letters = decoded.letters
    if not decoded.tone:
        return _restore_u_umlaut(letters)

    idx = _tone_mark_index(letters)
    if idx is None:
        raise DictionaryConsistencyError(
            f"No letter can carry tone {decoded.tone} in syllable {syllable!r}."
        )

    letter = letters[idx]
    mark = tone_marks.mark_for(letter.lower(), decoded.tone)
    if mark is None:
        display = _restore_u_umlaut(letter.lower())
        mark = unicodedata.normalize("NFC", display + TONE_COMBINING_MARKS[decoded.tone])
    if letter.isupper():
        mark = mark.upper()

    return _restore_u_umlaut(letters[:idx]) + mark + _restore_u_umlaut(letters[idx + 1 :])


def render_syllable(syllable: str, style: ToneStyle, tone_marks: ToneMarkTable) -> str:
    """Render one stored syllable in the requested tone style.

    Args:
        syllable: Stored dictionary syllable (diacritic or numbered form).
        style: Target tone style.
        tone_marks: Compiled tone-mark table.

    Returns:
        Rendered syllable. ``ü`` is written ``v`` in numbered and toneless
        styles.

    Raises:
        DictionaryConsistencyError: If the stored syllable cannot be decoded,
            whatever the target style.
    """

    decoded = decode_syllable(syllable, tone_marks)
    if style is ToneStyle.TONE:
        if syllable and syllable[-1] in NUMBERED_TONE_DIGITS:
            return to_tone_marks(syllable, tone_marks)
        return syllable
    if style is ToneStyle.TONE_NUMBER:
        return decoded.numbered
    return decoded.letters
