"""Conversion options validated once at construction time."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hanzi_pinyin.errors import ConfigurationError


class ToneStyle(str, Enum):
    """How tone information is rendered in each syllable."""

    TONE = "tone"
    """Diacritic marks, e.g. ``nǐ``."""

    TONE_NUMBER = "tone_number"
    """Trailing tone digit, e.g. ``ni3``."""

    NORMAL = "normal"
    """No tone information, e.g. ``ni``."""


class Casing(str, Enum):
    LOWER = "lower"
    UPPER = "upper"
    PRESERVE = "preserve"


def _coerce_enum(enum_type, value, option: str):
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(item.value for item in enum_type)
        raise ConfigurationError(
            f"Invalid {option} {value!r}; expected one of: {allowed}."
        ) from None


@dataclass(frozen=True)
class ConversionConfig:
    """Immutable options for one or many conversion calls.

    Attributes:
        style: Tone rendering style.
        heteronym: Emit every known reading instead of only the first.
        case: Casing applied to rendered syllables (never to pass-through text).
        separator: Joins segments in the flattened string form.
        heteronym_separator: Joins the readings of one character in the
            flattened string form.
    """

    style: ToneStyle = ToneStyle.TONE
    heteronym: bool = False
    case: Casing = Casing.PRESERVE
    separator: str = " "
    heteronym_separator: str = "/"

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", _coerce_enum(ToneStyle, self.style, "style"))
        object.__setattr__(self, "case", _coerce_enum(Casing, self.case, "case"))

        if not isinstance(self.heteronym, bool):
            raise ConfigurationError(f"Invalid heteronym {self.heteronym!r}; expected a bool.")
        for option in ("separator", "heteronym_separator"):
            value = getattr(self, option)
            if not isinstance(value, str):
                raise ConfigurationError(f"Invalid {option} {value!r}; expected a string.")
        if not self.heteronym_separator:
            raise ConfigurationError("Invalid heteronym_separator ''; it must not be empty.")
        if self.separator == self.heteronym_separator:
            raise ConfigurationError(
                f"Conflicting separator and heteronym_separator {self.separator!r}: "
                "flattened output would be ambiguous."
            )
