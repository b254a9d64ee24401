"""Unit tests for conversion option validation."""

from __future__ import annotations

import dataclasses

import pytest

from hanzi_pinyin.config import Casing, ConversionConfig, ToneStyle
from hanzi_pinyin.errors import ConfigurationError


def test_defaults() -> None:
    config = ConversionConfig()

    assert config.style is ToneStyle.TONE
    assert config.heteronym is False
    assert config.case is Casing.PRESERVE
    assert config.separator == " "
    assert config.heteronym_separator == "/"


def test_string_values_are_coerced_to_enums() -> None:
    config = ConversionConfig(style="tone_number", case="upper")

    assert config.style is ToneStyle.TONE_NUMBER
    assert config.case is Casing.UPPER


def test_config_is_immutable() -> None:
    config = ConversionConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.heteronym = True  # type: ignore[misc]


@pytest.mark.parametrize(
    ("kwargs", "option"),
    [
        ({"style": "tone3"}, "style"),
        ({"case": "title"}, "case"),
        ({"heteronym": "yes"}, "heteronym"),
        ({"separator": None}, "separator"),
        ({"heteronym_separator": 1}, "heteronym_separator"),
        ({"heteronym_separator": ""}, "heteronym_separator"),
    ],
)
def test_invalid_options_name_the_offending_option(kwargs: dict, option: str) -> None:
    with pytest.raises(ConfigurationError, match=option):
        ConversionConfig(**kwargs)


def test_conflicting_separators_are_rejected() -> None:
    with pytest.raises(ConfigurationError, match="Conflicting separator"):
        ConversionConfig(separator="/", heteronym_separator="/")
