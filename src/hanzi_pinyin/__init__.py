"""Dictionary-driven conversion of Chinese characters to pinyin."""

import logging

from .config import Casing, ConversionConfig, ToneStyle
from .dictionary.repository import PinyinRepository, default_repository
from .engine import convert, convert_to_string
from .errors import ConfigurationError, DictionaryConsistencyError, DictionaryFormatError
from .models import ConversionResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Casing",
    "ConfigurationError",
    "ConversionConfig",
    "ConversionResult",
    "DictionaryConsistencyError",
    "DictionaryFormatError",
    "PinyinRepository",
    "ToneStyle",
    "convert",
    "convert_to_string",
    "default_repository",
]
