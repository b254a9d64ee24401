"""Repository exposing compiled pinyin tables as read-only lookups."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import logging
from pathlib import Path
import threading
from typing import Callable, Iterable

from hanzi_pinyin.dictionary.compiler import compile_dictionary, compile_tone_marks
from hanzi_pinyin.dictionary.sources import pypinyin_source_lines, read_source_lines
from hanzi_pinyin.dictionary.tables import LookupTable, build_table
from hanzi_pinyin.io.tsv_io import read_compiled_tsv
from hanzi_pinyin.models import READING_DELIMITER, CompiledDictionary
from hanzi_pinyin.tones import ToneMarkTable
from hanzi_pinyin.validation import validate_pronunciations

logger = logging.getLogger(__name__)

_DEFAULT_LOCK = threading.Lock()
_DEFAULT_REPOSITORY: PinyinRepository | None = None


@dataclass(frozen=True)
class PinyinRepository:
    """Read-only repository over one compiled dictionary.

    The source is compiled once on first access and the resulting tables are
    cached on the instance. Call :meth:`load` to force compilation up front;
    after that the repository is safe to share between threads.
    """

    compiler: Callable[[], CompiledDictionary]
    strategy: str = "sorted"
    name: str = "custom"

    @classmethod
    def from_lines(cls, lines: Iterable[str], strategy: str = "sorted") -> PinyinRepository:
        """Build a repository from in-memory source lines."""

        source = list(lines)
        return cls(compiler=lambda: compile_dictionary(source), strategy=strategy, name="lines")

    @classmethod
    def from_path(cls, path: Path, strategy: str = "sorted") -> PinyinRepository:
        """Build a repository from a pinyin-data style source file."""

        return cls(
            compiler=lambda: compile_dictionary(read_source_lines(path)),
            strategy=strategy,
            name=str(path),
        )

    @classmethod
    def from_pypinyin(cls, strategy: str = "sorted") -> PinyinRepository:
        """Build a repository from pypinyin's bundled character table."""

        return cls(
            compiler=lambda: compile_dictionary(pypinyin_source_lines()),
            strategy=strategy,
            name="pypinyin",
        )

    @classmethod
    def from_compiled_tsv(cls, path: Path, strategy: str = "sorted") -> PinyinRepository:
        """Load a previously compiled TSV artifact without reparsing the source."""

        def load_artifact() -> CompiledDictionary:
            tone_marks = compile_tone_marks()
            pronunciations = read_compiled_tsv(path)
            validate_pronunciations(pronunciations, ToneMarkTable(tone_marks))
            return CompiledDictionary(tone_marks=tone_marks, pronunciations=pronunciations)

        return cls(compiler=load_artifact, strategy=strategy, name=str(path))

    @cached_property
    def compiled(self) -> CompiledDictionary:
        """Compile and cache the dictionary.

        Returns:
            Compiled dictionary tables.

        Raises:
            DictionaryFormatError: If the source is malformed.
            DictionaryConsistencyError: If compiled data fails validation.
        """

        return self.compiler()

    @cached_property
    def tone_marks(self) -> ToneMarkTable:
        return ToneMarkTable(entries=self.compiled.tone_marks, strategy=self.strategy)

    @cached_property
    def pronunciations(self) -> LookupTable:
        """Build and cache the character -> pinyin lookup table."""

        return build_table(
            ((entry.char, entry.pinyin) for entry in self.compiled.pronunciations),
            self.strategy,
        )

    def load(self) -> PinyinRepository:
        """Materialize every cached table and return ``self``."""

        _ = self.pronunciations
        _ = self.tone_marks.forward
        _ = self.tone_marks.reverse
        return self

    def lookup(self, char: str) -> str | None:
        """Return the raw comma-joined readings for ``char``, if known."""

        return self.pronunciations.lookup(char)

    def readings(self, char: str) -> tuple[str, ...] | None:
        """Return declared readings for ``char`` in dictionary order.

        Args:
            char: A single character.

        Returns:
            Tuple of stored syllables, or ``None`` when ``char`` is unknown.
        """

        pinyin = self.pronunciations.lookup(char)
        if pinyin is None:
            return None
        return tuple(pinyin.split(READING_DELIMITER))

    def __len__(self) -> int:
        return len(self.pronunciations)


def default_repository() -> PinyinRepository:
    """Return the process-wide repository backed by pypinyin data.

    The first caller compiles the tables under a lock; every later caller gets
    the same fully loaded instance.
    """

    global _DEFAULT_REPOSITORY
    if _DEFAULT_REPOSITORY is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_REPOSITORY is None:
                logger.debug("Compiling default pinyin repository")
                _DEFAULT_REPOSITORY = PinyinRepository.from_pypinyin().load()
    return _DEFAULT_REPOSITORY
