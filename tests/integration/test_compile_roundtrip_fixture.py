"""Integration test chaining compile, TSV artifact and conversion on fixture data."""

from __future__ import annotations

from pathlib import Path

import pytest

from hanzi_pinyin.config import Casing, ConversionConfig, ToneStyle
from hanzi_pinyin.dictionary.compiler import compile_dictionary
from hanzi_pinyin.dictionary.repository import PinyinRepository
from hanzi_pinyin.dictionary.sources import read_source_lines
from hanzi_pinyin.engine import convert
from hanzi_pinyin.io.tsv_io import write_compiled_tsv

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "mini_pinyin.txt"
TEXT = "Hi, 你好!\U00020000行中女略的嗯呣欧绿."


@pytest.mark.parametrize("strategy", ["sorted", "hash"])
def test_artifact_repository_converts_like_source_repository(
    tmp_path: Path, strategy: str
) -> None:
    """A repository loaded from the TSV artifact should answer like the source."""

    artifact = tmp_path / "table.tsv"
    write_compiled_tsv(compile_dictionary(read_source_lines(FIXTURE)), output_path=artifact)

    from_source = PinyinRepository.from_path(FIXTURE, strategy=strategy).load()
    from_artifact = PinyinRepository.from_compiled_tsv(artifact, strategy=strategy).load()

    assert len(from_source) == len(from_artifact) == 12
    for style in ToneStyle:
        for heteronym in (False, True):
            config = ConversionConfig(style=style, heteronym=heteronym, case=Casing.LOWER)
            assert convert(TEXT, config, from_artifact) == convert(TEXT, config, from_source)


def test_every_fixture_reading_renders_in_every_style() -> None:
    repository = PinyinRepository.from_path(FIXTURE).load()

    for style in ToneStyle:
        config = ConversionConfig(style=style, heteronym=True)
        results = convert(TEXT, config, repository)
        assert len(results) == len(TEXT)
        for result in results:
            if result.matched:
                assert all(reading for reading in result.readings)
                if style is not ToneStyle.TONE:
                    assert all(reading.isascii() for reading in result.readings)
