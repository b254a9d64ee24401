"""Unit tests for compiled-table TSV serialization helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from hanzi_pinyin.dictionary.compiler import compile_dictionary
from hanzi_pinyin.errors import DictionaryFormatError
from hanzi_pinyin.io.tsv_io import TSV_HEADER, read_compiled_tsv, write_compiled_tsv

SOURCE = [
    "U+884C: xíng,háng  # 行",
    "U+4F60: nǐ  # 你",
    "U+20000: hē  # \U00020000",
]


def test_write_compiled_tsv_emits_header_and_sorted_rows(tmp_path: Path) -> None:
    output = tmp_path / "table.tsv"

    write_compiled_tsv(compile_dictionary(SOURCE), output_path=output)
    lines = output.read_text(encoding="utf-8").splitlines()

    assert lines[0].split("\t") == TSV_HEADER
    assert [line.split("\t") for line in lines[1:]] == [
        ["你", "nǐ"],
        ["行", "xíng,háng"],
        ["\U00020000", "hē"],
    ]


def test_read_compiled_tsv_returns_written_entries(tmp_path: Path) -> None:
    compiled = compile_dictionary(SOURCE)
    output = tmp_path / "table.tsv"
    write_compiled_tsv(compiled, output_path=output, include_header=False)

    assert read_compiled_tsv(output) == compiled.pronunciations


def test_read_compiled_tsv_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "table.tsv"
    path.write_text("char\tpinyin\n\n你\tnǐ\n\n", encoding="utf-8")

    entries = read_compiled_tsv(path)

    assert [(entry.char, entry.pinyin) for entry in entries] == [("你", "nǐ")]


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("你\n", "expected 'char<TAB>pinyin'"),
        ("你\tnǐ\textra\n", "expected 'char<TAB>pinyin'"),
        ("你\t\n", "expected 'char<TAB>pinyin'"),
        ("你好\tnǐ hǎo\n", "single character"),
    ],
)
def test_read_compiled_tsv_rejects_malformed_rows(
    tmp_path: Path, content: str, message: str
) -> None:
    path = tmp_path / "table.tsv"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(DictionaryFormatError, match=message) as excinfo:
        read_compiled_tsv(path)

    assert excinfo.value.line_number == 1


def test_read_compiled_tsv_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Compiled table not found"):
        read_compiled_tsv(tmp_path / "missing.tsv")
