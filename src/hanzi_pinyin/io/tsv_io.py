"""TSV read/write helpers for compiled pronunciation tables."""

from __future__ import annotations

from pathlib import Path

from hanzi_pinyin.errors import DictionaryFormatError
from hanzi_pinyin.models import CompiledDictionary, PronunciationEntry

TSV_HEADER = ["char", "pinyin"]


def write_compiled_tsv(
    compiled: CompiledDictionary,
    output_path: Path,
    include_header: bool = True,
) -> None:
    """Write the pronunciation table to a TSV file in sorted order.

    Args:
        compiled: Compiler output.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for entry in compiled.pronunciations:
            handle.write("\t".join([entry.char, entry.pinyin]))
            handle.write("\n")


def read_compiled_tsv(path: Path) -> tuple[PronunciationEntry, ...]:
    """Read a pronunciation table written by :func:`write_compiled_tsv`.

    A leading header row is optional.

    Args:
        path: TSV artifact path.

    Returns:
        Entries in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        DictionaryFormatError: If a row does not have exactly two non-empty
            cells or its key is not a single character.
    """

    if not path.exists():
        raise FileNotFoundError(f"Compiled table not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        raw_lines = [line.rstrip("\n") for line in handle]

    entries: list[PronunciationEntry] = []
    for line_number, line in enumerate(raw_lines, start=1):
        if not line.strip():
            continue
        cells = line.split("\t")
        if line_number == 1 and cells == TSV_HEADER:
            continue
        if len(cells) != 2 or not cells[1]:
            raise DictionaryFormatError("expected 'char<TAB>pinyin'", line_number, line)
        char, pinyin = cells
        if len(char) != 1:
            raise DictionaryFormatError("key must be a single character", line_number, line)
        entries.append(PronunciationEntry(char=char, pinyin=pinyin))

    return tuple(entries)

